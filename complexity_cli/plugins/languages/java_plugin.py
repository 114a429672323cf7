import re

from complexity_cli.analyzer.nesting import BraceNesting

from ..language_plugin import LanguagePlugin

# Header with modifiers, a return type and a parameter list ending on `{`
TYPED_METHOD_HEADER = re.compile(
    r"^[ \t]*(?:(?:public|private|protected|static|final|abstract|synchronized)\s+)*"
    r"(?!(?:else|new|return|throw)\b)[\w<>\[\],.?]+\s+(\w+)\s*\([^)]*\)\s*"
    r"(?:throws\s+[\w.,\s]+?)?\s*\{",
    re.MULTILINE,
)


class JavaPlugin(LanguagePlugin):
    """Java dialect: brace blocks and explicitly typed method headers."""

    name = "java"
    aliases = ["jav"]
    extensions = [".java"]
    explicit_methods = True
    function_patterns = (TYPED_METHOD_HEADER,)
    backtracking_patterns = (
        re.compile(r"void\s+backtrack\s*\("),
        re.compile(r"boolean\s+backtrack\s*\("),
        re.compile(r"list<list<string>>\s+solve"),
        re.compile(r"arraylist<string>\s+solve"),
    )

    def nesting_strategy(self):
        return BraceNesting()

    def _body_offset(self, match):
        return match.end() - 1
