import re

from complexity_cli.analyzer.nesting import BraceNesting

from ..language_plugin import LanguagePlugin


class JavaScriptPlugin(LanguagePlugin):
    """
    JavaScript dialect: brace blocks, ``function`` declarations, function
    expressions and arrow functions bound to a name, and class methods.

    This is also the fallback dialect for unknown language tags.
    """

    name = "javascript"
    aliases = ["js", "node", "typescript", "ts"]
    extensions = [".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx"]
    function_patterns = (
        re.compile(r"\bfunction\s*\*?\s*(\w+)\s*\([^)]*\)\s*\{"),
        re.compile(
            r"\b(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?"
            r"(?:function\b[^(]*\([^)]*\)|\([^)]*\)\s*=>|\w+\s*=>)\s*\{"
        ),
        re.compile(
            r"^[ \t]*(?:static\s+)?(?:async\s+)?(\w+)\s*\([^)]*\)\s*\{",
            re.MULTILINE,
        ),
    )

    def nesting_strategy(self):
        return BraceNesting()

    def _body_offset(self, match):
        # Patterns end on the opening brace; start there so default
        # parameters like `(opts = {})` are not taken for the body.
        return match.end() - 1
