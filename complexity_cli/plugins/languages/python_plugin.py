import re

from complexity_cli.analyzer.nesting import IndentationNesting
from complexity_cli.analyzer.regions import extract_indented_body

from ..language_plugin import LanguagePlugin


class PythonPlugin(LanguagePlugin):
    """Python dialect: indentation blocks, ``def`` declarations."""

    name = "python"
    aliases = ["py", "python3"]
    extensions = [".py", ".pyw"]
    function_patterns = (
        re.compile(r"^[ \t]*(?:async[ \t]+)?def[ \t]+(\w+)[ \t]*\(", re.MULTILINE),
    )

    def nesting_strategy(self):
        return IndentationNesting()

    def extract_body(self, source: str, offset: int) -> str:
        """Python bodies end at the first line back at the header's indentation."""
        return extract_indented_body(source, offset)
