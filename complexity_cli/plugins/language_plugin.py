import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Pattern, Tuple

from complexity_cli.analyzer.nesting import NestingStrategy
from complexity_cli.analyzer.regions import extract_body

# Words a typed-header scan can mistake for a return type or a method name
CONTROL_KEYWORDS = frozenset(
    {
        "if",
        "else",
        "for",
        "while",
        "do",
        "switch",
        "case",
        "catch",
        "try",
        "return",
        "new",
        "throw",
        "sizeof",
        "synchronized",
        "function",
    }
)


@dataclass(frozen=True)
class FunctionDecl:
    """A declared function or method and its extracted body."""

    name: str
    offset: int
    body: str


class LanguagePlugin(ABC):
    """
    Base class for all language dialects.

    Each plugin must implement or override the following:

    Attributes:
        name (str): Unique string identifier for the language (e.g., "python").
        aliases (list): Alternate tags resolving to this plugin (e.g., "py").
        extensions (list): File suffixes used to detect the language.
        explicit_methods (bool): True for dialects whose methods carry typed
            headers; enables the per-method analysis.
        function_patterns (tuple): Compiled declaration patterns; the first
            non-empty group of each match is the function name.
        backtracking_patterns (tuple): Dialect-only backtracking cues, matched
            against lower-cased source.
    """

    name: str = "base"
    aliases: List[str] = []
    extensions: List[str] = []
    explicit_methods: bool = False
    function_patterns: Tuple[Pattern, ...] = ()
    backtracking_patterns: Tuple[Pattern, ...] = ()

    @abstractmethod
    def nesting_strategy(self) -> NestingStrategy:
        """
        Return the strategy that tracks loop nesting for this dialect.

        Returns:
            NestingStrategy: indentation- or brace-based.
        """
        pass

    def extract_body(self, source: str, offset: int) -> str:
        """Hook: extract the body of the declaration found at ``offset``."""
        return extract_body(source, offset)

    def _body_offset(self, match: "re.Match") -> int:
        """Hook: where body extraction starts for a declaration match."""
        return match.start()

    def find_functions(self, source: str) -> List[FunctionDecl]:
        """
        Template method: scan ``source`` for declarations and extract bodies.

        Args:
            source: The code to scan.

        Returns:
            Declarations in source order; a name is listed once per header.
        """
        found = {}
        for pattern in self.function_patterns:
            for match in pattern.finditer(source):
                name = next((g for g in match.groups() if g), None)
                if not name or name in CONTROL_KEYWORDS:
                    continue
                if match.start() in found:
                    continue
                body = self.extract_body(source, self._body_offset(match))
                found[match.start()] = FunctionDecl(name, match.start(), body)

        return [found[offset] for offset in sorted(found)]

    def describe(self) -> dict:
        """Summary used by the ``languages`` command."""
        return {
            "name": self.name,
            "aliases": list(self.aliases),
            "extensions": list(self.extensions),
            "nesting": self.nesting_strategy().name,
            "explicit_methods": self.explicit_methods,
        }
