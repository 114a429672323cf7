"""
Loop nesting strategies.

Each dialect picks one strategy: indentation-delimited blocks (Python) are
tracked with a stack of indentation levels, brace-delimited blocks with a
brace counter.
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Pattern, Tuple


class NestingStrategy(ABC):
    """Computes the deepest loop nesting over a sequence of source lines."""

    name: str = "base"
    loop_patterns: Tuple[Pattern, ...] = ()

    def is_loop_header(self, line: str) -> bool:
        """True when ``line`` opens a loop."""
        return any(pattern.search(line) for pattern in self.loop_patterns)

    @abstractmethod
    def max_depth(self, lines: Iterable[str]) -> int:
        """Return the maximum number of simultaneously open loops."""
        pass


class IndentationNesting(NestingStrategy):
    """Loops close when a later line is indented at or above the loop header."""

    name = "indentation"
    loop_patterns = (
        re.compile(r"^\s*(?:async\s+)?for\s+.*:"),
        re.compile(r"^\s*while\b.*:"),
    )

    def max_depth(self, lines: Iterable[str]) -> int:
        open_loops: List[int] = []
        deepest = 0

        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue

            expanded = line.expandtabs(4)
            indent = len(expanded) - len(expanded.lstrip())

            while open_loops and open_loops[-1] >= indent:
                open_loops.pop()

            if self.is_loop_header(line):
                open_loops.append(indent)
                deepest = max(deepest, len(open_loops))

        return deepest


_LINE_COMMENT = re.compile(r"//.*$")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/")
_STRING_LITERAL = re.compile(r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'|`(?:[^`\\]|\\.)*`")
# `} while (cond);` or a lone `while (cond);` closing a do-block
_DO_WHILE_TAIL = re.compile(r"^\s*\}?\s*while\s*\(.*\)\s*;\s*$")


class BraceNesting(NestingStrategy):
    """
    Loops close with the brace that closes their body.

    Each open loop remembers the brace depth at its header; a ``}`` that
    brings the depth back to that level closes it. A braceless single-line
    loop (``for (...) x++;``) counts toward the depth of its own line only.
    """

    name = "brace"
    loop_patterns = (
        re.compile(r"\bfor\s*\("),
        re.compile(r"\bwhile\s*\("),
        re.compile(r"\bdo\s*(?:\{|$)"),
    )

    @staticmethod
    def _code_only(line: str) -> str:
        line = _STRING_LITERAL.sub('""', line)
        line = _BLOCK_COMMENT.sub("", line)
        return _LINE_COMMENT.sub("", line)

    def max_depth(self, lines: Iterable[str]) -> int:
        braces = 0
        open_loops: List[int] = []
        deepest = 0

        for raw_line in lines:
            line = self._code_only(raw_line)
            if not line.strip():
                continue

            opened = False
            if not _DO_WHILE_TAIL.match(line) and self.is_loop_header(line):
                open_loops.append(braces)
                deepest = max(deepest, len(open_loops))
                opened = True

            for char in line:
                if char == "{":
                    braces += 1
                elif char == "}":
                    braces = max(0, braces - 1)
                    while open_loops and open_loops[-1] >= braces:
                        open_loops.pop()

            if opened and "{" not in line and line.rstrip().endswith(";"):
                if open_loops and open_loops[-1] == braces:
                    open_loops.pop()

        return deepest
