"""
Loop-nest analysis: nesting depth and factorial-style loop idioms.
"""

import re
from dataclasses import dataclass
from typing import Optional

from complexity_cli.analyzer.lattice import ComplexityClass
from complexity_cli.analyzer.signatures import is_likely_binary_search, is_sorting_idiom
from complexity_cli.plugins.registry import get_dialect

FACTORIAL_PATTERNS = (
    re.compile(r"\bn!(?!=)"),
    re.compile(r"factorial"),
    re.compile(r"permut"),
    # loop bound of n-1
    re.compile(r"\bfor\s*\(.*\bn\s*-\s*1\b.*\)"),
    re.compile(r"\bfor\b.*\brange\s*\(.*\bn\s*-\s*1\b"),
)


@dataclass(frozen=True)
class LoopSignal:
    max_nesting_depth: int = 0
    has_factorial_idiom: bool = False
    implied_time_class: ComplexityClass = ComplexityClass.CONSTANT


def implied_time_class(depth: int, text: str) -> ComplexityClass:
    """
    Class implied by ``depth`` nested loops.

    A binary-search or sorting idiom in the same text takes precedence over
    the raw nesting count.
    """
    if is_likely_binary_search(text):
        return ComplexityClass.LOGARITHMIC
    if is_sorting_idiom(text):
        return ComplexityClass.LINEARITHMIC
    return ComplexityClass.polynomial(depth)


def analyze_loops(source: str, language: Optional[str] = None) -> LoopSignal:
    text = (source or "").lower()
    lines = text.splitlines()

    strategy = get_dialect(language).nesting_strategy()
    depth = strategy.max_depth(lines)
    has_factorial = any(
        pattern.search(line) for line in lines for pattern in FACTORIAL_PATTERNS
    )

    return LoopSignal(
        max_nesting_depth=depth,
        has_factorial_idiom=has_factorial,
        implied_time_class=implied_time_class(depth, text),
    )
