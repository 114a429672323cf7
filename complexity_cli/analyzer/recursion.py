"""
Recursion analysis: which declared functions call themselves, and how.
"""

import re
from dataclasses import dataclass, fields
from typing import List, Optional

from complexity_cli.analyzer.signatures import is_likely_binary_search, is_sorting_idiom
from complexity_cli.core.logging import log_debug
from complexity_cli.plugins.registry import get_dialect

PERMUTATION_VOCABULARY = re.compile(r"permut|factorial", re.IGNORECASE)

# swap(a, i, j) / a[i], a[j] = a[j], a[i] / [a[i], a[j]] = [a[j], a[i]]
SWAP_PATTERNS = (
    re.compile(r"\bswap\w*\s*\(", re.IGNORECASE),
    re.compile(r"(\w+\[[^\]]+\])\s*,\s*(\w+\[[^\]]+\])\s*=\s*\2\s*,\s*\1"),
    re.compile(r"\[\s*(\w+\[[^\]]+\])\s*,\s*(\w+\[[^\]]+\])\s*\]\s*=\s*\[\s*\2\s*,\s*\1\s*\]"),
)

HALVING = re.compile(r"/\s*2\b|\*\s*0\.5\b|>>>?\s*1\b")
MIDPOINT_VOCABULARY = re.compile(r"\b(?:mid|middle|pivot)\b", re.IGNORECASE)

ELEMENTWISE = re.compile(
    r"\bfor\b|\bwhile\b|\bdo\s*\{|\.(?:foreach|map|filter|reduce|stream)\s*\(",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class RecursionSignal:
    has_recursion: bool = False
    is_permutation: bool = False
    multiple_recursive_calls: bool = False
    processes_all_elements: bool = False
    is_divide_and_conquer: bool = False

    def merge(self, other: "RecursionSignal") -> "RecursionSignal":
        """OR-combine two signals field by field."""
        return RecursionSignal(
            **{f.name: getattr(self, f.name) or getattr(other, f.name) for f in fields(self)}
        )


def _self_call_pattern(name: str):
    return re.compile(r"\b" + re.escape(name) + r"\s*\(")


def _swaps_then_recurses(body: str, call_pattern) -> bool:
    for pattern in SWAP_PATTERNS:
        swap = pattern.search(body)
        if swap and call_pattern.search(body, swap.end()):
            return True
    return False


def function_signal(name: str, body: str) -> RecursionSignal:
    """Recursion shape of one function, given its name and extracted body."""
    call_pattern = _self_call_pattern(name)
    calls = call_pattern.findall(body)
    if not calls:
        return RecursionSignal()

    is_permutation = bool(
        PERMUTATION_VOCABULARY.search(name)
        or PERMUTATION_VOCABULARY.search(body)
        or _swaps_then_recurses(body, call_pattern)
    )
    is_divide_and_conquer = bool(
        is_likely_binary_search(body)
        or is_sorting_idiom(body)
        or (HALVING.search(body) and MIDPOINT_VOCABULARY.search(body))
    )

    return RecursionSignal(
        has_recursion=True,
        is_permutation=is_permutation,
        multiple_recursive_calls=len(calls) > 1,
        processes_all_elements=bool(ELEMENTWISE.search(body)),
        is_divide_and_conquer=is_divide_and_conquer,
    )


def analyze_recursion(source: str, language: Optional[str] = None) -> RecursionSignal:
    """
    OR-combine the recursion shape of every declared function.

    Helpers are not told apart from the main algorithm: any recursive
    function in the snippet contributes.
    """
    signal = RecursionSignal()
    recursive: List[str] = []

    for decl in get_dialect(language).find_functions(source or ""):
        found = function_signal(decl.name, decl.body)
        if found.has_recursion:
            recursive.append(decl.name)
            signal = signal.merge(found)

    if recursive:
        log_debug(f"Recursive functions: {', '.join(recursive)}")
    return signal
