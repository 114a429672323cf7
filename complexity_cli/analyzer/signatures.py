"""
Signature library: independent idiom detectors over source text.

Every detector lower-cases its input and checks an ordered tuple of cues.
A detector fires when any cue matches, except the binary-search detector,
which needs several distinct cues.
"""

import re
from typing import Callable, Dict, Optional, Tuple

from complexity_cli.plugins.registry import get_dialect

# Window for "A near B" cues
_NEAR = r"[\s\S]{0,120}?"

BINARY_SEARCH_MIN_CUES = 3

BINARY_SEARCH_CUES = (
    re.compile(r"binary[\s_-]*search"),
    # midpoint: (lo + hi) / 2, // 2, >> 1, >>> 1
    re.compile(r"/\s*2\b|>>>?\s*1\b"),
    # bound narrowing from the midpoint
    re.compile(
        r"\b(?:left|right|low|high|lo|hi|start|end|first|last|l|r)\s*=\s*(?:mid|middle|m)\b"
    ),
    re.compile(r"\[\s*(?:mid|middle|m)\s*\]"),
    re.compile(
        r"(?:===?|!==?|<=|>=|<|>)\s*(?:target|key|needle|goal)\b"
        r"|\b(?:target|key|needle|goal)\s*(?:===?|!==?|<=|>=|<|>)"
        r"|===?\s*x\b"
    ),
)

BACKTRACKING_CUES = (
    re.compile(r"\bn[-_ ]?queens?"),
    re.compile(r"(?:is|check)_?safe" + _NEAR + r"queen"),
    re.compile(r"place" + _NEAR + r"queen"),
    re.compile(r"\b(?:boolean|bool|void)\s+(?:solve|backtrack|is_?safe)\s*\("),
    re.compile(r"\bis_?safe\b"),
    re.compile(r"solve.*board"),
    re.compile(r"(?:solve|find)\w*util"),
    re.compile(r"check.*diagonal"),
    re.compile(r"check.*row.*col"),
    re.compile(r"backtrack"),
    re.compile(r"\(\s*board\s*,\s*\d+\s*\)"),
    re.compile(r"\(\s*grid\s*,\s*\d+\s*,\s*\d+\s*\)"),
)

# Calls into a standard library sort
_LIBRARY_SORT = r"\.sort\s*\(|\bsorted\s*\(|(?<![\w.])sort\s*\(|\b(?:arrays|collections)\.sort\b"

SORTING_CUES = (
    re.compile(r"\.sort\s*\("),
    re.compile(r"sort\s*\("),
    re.compile(r"\bsorted\s*\("),
    re.compile(r"quick_?sort|merge_?sort|heap_?sort"),
    re.compile(r"\b(?:arrays|collections)\.sort\b|std::sort\b|\bqsort\s*\("),
    re.compile(r"partition" + _NEAR + r"pivot|pivot" + _NEAR + r"partition"),
    re.compile(r"merge" + _NEAR + r"(?:left|right)"),
)

MERGE_SORT_CUES = (
    re.compile(r"merge_?sort"),
    re.compile(r"merge" + _NEAR + r"(?:left|right)"),
    re.compile(r"timsort|stable_sort"),
    # library sorts are merge-based (TimSort) and allocate a linear buffer
    re.compile(_LIBRARY_SORT),
)

ALLOCATION_CUES = (
    re.compile(
        r"\bnew\s+(?:array|map|set|weakmap|weakset|node|treenode|listnode|arraylist|"
        r"linkedlist|hashmap|hashset|treemap|treeset|arraydeque|priorityqueue|stack|vector)\b"
    ),
    # sized allocation: new int[n], new Array(n), new int[n][m]
    re.compile(r"\bnew\s+\w+\s*\[\s*[\w.]+"),
    re.compile(r"(?:[=(,:\[]|\breturn)\s*\[\s*\]"),
    re.compile(r"(?:[=(,:\[]|\breturn)\s*\{\s*\}"),
    re.compile(r"\b(?:list|dict|set|deque|array)\s*\(\s*\)"),
    re.compile(r"\b(?:defaultdict|counter|deque)\s*\("),
    # list repetition: [0] * n
    re.compile(r"(?:[=(,\[]|\breturn)\s*\[[^\[\]\n]*\]\s*\*"),
    re.compile(r"\bmalloc\s*\(\s*sizeof\s*\(|\bcalloc\s*\("),
    re.compile(
        r"\b(?:array|arraylist|vector|list|map|set|hashmap|hashset|deque|queue|stack)\s*<[^>\n]*>"
    ),
    re.compile(r"\b(?:list|dict|set|deque)\[[^\]\n]*\]"),
)


def _normalize(code: Optional[str]) -> str:
    return (code or "").lower()


def _any_cue(cues: Tuple, text: str) -> bool:
    return any(cue.search(text) for cue in cues)


def binary_search_cue_count(code: str) -> int:
    """Number of distinct binary-search cues present in ``code``."""
    text = _normalize(code)
    return sum(1 for cue in BINARY_SEARCH_CUES if cue.search(text))


def is_likely_binary_search(code: str) -> bool:
    return binary_search_cue_count(code) >= BINARY_SEARCH_MIN_CUES


def is_backtracking_idiom(code: str, language: Optional[str] = None) -> bool:
    text = _normalize(code)
    if _any_cue(BACKTRACKING_CUES, text):
        return True
    dialect = get_dialect(language)
    return _any_cue(dialect.backtracking_patterns, text)


def is_sorting_idiom(code: str) -> bool:
    return _any_cue(SORTING_CUES, _normalize(code))


def is_merge_sort_idiom(code: str) -> bool:
    """Merge-style sorting; only used to refine the space class."""
    return _any_cue(MERGE_SORT_CUES, _normalize(code))


def has_logarithmic_idiom(code: str) -> bool:
    """
    Logarithmic shape; today this is exactly the binary-search detector,
    so halving loops without search vocabulary are not recognised.
    """
    return is_likely_binary_search(code)


def allocates_new_container(code: str) -> bool:
    return _any_cue(ALLOCATION_CUES, _normalize(code))


# Detector name -> predicate(code, language), in the order the combiner asks
SIGNATURES: Dict[str, Callable[[str, Optional[str]], bool]] = {
    "binary_search": lambda code, language=None: is_likely_binary_search(code),
    "backtracking": is_backtracking_idiom,
    "sorting": lambda code, language=None: is_sorting_idiom(code),
    "merge_sort": lambda code, language=None: is_merge_sort_idiom(code),
    "logarithmic": lambda code, language=None: has_logarithmic_idiom(code),
    "allocation": lambda code, language=None: allocates_new_container(code),
}


def detect_signatures(code: str, language: Optional[str] = None) -> Dict[str, bool]:
    """Run every detector and report which fired."""
    return {name: detector(code, language) for name, detector in SIGNATURES.items()}
