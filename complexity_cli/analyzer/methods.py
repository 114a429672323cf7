"""
Per-method analysis for dialects with explicitly typed method headers.
"""

from dataclasses import dataclass
from typing import List, Optional

from complexity_cli.analyzer.lattice import ComplexityClass, lattice_max
from complexity_cli.analyzer.loops import analyze_loops
from complexity_cli.analyzer.signatures import is_likely_binary_search, is_sorting_idiom
from complexity_cli.plugins.registry import get_dialect

BACKTRACKING_NAME_HINTS = ("solve", "backtrack")


@dataclass(frozen=True)
class MethodReport:
    name: str
    body: str
    complexity: ComplexityClass
    is_backtracking: bool = False


def method_complexity(body: str, language: Optional[str] = None) -> ComplexityClass:
    """Binary search, then sorting, then the body's own loop nesting."""
    if is_likely_binary_search(body):
        return ComplexityClass.LOGARITHMIC
    if is_sorting_idiom(body):
        return ComplexityClass.LINEARITHMIC
    return analyze_loops(body, language).implied_time_class


def analyze_methods(source: str, language: Optional[str] = None) -> List[MethodReport]:
    """Report every method of an explicit-method dialect; empty otherwise."""
    dialect = get_dialect(language)
    if not dialect.explicit_methods:
        return []

    reports = []
    for decl in dialect.find_functions(source or ""):
        lowered = decl.name.lower()
        reports.append(
            MethodReport(
                name=decl.name,
                body=decl.body,
                complexity=method_complexity(decl.body, dialect.name),
                is_backtracking=any(hint in lowered for hint in BACKTRACKING_NAME_HINTS),
            )
        )
    return reports


def best_method_complexity(
    source: str, language: Optional[str] = None
) -> Optional[ComplexityClass]:
    """Lattice max over the per-method estimates, or None with no methods."""
    reports = analyze_methods(source, language)
    if not reports:
        return None

    best = reports[0].complexity
    for report in reports[1:]:
        best = lattice_max(best, report.complexity)
    return best
