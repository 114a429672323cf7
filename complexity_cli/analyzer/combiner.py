"""
Complexity combiner.

The classification protocol is an ordered tuple of rules. Each rule has a
predicate and an effect; rules are folded left to right over a running
``AnalysisResult``. A terminal rule that fires ends the fold with its own
result. Every other effect raises the running estimate through
``lattice_max`` and never lowers it.
"""

from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Callable, Dict, List, Optional, Tuple

from complexity_cli.analyzer.lattice import ComplexityClass, lattice_max
from complexity_cli.analyzer.loops import LoopSignal, analyze_loops
from complexity_cli.analyzer.methods import best_method_complexity
from complexity_cli.analyzer.recursion import RecursionSignal, analyze_recursion
from complexity_cli.analyzer.signatures import (
    allocates_new_container,
    has_logarithmic_idiom,
    is_backtracking_idiom,
    is_likely_binary_search,
    is_merge_sort_idiom,
    is_sorting_idiom,
)
from complexity_cli.core.logging import log_debug
from complexity_cli.plugins.registry import get_dialect

C = ComplexityClass


@dataclass(frozen=True)
class AnalysisResult:
    time: ComplexityClass = C.CONSTANT
    space: ComplexityClass = C.CONSTANT

    def to_dict(self) -> Dict[str, str]:
        return {"time": self.time.label, "space": self.space.label}


class AnalysisContext:
    """Inputs of one classification; signals are computed on first use."""

    def __init__(self, code: str, language: Optional[str]):
        self.code = code or ""
        self.language = language
        self.dialect = get_dialect(language)

    @cached_property
    def recursion(self) -> RecursionSignal:
        return analyze_recursion(self.code, self.dialect.name)

    @cached_property
    def loops(self) -> LoopSignal:
        return analyze_loops(self.code, self.dialect.name)

    @cached_property
    def best_method(self) -> Optional[ComplexityClass]:
        return best_method_complexity(self.code, self.dialect.name)


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[AnalysisContext], bool]
    effect: Callable[[AnalysisContext, AnalysisResult], AnalysisResult]
    terminal: bool = False


def _raise_time(result: AnalysisResult, candidate: ComplexityClass) -> AnalysisResult:
    return replace(result, time=lattice_max(result.time, candidate))


def _raise_space(result: AnalysisResult, candidate: ComplexityClass) -> AnalysisResult:
    return replace(result, space=lattice_max(result.space, candidate))


def _recursion_shape(ctx: AnalysisContext, result: AnalysisResult) -> AnalysisResult:
    signal = ctx.recursion
    if signal.is_permutation:
        return AnalysisResult(C.FACTORIAL, C.LINEAR)
    if signal.multiple_recursive_calls:
        time = C.LINEAR_EXPONENTIAL if signal.processes_all_elements else C.EXPONENTIAL
        return AnalysisResult(time, C.LINEAR)
    if signal.is_divide_and_conquer:
        time = C.LINEARITHMIC if signal.processes_all_elements else C.LOGARITHMIC
        return AnalysisResult(time, C.LOGARITHMIC)
    return AnalysisResult(C.LINEAR, C.LINEAR)


def _loop_nesting(ctx: AnalysisContext, result: AnalysisResult) -> AnalysisResult:
    if ctx.loops.has_factorial_idiom:
        return _raise_time(result, C.FACTORIAL)
    return _raise_time(result, ctx.loops.implied_time_class)


def _sorting(ctx: AnalysisContext, result: AnalysisResult) -> AnalysisResult:
    result = _raise_time(result, C.LINEARITHMIC)
    if is_merge_sort_idiom(ctx.code):
        result = _raise_space(result, C.LINEAR)
    return result


def _allocation(ctx: AnalysisContext, result: AnalysisResult) -> AnalysisResult:
    depth = ctx.loops.max_nesting_depth
    candidate = C.polynomial(depth) if depth > 1 else C.LINEAR
    return _raise_space(result, candidate)


RULES: Tuple[Rule, ...] = (
    Rule(
        "binary_search",
        lambda ctx: is_likely_binary_search(ctx.code),
        lambda ctx, result: AnalysisResult(C.LOGARITHMIC, C.CONSTANT),
        terminal=True,
    ),
    Rule(
        "backtracking",
        lambda ctx: is_backtracking_idiom(ctx.code, ctx.dialect.name),
        lambda ctx, result: AnalysisResult(C.FACTORIAL, C.QUADRATIC),
        terminal=True,
    ),
    Rule("recursion", lambda ctx: ctx.recursion.has_recursion, _recursion_shape),
    Rule(
        "loops",
        lambda ctx: ctx.loops.has_factorial_idiom or ctx.loops.max_nesting_depth > 0,
        _loop_nesting,
    ),
    Rule(
        "methods",
        lambda ctx: ctx.dialect.explicit_methods and ctx.best_method is not None,
        lambda ctx, result: _raise_time(result, ctx.best_method),
    ),
    Rule("sorting", lambda ctx: is_sorting_idiom(ctx.code), _sorting),
    Rule(
        "logarithmic",
        lambda ctx: has_logarithmic_idiom(ctx.code),
        lambda ctx, result: _raise_time(result, C.LOGARITHMIC),
    ),
    Rule("allocation", lambda ctx: allocates_new_container(ctx.code), _allocation),
)


@dataclass(frozen=True)
class RuleTrace:
    rule: str
    fired: bool
    result: AnalysisResult


@dataclass(frozen=True)
class Explanation:
    result: AnalysisResult
    language: str
    steps: List[RuleTrace] = field(default_factory=list)


def explain(
    code: str, language: Optional[str] = None, rules: Tuple[Rule, ...] = RULES
) -> Explanation:
    """Run the cascade and record what each rule did."""
    ctx = AnalysisContext(code, language)
    result = AnalysisResult()
    steps: List[RuleTrace] = []

    for rule in rules:
        fired = bool(rule.applies(ctx))
        if fired:
            result = rule.effect(ctx, result)
        steps.append(RuleTrace(rule.name, fired, result))
        if fired and rule.terminal:
            break

    log_debug(
        f"Classified as time={result.time.label}, space={result.space.label}",
        language=ctx.dialect.name,
    )
    return Explanation(result=result, language=ctx.dialect.name, steps=steps)


def classify(code: str, language: Optional[str] = None) -> AnalysisResult:
    """Estimate the ``(time, space)`` complexity of ``code``."""
    return explain(code, language).result
