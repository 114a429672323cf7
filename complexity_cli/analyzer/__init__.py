from .combiner import AnalysisResult, Explanation, classify, explain
from .lattice import ComplexityClass, growth_value, lattice_max, sample_growth
from .loops import LoopSignal, analyze_loops
from .methods import MethodReport, analyze_methods, best_method_complexity
from .recursion import RecursionSignal, analyze_recursion
from .regions import extract_body, extract_indented_body
from .signatures import detect_signatures


__all__ = [
    "AnalysisResult",
    "ComplexityClass",
    "Explanation",
    "LoopSignal",
    "MethodReport",
    "RecursionSignal",
    "analyze_loops",
    "analyze_methods",
    "analyze_recursion",
    "best_method_complexity",
    "classify",
    "detect_signatures",
    "explain",
    "extract_body",
    "extract_indented_body",
    "growth_value",
    "lattice_max",
    "sample_growth",
]
