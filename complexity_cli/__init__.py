from complexity_cli.analyzer import AnalysisResult, ComplexityClass, classify, explain
from complexity_cli.visualization import ComplexityVisualizer


__all__ = [
    "AnalysisResult",
    "ComplexityClass",
    "ComplexityVisualizer",
    "classify",
    "explain",
]
