"""
Complexity classes, their ordering table and growth functions.
"""

import math
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class ComplexityClass(Enum):
    """Asymptotic growth bound, identified by its display label."""

    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n^2)"
    CUBIC = "O(n^3)"
    EXPONENTIAL = "O(2^n)"
    FACTORIAL = "O(n!)"
    LINEAR_EXPONENTIAL = "O(n·2^n)"

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position in the ordering table; 0 means unranked."""
        return _RANK.get(self, 0)

    @classmethod
    def from_label(cls, label: str) -> Optional["ComplexityClass"]:
        """Look up a class by label, accepting common alternate spellings."""
        normalized = " ".join(label.strip().split())
        normalized = _ALTERNATE_LABELS.get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def polynomial(cls, degree: int) -> "ComplexityClass":
        """
        Class for ``degree`` nested loops.

        Degrees above three collapse to O(n^3), the highest polynomial label.
        """
        if degree <= 0:
            return cls.CONSTANT
        if degree == 1:
            return cls.LINEAR
        if degree == 2:
            return cls.QUADRATIC
        return cls.CUBIC

    def __str__(self) -> str:
        return self.value


# O(n·2^n) is unranked; a later fold step may overwrite it.
_ORDER = (
    ComplexityClass.CONSTANT,
    ComplexityClass.LOGARITHMIC,
    ComplexityClass.LINEAR,
    ComplexityClass.LINEARITHMIC,
    ComplexityClass.QUADRATIC,
    ComplexityClass.CUBIC,
    ComplexityClass.EXPONENTIAL,
    ComplexityClass.FACTORIAL,
)
_RANK: Dict[ComplexityClass, int] = {cls: i + 1 for i, cls in enumerate(_ORDER)}

_ALTERNATE_LABELS = {
    "O(n*2^n)": "O(n·2^n)",
    "O(n * 2^n)": "O(n·2^n)",
    "O(n2^n)": "O(n·2^n)",
    "O(n²)": "O(n^2)",
    "O(n³)": "O(n^3)",
    "O(2ⁿ)": "O(2^n)",
    "O(logn)": "O(log n)",
    "O(nlogn)": "O(n log n)",
}


def lattice_max(
    current: ComplexityClass, candidate: ComplexityClass
) -> ComplexityClass:
    """Keep whichever class ranks higher; ties keep ``current``."""
    return candidate if candidate.rank > current.rank else current


# Closed-form growth functions the chart samples. Anything else samples to 0.
_GROWTH = {
    "O(1)": lambda n: 1.0,
    "O(log n)": lambda n: math.log(n),
    "O(n)": lambda n: float(n),
    "O(n log n)": lambda n: n * math.log(n),
    "O(n^2)": lambda n: float(n * n),
    "O(2^n)": lambda n: float(2**n),
}


def growth_value(label: Union[str, ComplexityClass], n: int) -> float:
    """Evaluate the growth function for ``label`` at ``n``."""
    if isinstance(label, ComplexityClass):
        label = label.value
    func = _GROWTH.get(label)
    if func is None:
        return 0.0
    return func(n)


def sample_growth(
    label: Union[str, ComplexityClass], n_max: int = 100
) -> List[Tuple[int, float]]:
    """Sample ``(n, f(n))`` for ``n = 1..n_max``."""
    return [(n, growth_value(label, n)) for n in range(1, n_max + 1)]
