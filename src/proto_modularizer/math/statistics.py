"""Descriptive statistics over module size and degree distributions."""

from typing import Sequence, Union

import numpy as np

Numbers = Union[Sequence[float], Sequence[int]]


class Statistics:
    """Statistical summary methods. Empty input yields 0.0 throughout."""

    @staticmethod
    def mean(values: Numbers) -> float:
        """Compute arithmetic mean."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(values))

    @staticmethod
    def median(values: Numbers) -> float:
        """Compute median (average of the two middle values for even n)."""
        if len(values) == 0:
            return 0.0
        return float(np.median(values))

    @staticmethod
    def pstdev(values: Numbers) -> float:
        """Compute population standard deviation (divides by n, not n-1)."""
        if len(values) == 0:
            return 0.0
        return float(np.std(values, ddof=0))

    @staticmethod
    def clamp(value: float, lower: float, upper: float) -> float:
        return max(lower, min(upper, value))
