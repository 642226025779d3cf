"""Gini coefficient for inequality measurement.

Applied to module size distributions, it detects lopsided partitions where
one module holds most of the schema files.

    G = 0: perfect equality (all modules same size)
    G -> 1: perfect inequality (one module has all the files)

Formula (for sorted values x_1 <= x_2 <= ... <= x_n, i 1-indexed):
    G = sum((2i - n - 1) * x_i) / (n * sum(x_i))

This is the population form; no small-sample correction is applied, so a
two-module partition tops out at 0.5.
"""

from typing import Sequence, Union


class Gini:
    """Gini coefficient calculations for inequality measurement."""

    @staticmethod
    def gini_coefficient(values: Union[Sequence[float], Sequence[int]]) -> float:
        """Compute the population Gini coefficient.

        Args:
            values: Non-negative values. Must not be empty.

        Returns:
            Gini coefficient in [0, 1).

        Raises:
            ValueError: If values is empty or contains negative values.

        Calibration for module sizes:
            < 0.20: Balanced
            0.20-0.40: Moderate skew
            >= 0.40: One or two modules dominate
        """
        if not values:
            raise ValueError("Cannot compute Gini for empty list")

        if any(v < 0 for v in values):
            raise ValueError("Gini requires non-negative values")

        total = sum(values)
        if total == 0 or len(values) == 1:
            return 0.0

        sorted_vals = sorted(values)
        n = len(sorted_vals)

        numerator = sum((2 * (i + 1) - n - 1) * v for i, v in enumerate(sorted_vals))
        return numerator / (n * total)
