"""Mathematical utilities for partition evaluation."""

from .gini import Gini
from .statistics import Statistics

__all__ = ["Gini", "Statistics"]
