"""Tests for descriptive statistics helpers."""

import pytest

from proto_modularizer.math import Statistics


class TestMean:
    def test_basic(self):
        assert Statistics.mean([1, 2, 3, 4]) == pytest.approx(2.5)

    def test_empty_is_zero(self):
        assert Statistics.mean([]) == 0.0

    def test_returns_float(self):
        assert isinstance(Statistics.mean([2, 2]), float)


class TestMedian:
    def test_odd(self):
        assert Statistics.median([5, 1, 3]) == 3.0

    def test_even_averages_middle(self):
        assert Statistics.median([1, 2, 3, 10]) == pytest.approx(2.5)

    def test_empty_is_zero(self):
        assert Statistics.median([]) == 0.0


class TestPopulationStdDev:
    def test_constant(self):
        assert Statistics.pstdev([4, 4, 4]) == 0.0

    def test_divides_by_n(self):
        # mean 5, squared deviations 9+1+1+9 = 20, 20/4 = 5
        assert Statistics.pstdev([2, 4, 6, 8]) == pytest.approx(5 ** 0.5)

    def test_single_value(self):
        assert Statistics.pstdev([7]) == 0.0

    def test_empty_is_zero(self):
        assert Statistics.pstdev([]) == 0.0


class TestClamp:
    @pytest.mark.parametrize(
        "value, expected",
        [(-5.0, 0.0), (0.0, 0.0), (42.5, 42.5), (100.0, 100.0), (130.0, 100.0)],
    )
    def test_clamp(self, value, expected):
        assert Statistics.clamp(value, 0.0, 100.0) == expected
