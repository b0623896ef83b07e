"""Tests for utils/math_utils.py."""

from __future__ import annotations

import pytest

from cmms_core.utils import math_utils


class TestRoundHalfUp:
    """Day counts round halves up, unlike Python's banker's rounding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (2.49, 2), (0.5, 1), (-0.25, 0), (-2.5, -2), (-2.6, -3), (7.0, 7)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert math_utils.round_half_up(value) == expected


class TestPercentages:
    """Test clamped percentages."""

    def test_half(self) -> None:
        assert math_utils.calculate_percentage(15, 30) == 50.0

    def test_clamped_to_hundred(self) -> None:
        assert math_utils.calculate_percentage(45, 30) == 100.0

    def test_clamped_to_zero(self) -> None:
        assert math_utils.calculate_percentage(-5, 30) == 0.0

    def test_zero_target(self) -> None:
        assert math_utils.calculate_percentage(5, 0) == 0.0


class TestHelpers:
    """Test clamp, round_hours and safe_divide."""

    def test_clamp(self) -> None:
        assert math_utils.clamp(150, 0, 100) == 100
        assert math_utils.clamp(-10, 0, 100) == 0
        assert math_utils.clamp(42, 0, 100) == 42

    def test_round_hours(self) -> None:
        assert math_utils.round_hours(12.3456) == 12.35
        assert math_utils.round_hours(12.3456, 1) == 12.3

    def test_safe_divide(self) -> None:
        assert math_utils.safe_divide(10, 4) == 2.5
        assert math_utils.safe_divide(10, 0) is None
        assert math_utils.safe_divide(10, None) is None
