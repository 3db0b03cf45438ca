import pytest
from decimal import Decimal

from mirr.engine.errors import PowerEvaluationError
from mirr.engine.power import decimal_power
from mirr.engine.precision import divide

TOLERANCE = Decimal("1e-12")


class TestIntegerExponents:
    def test_exact_cube(self):
        assert decimal_power(Decimal("1.1"), Decimal("3")) == Decimal("1.331")

    def test_zero_exponent(self):
        assert decimal_power(Decimal("7.5"), Decimal("0")) == Decimal("1")

    def test_zero_to_the_zero(self):
        assert decimal_power(Decimal("0"), Decimal("0")) == Decimal("1")

    def test_exponent_one_returns_base(self):
        assert decimal_power(Decimal("1.23"), Decimal("1")) == Decimal("1.23")

    def test_negative_base_integer_exponent(self):
        """No fractional part, so no sign heuristic."""
        assert decimal_power(Decimal("-2"), Decimal("3")) == Decimal("-8")

    def test_large_base_integer_exponent(self):
        """No float conversion needed without a fractional part."""
        assert decimal_power(Decimal("1e400"), Decimal("2")) == Decimal("1e800")


class TestFractionalExponents:
    def test_square_root_of_two(self):
        result = decimal_power(Decimal("2"), Decimal("0.5"))
        assert abs(result - Decimal("1.41421356237309505")) < TOLERANCE

    def test_mixed_exponent(self):
        """4^2.5 = 4^2 * 4^0.5 = 32."""
        assert decimal_power(Decimal("4"), Decimal("2.5")) == Decimal("32")

    def test_negative_base_is_negated(self):
        """(-8)^(1/3): magnitude 2, sign flipped by the heuristic."""
        third = divide(Decimal("1"), Decimal("3"))
        result = decimal_power(Decimal("-8"), third)
        assert abs(result - Decimal("-2")) < TOLERANCE

    def test_negative_base_mixed_exponent(self):
        """(-4)^2.5 -> 16 * 2, negated."""
        assert decimal_power(Decimal("-4"), Decimal("2.5")) == Decimal("-32")


class TestNegativeExponents:
    def test_reciprocal(self):
        assert decimal_power(Decimal("2"), Decimal("-2")) == Decimal("0.25")

    def test_fractional_reciprocal(self):
        result = decimal_power(Decimal("4"), Decimal("-0.5"))
        assert abs(result - Decimal("0.5")) < TOLERANCE

    def test_zero_base_raises(self):
        with pytest.raises(PowerEvaluationError):
            decimal_power(Decimal("0"), Decimal("-1"))


class TestEvaluationFailures:
    def test_base_too_large_for_float(self):
        with pytest.raises(PowerEvaluationError):
            decimal_power(Decimal("1e400"), Decimal("0.5"))

    def test_failure_is_a_value_error(self):
        with pytest.raises(ValueError):
            decimal_power(Decimal("-1e400"), Decimal("0.25"))
