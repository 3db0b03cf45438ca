from decimal import Decimal

import pytest

from mirr.engine.precision import divide, sign, to_decimal


class TestDivide:
    def test_rounds_once_from_exact_quotient(self):
        # 0.(100 zeros)4999... sits below the half-way point of the last digit
        numerator = Decimal("0." + "0" * 100 + "4" + "9" * 1100)
        assert divide(numerator, Decimal("1")) == 0

    def test_half_rounds_up(self):
        assert divide(Decimal("1"), Decimal("2e100")) == Decimal("1e-100")

    def test_half_rounds_away_from_zero(self):
        assert divide(Decimal("-1"), Decimal("2e100")) == Decimal("-1e-100")
        assert divide(Decimal("1"), Decimal("-2e100")) == Decimal("-1e-100")

    def test_scale(self):
        assert divide(Decimal("2"), Decimal("3")) == Decimal("0." + "6" * 99 + "7")
        assert divide(Decimal("10"), Decimal("4")).as_tuple().exponent == -100

    def test_by_zero(self):
        with pytest.raises(ArithmeticError):
            divide(Decimal("1"), Decimal("0"))


class TestHelpers:
    def test_sign(self):
        assert [sign(Decimal(v)) for v in ("-3", "0", "0.1")] == [-1, 0, 1]

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")
