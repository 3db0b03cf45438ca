"""Decimal context shared by the MIRR engine.

Every division is carried to a fixed 100 fractional digits, rounded half-up,
so that results are reproducible digit for digit. Multiplication and addition
run under a context wide enough to stay exact for the magnitudes involved.
"""

import functools
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)

DIVISION_SCALE = 100

ZERO = Decimal("0")
ONE = Decimal("1")
TWO = Decimal("2")

ENGINE_CONTEXT = Context(
    prec=1000,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def high_precision(func):
    """Run ``func`` under the engine's decimal context."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with localcontext(ENGINE_CONTEXT):
            return func(*args, **kwargs)

    return wrapper


def divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator at 100 fractional digits, ROUND_HALF_UP.

    Rounded once, from the exact quotient.
    """
    a, b = Decimal(numerator).as_integer_ratio()
    c, d = Decimal(denominator).as_integer_ratio()
    if c == 0:
        raise DivisionByZero(f"{numerator} / {denominator}")

    # numerator / denominator == (a * d) / (b * c); b and d are positive
    scaled = a * d * 10**DIVISION_SCALE
    divisor = b * c
    negative = (scaled < 0) != (divisor < 0)
    quotient, remainder = divmod(abs(scaled), abs(divisor))
    if 2 * remainder >= abs(divisor):
        quotient += 1
    return Decimal(f"{'-' if negative else ''}{quotient}E-{DIVISION_SCALE}")


def sign(value: Decimal) -> int:
    return (value > 0) - (value < 0)


def to_decimal(value) -> Decimal:
    """Decimal from a Decimal, int, str or float (floats go through str())."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)
