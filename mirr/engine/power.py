"""Decimal raised to a decimal (possibly fractional) exponent.

Pure functions. No I/O.

X^(A+B) is computed as X^A * X^B, where A is the integer part of the
exponent (exact decimal multiplication) and B the fractional part (binary
floating point, then converted back exactly). Only the narrow range needed
for discounting is supported; this is not a general power function.
"""

import math
from decimal import Decimal

from mirr.engine.errors import PowerEvaluationError
from mirr.engine.precision import ONE, divide, high_precision


def _integer_power(base: Decimal, n: int) -> Decimal:
    """base**n for n >= 0 by square-and-multiply. 0**0 == 1."""
    result = ONE
    while n:
        if n & 1:
            result *= base
        n >>= 1
        if n:
            base *= base
    return result


def _fractional_power(base: Decimal, fraction: Decimal) -> Decimal:
    if fraction == 0:
        return ONE

    float_base = float(base)
    if not math.isfinite(float_base):
        raise PowerEvaluationError(f"Cannot convert base {base} to a finite float")

    # A fractional power of a negative number has no real value; use the
    # magnitude here and let the caller apply the sign.
    if float_base < 0:
        float_base = -float_base

    return Decimal(math.pow(float_base, float(fraction)))


@high_precision
def decimal_power(base: Decimal, exponent: Decimal) -> Decimal:
    """Raise ``base`` to ``exponent``.

    Negative base with a fractional exponent: the magnitude is raised and the
    product is negated. This stands in for the imaginary result (as if
    multiplied by i); it is a heuristic, not complex arithmetic.

    Raises PowerEvaluationError if the base is not representable as a finite
    float while a fractional exponent part remains, or if zero is raised to
    a negative exponent.
    """
    if exponent == 1:
        return +base

    negative_exponent = exponent < 0
    magnitude = abs(exponent)
    fraction = magnitude % 1
    whole = int(magnitude - fraction)

    result = _integer_power(base, whole) * _fractional_power(base, fraction)

    if fraction != 0 and base < 0:
        result = -result

    if negative_exponent:
        if result == 0:
            raise PowerEvaluationError(f"{base} raised to negative exponent {exponent}")
        return divide(ONE, result)

    return result
