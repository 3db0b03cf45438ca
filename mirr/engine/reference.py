"""Floating-point cross-check of the decimal rate search using scipy.

Same since-inception NPV as compute_npv, evaluated in binary floating point.
Useful for sanity-checking decimal results; not reproducible digit for digit.
"""

from decimal import Decimal

from scipy.optimize import brentq

from mirr.config import settings
from mirr.models.cashflow import CashFlowSeries


def reference_npv(series: CashFlowSeries, rate: float) -> float:
    if rate == -1.0:
        return 0.0
    horizon = series.days_in_range
    return sum(
        float(flow.amount) / (1.0 + rate) ** (flow.day_offset / horizon)
        for flow in series
    )


def reference_rate(
    series: CashFlowSeries, low: float | None = None, high: float = 10.0
) -> Decimal | None:
    """Solve NPV = 0 on [low, high] with Brent's method.

    Returns None if the interval does not bracket a root or the series spans
    less than a day. ``low`` must stay above -1.
    """
    low = low if low is not None else float(settings.initial_low_estimate)
    if len(series) < 2 or series.days_in_range == 0:
        return None

    try:
        rate = brentq(
            lambda r: reference_npv(series, r), low, high, xtol=1e-12, maxiter=1000
        )
    except ValueError:
        # f(low) and f(high) share a sign
        return None
    return Decimal(str(rate))
