"""Net present value of a dated cash flow series.

Pure functions: Decimal in, Decimal out. No I/O.
"""

import logging
from decimal import Decimal

from mirr.engine.errors import EvaluationError
from mirr.engine.power import decimal_power
from mirr.engine.precision import ONE, ZERO, divide, high_precision, to_decimal
from mirr.models.cashflow import CashFlowSeries

logger = logging.getLogger(__name__)


@high_precision
def compute_npv(series: CashFlowSeries, periodic_rate: Decimal) -> Decimal:
    """Sum of each cash flow discounted by ``periodic_rate``.

    The rate is a since-inception rate: each flow's exponent is its share of
    the whole observed period (day offset / days to the latest flow), not a
    day-count fraction of a year.

    A rate of exactly -1 means every flow was lost entirely, so the NPV is 0.
    A flow whose discount factor comes out as zero is left out of the sum.
    """
    periodic_rate = to_decimal(periodic_rate)
    if periodic_rate == -1:
        return ZERO

    if len(series) == 0:
        raise EvaluationError("Cannot discount an empty cash flow series")
    horizon = series.latest().day_offset
    if horizon == 0:
        raise EvaluationError("Cash flows must span at least one day")

    compounding = ONE + periodic_rate
    horizon = Decimal(horizon)
    total = ZERO

    for flow in series:
        exponent = divide(Decimal(flow.day_offset), horizon)
        discount_factor = decimal_power(compounding, exponent)
        if discount_factor == 0:
            logger.debug("Skipping %s: zero discount factor at rate %s", flow, periodic_rate)
            continue
        total += divide(flow.amount, discount_factor)

    return total
