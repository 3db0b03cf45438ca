"""Modified internal rate of return for dated cash flows.

The market value at the beginning of the period should be the first cash
flow; the value at the end of the period should be negated and included as
the last cash flow.

The root finder needs estimates on either side of the solution. This module
wraps it in a loop that slides the search window up or down until the
window brackets a root.
"""

import logging
from collections.abc import Callable
from decimal import Decimal, localcontext

from mirr.config import settings
from mirr.engine.errors import EvaluationError, MIRRDidNotConvergeError
from mirr.engine.npv import compute_npv
from mirr.engine.precision import ENGINE_CONTEXT
from mirr.engine.roots import Objective, find_root
from mirr.models.cashflow import CashFlowSeries
from mirr.models.results import (
    Evaluation,
    IterationRecord,
    RateSearchResult,
    RelativePosition,
)

logger = logging.getLogger(__name__)


def npv_objective(series: CashFlowSeries) -> Objective:
    """Wrap compute_npv so evaluation failures come back as values."""

    def evaluate(rate: Decimal) -> Evaluation:
        try:
            return Evaluation.success(compute_npv(series, rate))
        except (EvaluationError, ArithmeticError) as e:
            logger.debug("NPV evaluation failed at rate %s: %s", rate, e)
            return Evaluation.failure(e)

    return evaluate


def search_rate(
    series: CashFlowSeries,
    low: Decimal | None = None,
    high: Decimal | None = None,
    max_attempts: int | None = None,
    on_iteration: Callable[[IterationRecord], None] | None = None,
) -> RateSearchResult:
    """Find the periodic rate that makes the series' NPV zero.

    Starts from the window [low, high] (default [-0.99999, 1.0]). When the
    window misses the root it slides by its own width: up if both NPVs were
    negative, down if both were positive.

    An evaluation failure inside the root finder ends the search with the
    root finder's last estimate, tagged UNKNOWN.

    Raises MIRRDidNotConvergeError if no window brackets a root within
    ``max_attempts``.
    """
    low = low if low is not None else settings.initial_low_estimate
    high = high if high is not None else settings.initial_high_estimate
    max_attempts = max_attempts if max_attempts is not None else settings.search_max_iterations

    objective = npv_objective(series)

    for attempt in range(1, max_attempts + 1):
        outcome = find_root(high, low, objective, on_iteration=on_iteration)

        if outcome.position in (RelativePosition.WITHIN_RANGE, RelativePosition.UNKNOWN):
            if outcome.position is RelativePosition.UNKNOWN:
                logger.warning(
                    "NPV could not be evaluated during the search (%s); returning %s",
                    outcome.error,
                    outcome.estimate,
                )
            else:
                logger.debug(
                    "Rate %s found in [%s, %s] after %d attempt(s), %d iteration(s)",
                    outcome.estimate, low, high, attempt, outcome.iterations,
                )
            return RateSearchResult(
                rate=outcome.estimate,
                position=outcome.position,
                attempts=attempt,
                low=low,
                high=high,
                root_iterations=outcome.iterations,
                error=outcome.error,
            )

        with localcontext(ENGINE_CONTEXT):
            width = high - low
            if outcome.position is RelativePosition.TOO_LOW:
                low, high = high, high + width
            else:
                low, high = low - width, low
        logger.debug("Window missed the root (%s); trying [%s, %s]", outcome.position.value, low, high)

    raise MIRRDidNotConvergeError(max_attempts, low, high)


def compute_mirr(series: CashFlowSeries) -> Decimal:
    """Periodic (since-inception, not annualized) MIRR of the series."""
    return search_rate(series).rate
