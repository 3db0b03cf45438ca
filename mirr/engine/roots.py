"""Bracketed root finding in decimal arithmetic.

A close variation on Brent's (Brent-Dekker) method: each iteration picks
inverse quadratic interpolation, the secant method or bisection to narrow
in on a value where the objective is zero.

Some of the conditions for switching to bisection differ from the textbook
algorithm; for discounting cash flows the textbook ones took more
iterations.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from mirr.config import settings
from mirr.engine.precision import TWO, ZERO, divide, high_precision, sign, to_decimal
from mirr.models.results import (
    EstimatePair,
    Evaluation,
    IterationRecord,
    Method,
    RelativePosition,
    RootSearchResult,
)

logger = logging.getLogger(__name__)

THREE_QUARTERS = Decimal("0.75")

Objective = Callable[[Decimal], Evaluation]


@dataclass
class Registers:
    """Scratch state for one search.

    ``current`` is the estimate whose result is closest to zero, ``counter``
    sits on the other side of zero, ``previous`` and ``earlier`` are history
    for interpolation.
    """
    current: EstimatePair
    counter: EstimatePair
    previous: EstimatePair
    earlier: EstimatePair

    def swap_if_counter_closer(self) -> bool:
        if abs(self.counter.result) < abs(self.current.result):
            self.current, self.counter = self.counter, self.current
            return True
        return False

    def shift_history(self) -> None:
        self.earlier = self.previous
        self.previous = self.current

    @property
    def gap(self) -> Decimal:
        return abs(self.current.estimate - self.counter.estimate)


def secant_estimate(a: EstimatePair, b: EstimatePair) -> Decimal:
    """Where the line through a and b crosses zero."""
    # x = x_a - f(x_a) * (x_a - x_b) / (f(x_a) - f(x_b))
    return a.estimate - a.result * divide(a.estimate - b.estimate, a.result - b.result)


def inverse_quadratic_estimate(a: EstimatePair, b: EstimatePair, c: EstimatePair) -> Decimal:
    """Fit x as a quadratic in y through three points and evaluate it at y = 0.

    Results must be pairwise distinct.
    """
    return (
        divide(a.estimate * b.result * c.result, (a.result - b.result) * (a.result - c.result))
        + divide(b.estimate * a.result * c.result, (b.result - a.result) * (b.result - c.result))
        + divide(c.estimate * a.result * b.result, (c.result - a.result) * (c.result - b.result))
    )


def _needs_bisection(
    candidate: Decimal,
    earlier_candidate: Decimal,
    registers: Registers,
    estimate_tolerance: Decimal,
) -> bool:
    current = registers.current.estimate
    undershoot = abs(THREE_QUARTERS * abs(registers.previous.estimate - current) - current)
    if candidate <= undershoot:
        return True

    step = abs(candidate - current)
    earlier_step = abs(earlier_candidate - registers.earlier.estimate)
    half_gap = divide(abs(registers.previous.estimate - registers.earlier.estimate), TWO)
    return step > half_gap and earlier_step > divide(estimate_tolerance, TWO)


def _compact(value: Decimal) -> str:
    return format(value, ".15g")


def _log_iteration(record: IterationRecord) -> None:
    logger.debug(
        "%3d %-23s current=%s (%s) counter=%s (%s)",
        record.iteration,
        record.method.value,
        _compact(record.current.estimate),
        _compact(record.current.result),
        _compact(record.counter.estimate),
        _compact(record.counter.result),
    )


@high_precision
def find_root(
    best_estimate: Decimal,
    counter_estimate: Decimal,
    evaluate: Objective,
    estimate_tolerance: Decimal | None = None,
    result_tolerance: Decimal | None = None,
    max_iterations: int | None = None,
    on_iteration: Callable[[IterationRecord], None] | None = None,
) -> RootSearchResult:
    """Search for x with evaluate(x) == 0 between two bracketing estimates.

    Args:
        best_estimate: Estimate believed to be closest to the root
        counter_estimate: Estimate whose result has the opposite sign
        evaluate: Objective returning an Evaluation for a given x
        estimate_tolerance: Stop once the bracket is narrower than this
        result_tolerance: Stop once |f(current)| is below this
        max_iterations: Safety cap on iterations
        on_iteration: Called with an IterationRecord after every iteration

    If both results share a sign the estimates do not bracket a root and the
    result is tagged TOO_LOW (both negative) or TOO_HIGH (both positive) so
    the caller can shift its range. If the objective fails the search stops
    with UNKNOWN and the error attached.

    The returned estimate is the last one evaluated, which is not always the
    register closest to zero after the final swap.
    """
    estimate_tolerance = (
        estimate_tolerance if estimate_tolerance is not None else settings.estimate_tolerance
    )
    result_tolerance = (
        result_tolerance if result_tolerance is not None else settings.result_tolerance
    )
    max_iterations = max_iterations if max_iterations is not None else settings.root_max_iterations

    best_estimate = to_decimal(best_estimate)
    counter_estimate = to_decimal(counter_estimate)

    best = evaluate(best_estimate)
    if best.failed:
        return RootSearchResult(best_estimate, RelativePosition.UNKNOWN, error=best.error)
    counter = evaluate(counter_estimate)
    if counter.failed:
        return RootSearchResult(counter_estimate, RelativePosition.UNKNOWN, error=counter.error)

    if sign(best.value) == sign(counter.value):
        position = RelativePosition.TOO_LOW if best.value < 0 else RelativePosition.TOO_HIGH
        logger.debug(
            "[%s, %s] does not bracket a root: %s",
            _compact(best_estimate),
            _compact(counter_estimate),
            position.value,
        )
        return RootSearchResult(best_estimate, position)

    registers = Registers(
        current=EstimatePair(best_estimate, best.value),
        counter=EstimatePair(counter_estimate, counter.value),
        previous=EstimatePair(counter_estimate, counter.value),
        earlier=EstimatePair(ZERO, counter.value),
    )
    registers.swap_if_counter_closer()
    registers.previous = registers.counter

    new_estimate = registers.current.estimate
    last_candidate = ZERO
    iteration = 0
    converged = False

    while iteration < max_iterations:
        iteration += 1

        if (
            registers.counter.result != registers.previous.result
            and registers.previous.result != registers.current.result
        ):
            candidate = inverse_quadratic_estimate(
                registers.previous, registers.current, registers.counter
            )
            method = Method.QUADRATIC_INTERPOLATION
        else:
            candidate = secant_estimate(registers.counter, registers.current)
            method = Method.SECANT

        earlier_candidate, last_candidate = last_candidate, candidate

        if _needs_bisection(candidate, earlier_candidate, registers, estimate_tolerance):
            method = Method.BISECTION
            new_estimate = divide(registers.current.estimate + registers.counter.estimate, TWO)
        else:
            new_estimate = candidate

        outcome = evaluate(new_estimate)
        if outcome.failed:
            logger.debug("Objective failed at %s: %s", _compact(new_estimate), outcome.error)
            return RootSearchResult(
                new_estimate, RelativePosition.UNKNOWN, iteration, error=outcome.error
            )
        latest = EstimatePair(new_estimate, outcome.value)

        registers.shift_history()

        # Opposite sign to the counter: the root is still between them.
        # Same sign: the new estimate crossed zero and becomes the counter.
        if sign(latest.result) != sign(registers.counter.result):
            registers.current = latest
        else:
            registers.counter = latest

        registers.swap_if_counter_closer()

        record = IterationRecord(
            iteration=iteration,
            method=method,
            new_estimate=latest.estimate,
            new_result=latest.result,
            current=registers.current,
            counter=registers.counter,
        )
        if logger.isEnabledFor(logging.DEBUG):
            _log_iteration(record)
        if on_iteration is not None:
            on_iteration(record)

        if registers.gap < estimate_tolerance or abs(registers.current.result) < result_tolerance:
            converged = True
            break

    if not converged:
        logger.warning(
            "Root search stopped after %d iterations without meeting tolerance (gap %s)",
            iteration,
            _compact(registers.gap),
        )

    return RootSearchResult(new_estimate, RelativePosition.WITHIN_RANGE, iteration, converged)
