"""Exceptions raised by the MIRR engine."""

from decimal import Decimal


class EvaluationError(ValueError):
    """The NPV objective could not be evaluated at a given rate."""


class PowerEvaluationError(EvaluationError):
    """A decimal power could not be computed (e.g. base not representable as a finite float)."""


class MIRRDidNotConvergeError(RuntimeError):
    """The bracket search ran out of attempts without bracketing a root."""

    def __init__(self, attempts: int, low: Decimal, high: Decimal):
        self.attempts = attempts
        self.low = low
        self.high = high
        super().__init__(
            f"No rate found after {attempts} bracket attempts "
            f"(last bracket [{low}, {high}])"
        )
