from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class RelativePosition(Enum):
    """Where a pair of estimates sits relative to the solution."""
    WITHIN_RANGE = "within_range"
    TOO_LOW = "too_low"  # Both results negative
    TOO_HIGH = "too_high"  # Both results positive
    UNKNOWN = "unknown"  # Objective could not be evaluated


class Method(Enum):
    """How a root-finder iteration produced its next estimate."""
    QUADRATIC_INTERPOLATION = "quadratic_interpolation"
    SECANT = "secant"
    BISECTION = "bisection"


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating the objective: a value, or the error that prevented one."""
    value: Decimal | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: Decimal) -> "Evaluation":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Evaluation":
        return cls(error=error)

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class EstimatePair:
    estimate: Decimal
    result: Decimal


@dataclass(frozen=True)
class IterationRecord:
    """One root-finder step, as handed to an ``on_iteration`` hook."""
    iteration: int
    method: Method
    new_estimate: Decimal
    new_result: Decimal
    current: EstimatePair
    counter: EstimatePair


@dataclass(frozen=True)
class RootSearchResult:
    estimate: Decimal
    position: RelativePosition
    iterations: int = 0
    converged: bool = False  # Tolerance met before the iteration cap
    error: Exception | None = None


@dataclass(frozen=True)
class RateSearchResult:
    rate: Decimal
    position: RelativePosition
    attempts: int  # Bracket windows tried
    low: Decimal  # Final bracket
    high: Decimal
    root_iterations: int = 0
    error: Exception | None = None
