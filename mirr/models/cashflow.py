from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal

from mirr.engine.precision import to_decimal


@dataclass(frozen=True)
class CashFlow:
    """A cash flow that occurred on a particular date.

    Positive amounts are inflows to the investor, negative amounts outflows.
    ``day_offset`` is assigned by the owning series.
    """
    date: date
    amount: Decimal
    day_offset: int = field(default=0, compare=False)  # Days since series start

    def __str__(self) -> str:
        return f"{self.date.isoformat()}[day {self.day_offset}]={self.amount}"


class CashFlowSeries:
    """Dated cash flows over a period, in insertion order.

    The start date is the earliest date ever added. Adding a flow dated
    before it moves the start and recomputes every member's day offset.
    """

    def __init__(self, flows: Iterable[tuple[date, Decimal]] = ()):
        self._flows: list[CashFlow] = []
        self.start_date: date | None = None
        for on, amount in flows:
            self.add_cash_flow(on, amount)

    def add_cash_flow(self, on: date, amount) -> CashFlow:
        if self.start_date is None or on < self.start_date:
            self.start_date = on
            self._flows = [
                replace(flow, day_offset=(flow.date - on).days) for flow in self._flows
            ]

        flow = CashFlow(
            date=on,
            amount=to_decimal(amount),
            day_offset=(on - self.start_date).days,
        )
        self._flows.append(flow)
        return flow

    def __iter__(self) -> Iterator[CashFlow]:
        return iter(self._flows)

    def __len__(self) -> int:
        return len(self._flows)

    def __getitem__(self, index: int) -> CashFlow:
        return self._flows[index]

    def __str__(self) -> str:
        return "\n".join(str(flow) for flow in self._flows)

    def latest(self) -> CashFlow:
        """The flow furthest from the start date."""
        if not self._flows:
            raise ValueError("Cash flow series is empty")
        return max(self._flows, key=lambda flow: flow.day_offset)

    @property
    def end_date(self) -> date | None:
        return self.latest().date if self._flows else None

    @property
    def days_in_range(self) -> int:
        """Days between the earliest and latest flow (0 when empty)."""
        return self.latest().day_offset if self._flows else 0

    def chronological(self) -> list[CashFlow]:
        return sorted(self._flows, key=lambda flow: flow.date)

    def copy(self) -> "CashFlowSeries":
        duplicate = CashFlowSeries()
        duplicate._flows = list(self._flows)
        duplicate.start_date = self.start_date
        return duplicate
