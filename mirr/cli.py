"""CLI for computing the MIRR of a cash flow file.

Usage:
    python -m mirr.cli flows.csv
    python -m mirr.cli flows.csv --trace --reference

Each row is ``YYYY-MM-DD,amount``. Blank lines and lines starting with #
are ignored.
"""

import argparse
import csv
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

from mirr.config import settings
from mirr.engine.errors import MIRRDidNotConvergeError
from mirr.engine.rate_search import search_rate
from mirr.engine.reference import reference_rate
from mirr.models.cashflow import CashFlowSeries


def read_series(path: Path) -> CashFlowSeries:
    series = CashFlowSeries()
    with path.open(newline="") as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not row or not row[0].strip() or row[0].lstrip().startswith("#"):
                continue
            if len(row) != 2:
                raise ValueError(f"line {line_no}: expected 'date,amount', got {row!r}")
            try:
                on = date.fromisoformat(row[0].strip())
                amount = Decimal(row[1].strip())
            except (ValueError, InvalidOperation) as e:
                raise ValueError(f"line {line_no}: {e}") from e
            series.add_cash_flow(on, amount)
    return series


def print_result(series: CashFlowSeries, result, reference: Decimal | None = None) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Cash flows ({len(series)}, {series.days_in_range} days)")
    print(f"{'=' * 60}")
    for flow in series.chronological():
        print(f"  {flow}")
    print()
    print(f"  MIRR:          {result.rate:.12f}")
    print(f"  Outcome:       {result.position.value}")
    print(f"  Bracket:       [{result.low}, {result.high}] (attempt {result.attempts})")
    print(f"  Iterations:    {result.root_iterations}")
    if reference is not None:
        print(f"  Float check:   {reference:.12f}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Modified internal rate of return")
    parser.add_argument("path", type=Path, help="CSV file of date,amount rows")
    parser.add_argument("--trace", action="store_true", help="Log every root-finder iteration")
    parser.add_argument("--reference", action="store_true", help="Also solve in floating point (scipy)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        series = read_series(args.path)
    except (OSError, ValueError) as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return 1
    if len(series) < 2:
        print("At least two cash flows are required", file=sys.stderr)
        return 1

    try:
        result = search_rate(series)
    except MIRRDidNotConvergeError as e:
        print(str(e), file=sys.stderr)
        return 1

    reference = reference_rate(series) if args.reference else None
    print_result(series, result, reference)
    return 0


if __name__ == "__main__":
    sys.exit(main())
