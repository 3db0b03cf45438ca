"""Shared cash flow fixtures.

The multi-flow portfolios use the convention of the beginning market value as
the first flow and the negated ending market value as the last.
"""

import pytest
from datetime import date
from decimal import Decimal

from mirr.models.cashflow import CashFlowSeries


@pytest.fixture
def one_year_ten_percent() -> CashFlowSeries:
    """Invest $1,000, get $1,100 back 365 days later."""
    return CashFlowSeries([
        (date(2023, 1, 1), Decimal("-1000")),
        (date(2024, 1, 1), Decimal("1100")),
    ])


@pytest.fixture
def portfolio_2007() -> CashFlowSeries:
    """Seven flows over ~7.7 years. Since-inception rate ~69.36%."""
    return CashFlowSeries([
        (date(2007, 5, 31), Decimal("9978.82")),
        (date(2007, 6, 14), Decimal("15000.0")),
        (date(2009, 10, 26), Decimal("20439.95")),
        (date(2009, 11, 9), Decimal("-5000.0")),
        (date(2010, 2, 11), Decimal("3000.0")),
        (date(2013, 10, 24), Decimal("49190.0")),
        (date(2015, 2, 13), Decimal("-122444.29")),
    ])


@pytest.fixture
def portfolio_2014() -> CashFlowSeries:
    """Sixteen flows within ten months. Since-inception rate ~57.07%."""
    return CashFlowSeries([
        (date(2013, 12, 31), Decimal("27")),
        (date(2014, 1, 2), Decimal("1092")),
        (date(2014, 2, 25), Decimal("1354.8")),
        (date(2014, 3, 25), Decimal("-429.28")),
        (date(2014, 4, 7), Decimal("-85.05")),
        (date(2014, 5, 26), Decimal("-1415")),
        (date(2014, 6, 2), Decimal("-1188")),
        (date(2014, 6, 16), Decimal("-489.5")),
        (date(2014, 6, 25), Decimal("-62.25")),
        (date(2014, 7, 28), Decimal("500.39")),
        (date(2014, 8, 25), Decimal("1532.79")),
        (date(2014, 9, 2), Decimal("75.7")),
        (date(2014, 9, 22), Decimal("35.5")),
        (date(2014, 10, 20), Decimal("3035.8")),
        (date(2014, 10, 30), Decimal("-4627")),
        (date(2014, 10, 31), Decimal("109.8")),
    ])
