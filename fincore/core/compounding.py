"""Monthly-step compounding helpers shared by the valuation paths."""

from __future__ import annotations

import calendar
from datetime import date
from typing import List


def _raw_month_diff(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from ``start`` to ``end``.

    This is the largest ``n`` with ``add_months(start, n) <= end``, so a
    trailing partial month does not count but a clamped month end does
    (Jan 31 to Feb 29 is one month). Never negative.
    """
    months = _raw_month_diff(start, end)
    if months > 0 and add_months(start, months) > end:
        months -= 1
    return max(0, months)


def add_months(start: date, months: int) -> date:
    """Step ``months`` calendar months forward, clamping to the month's last day."""
    index = start.month - 1 + months
    year = start.year + index // 12
    month = index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def installment_dates(start: date, end: date) -> List[date]:
    """
    Monthly contribution dates from ``start`` up to and including ``end``.

    Each date is stepped from ``start`` itself, so a 31st start gives
    Jan 31, Feb 29, Mar 31, ... rather than drifting to the 29th. There is
    always ``months_between(start, end) + 1`` of them.
    """
    if end < start:
        return []
    return [add_months(start, k) for k in range(months_between(start, end) + 1)]


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def growth_factor(annual_rate_percent: float, months: int) -> float:
    """(1 + r)^months with r the monthly rate for an annual percentage."""
    return (1 + monthly_rate(annual_rate_percent)) ** max(0, months)


__all__ = [
    "months_between",
    "add_months",
    "installment_dates",
    "monthly_rate",
    "growth_factor",
]
