from __future__ import annotations

from datetime import date
from math import isclose

import pytest

from fincore.core.compounding import (
    add_months,
    growth_factor,
    installment_dates,
    monthly_rate,
    months_between,
)


def test_months_between_counts_whole_months_only():
    assert months_between(date(2024, 1, 15), date(2024, 2, 15)) == 1
    assert months_between(date(2024, 1, 15), date(2024, 2, 14)) == 0
    assert months_between(date(2023, 12, 1), date(2024, 3, 1)) == 3
    assert months_between(date(2024, 1, 1), date(2025, 1, 1)) == 12


def test_months_between_never_negative():
    assert months_between(date(2024, 5, 1), date(2024, 1, 1)) == 0
    assert months_between(date(2024, 5, 20), date(2024, 5, 1)) == 0


def test_months_between_across_short_month():
    # Feb 29 is where a Jan 31 month lands, so the month is complete
    assert months_between(date(2024, 1, 31), date(2024, 2, 29)) == 1
    assert months_between(date(2024, 1, 31), date(2024, 2, 28)) == 0
    assert months_between(date(2023, 1, 31), date(2023, 2, 28)) == 1
    assert months_between(date(2024, 1, 31), date(2024, 3, 31)) == 2


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


def test_add_months_does_not_drift_after_clamping():
    assert add_months(date(2024, 1, 31), 2) == date(2024, 3, 31)
    assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)
    assert add_months(date(2024, 3, 10), 0) == date(2024, 3, 10)


def test_installment_dates_inclusive_of_both_ends():
    dates = installment_dates(date(2024, 1, 1), date(2024, 4, 1))
    assert dates == [date(2024, 1, 1), date(2024, 2, 1), date(2024, 3, 1), date(2024, 4, 1)]


def test_installment_dates_excludes_partial_final_month():
    dates = installment_dates(date(2024, 1, 15), date(2024, 4, 14))
    assert dates == [date(2024, 1, 15), date(2024, 2, 15), date(2024, 3, 15)]


def test_installment_dates_month_end_start():
    dates = installment_dates(date(2024, 1, 31), date(2024, 3, 31))
    assert dates == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31)]


def test_installment_dates_empty_when_end_before_start():
    assert installment_dates(date(2024, 6, 1), date(2024, 5, 31)) == []


def test_growth_factor():
    assert isclose(monthly_rate(12), 0.01)
    assert isclose(growth_factor(12, 12), 1.01**12)
    assert growth_factor(12, 0) == 1.0
    assert growth_factor(0, 240) == 1.0


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 1, 31), date(2024, 2, 29)),
        (date(2024, 1, 31), date(2024, 2, 28)),
        (date(2024, 1, 30), date(2024, 2, 29)),
        (date(2023, 8, 31), date(2024, 4, 30)),
        (date(2024, 1, 15), date(2024, 4, 14)),
        (date(2024, 3, 10), date(2024, 3, 10)),
    ],
)
def test_installment_count_matches_months_between(start, end):
    assert len(installment_dates(start, end)) == months_between(start, end) + 1
