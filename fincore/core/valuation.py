from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

import structlog

from fincore.core.compounding import growth_factor, installment_dates, months_between
from fincore.domain.errors import InvalidHorizonError
from fincore.models import ContributionType, FrozenModel, Investment

logger = structlog.get_logger(__name__)


class ValuationResult(FrozenModel):
    total_invested: float
    current_value: float
    # None when the investment is open-ended (no expected end date)
    future_value: Optional[float] = None
    installments: int
    evaluated_on: date


class PortfolioSummary(FrozenModel):
    total_invested: float
    current_value: float
    future_value: float
    total_one_time: float
    total_recurring_monthly: float
    investment_count: int
    valuations: List[ValuationResult]


def current_evaluation_date(investment: Investment, evaluation_date: date) -> date:
    """The date "current" value is taken at: never past today, never past the horizon."""
    end = investment.expected_end_date
    if end is not None and end < evaluation_date:
        return end
    return evaluation_date


def invested_until(investment: Investment, until: date) -> tuple[float, int]:
    """Return (principal contributed, number of contributions) up to ``until``."""
    if investment.contribution_type == ContributionType.ONE_TIME:
        if until < investment.start_date:
            return 0.0, 0
        return investment.principal_amount, 1

    count = len(installment_dates(investment.start_date, until))
    return investment.principal_amount * count, count


def value_at(investment: Investment, when: date) -> float:
    """Principal plus monthly-compounded growth of every contribution made by ``when``."""
    rate = investment.expected_annual_return_rate
    invested, _ = invested_until(investment, when)

    # zero rate: no compounding, and no 0**0 ambiguity
    if rate == 0 or invested == 0:
        return invested

    if investment.contribution_type == ContributionType.ONE_TIME:
        months = months_between(investment.start_date, when)
        return investment.principal_amount * growth_factor(rate, months)

    return sum(
        investment.principal_amount * growth_factor(rate, months_between(paid_on, when))
        for paid_on in installment_dates(investment.start_date, when)
    )


def future_value(investment: Investment, *, strict_horizon: bool = False) -> Optional[float]:
    """
    Value exactly at the expected end date, even when that date is already past.

    Open-ended investments have no future value (None). A horizon on or
    before the start date is not projectable: it yields 0.0, or raises
    InvalidHorizonError when ``strict_horizon`` is set.
    """
    end = investment.expected_end_date
    if end is None:
        return None
    if end <= investment.start_date:
        if strict_horizon:
            raise InvalidHorizonError(investment.start_date, end)
        return 0.0
    return value_at(investment, end)


def valuate_investment(
    investment: Investment,
    evaluation_date: Optional[date] = None,
    *,
    strict_horizon: bool = False,
) -> ValuationResult:
    """
    Compute invested-to-date, current value and future value for one investment.

    evaluation_date stands in for "today" and defaults to the system date.
    """
    today = evaluation_date or date.today()

    # horizon is checked up front so a failure never follows partial work
    projected = future_value(investment, strict_horizon=strict_horizon)

    as_of = current_evaluation_date(investment, today)
    invested, count = invested_until(investment, as_of)
    current = value_at(investment, as_of)

    logger.debug(
        "investment_valuated",
        contribution_type=investment.contribution_type.value,
        installments=count,
        evaluated_on=as_of.isoformat(),
        has_horizon=projected is not None,
    )

    return ValuationResult(
        total_invested=invested,
        current_value=current,
        future_value=projected,
        installments=count,
        evaluated_on=as_of,
    )


def summarize_portfolio(
    investments: Iterable[Investment],
    evaluation_date: Optional[date] = None,
    *,
    strict_horizon: bool = False,
) -> PortfolioSummary:
    """Fold per-investment valuations into the portfolio totals the dashboard shows."""
    today = evaluation_date or date.today()
    items = list(investments)
    valuations = [
        valuate_investment(inv, today, strict_horizon=strict_horizon) for inv in items
    ]

    return PortfolioSummary(
        total_invested=sum(v.total_invested for v in valuations),
        current_value=sum(v.current_value for v in valuations),
        future_value=sum(v.future_value for v in valuations if v.future_value is not None),
        total_one_time=sum(
            inv.principal_amount for inv in items if inv.contribution_type == ContributionType.ONE_TIME
        ),
        total_recurring_monthly=sum(inv.principal_amount for inv in items if inv.is_recurring),
        investment_count=len(items),
        valuations=valuations,
    )


__all__ = [
    "ValuationResult",
    "PortfolioSummary",
    "current_evaluation_date",
    "invested_until",
    "value_at",
    "future_value",
    "valuate_investment",
    "summarize_portfolio",
]
