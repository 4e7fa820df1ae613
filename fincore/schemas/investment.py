"""Data contracts for investment valuation."""

from datetime import date
from typing import List, Optional

from pydantic import Field

from fincore.models import FrozenModel, Investment


class ValuationRequest(FrozenModel):
    investment: Investment
    evaluation_date: Optional[date] = Field(
        default=None,
        description="Date treated as today; defaults to the server date.",
    )


class PortfolioRequest(FrozenModel):
    investments: List[Investment] = Field(default_factory=list)
    evaluation_date: Optional[date] = Field(
        default=None,
        description="Date treated as today; defaults to the server date.",
    )
