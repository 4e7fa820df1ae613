"""Data contracts for group settlement."""

from typing import List

from pydantic import Field

from fincore.models import Expense, FrozenModel


class SettlementRequest(FrozenModel):
    """A group's members and its shared expenses, as loaded by the caller."""

    # an empty list is allowed through so the engine can report EmptyGroup
    members: List[str] = Field(..., description="Member ids in display order.")
    expenses: List[Expense] = Field(default_factory=list)
