"""Data contracts for the savings vault."""

from typing import List

from pydantic import Field

from fincore.core.vault import VaultDecision
from fincore.models import FrozenModel, VaultItem


class FundRequest(FrozenModel):
    item: VaultItem
    amount: float = Field(..., allow_inf_nan=False, description="Amount to add to the item's savings.")


class FundResponse(FrozenModel):
    item: VaultItem
    progress: float = Field(..., ge=0, le=100, description="Percent of the target saved.")
    ready: bool


class VaultSummaryRequest(FrozenModel):
    items: List[VaultItem] = Field(default_factory=list)


class DecisionRequest(FrozenModel):
    item: VaultItem
    decision: VaultDecision = Field(..., description="buy, save or invest.")
