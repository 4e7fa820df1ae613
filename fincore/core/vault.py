"""Savings vault: put money aside for one planned purchase."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Optional

import structlog

from fincore.domain.errors import InvalidAmountError, VaultItemClosedError
from fincore.models import FrozenModel, VaultItem, VaultStatus

logger = structlog.get_logger(__name__)

# Funding stops at the item's price so "goal reached" is a simple equality.
VAULT_CAP_AT_TARGET = True


class VaultDecision(str, Enum):
    """What the owner does with the money once they stop saving for an item."""

    BUY = "buy"
    SAVE = "save"
    INVEST = "invest"


_DECISION_STATUS = {
    VaultDecision.BUY: VaultStatus.PURCHASED,
    VaultDecision.SAVE: VaultStatus.SAVED,
    VaultDecision.INVEST: VaultStatus.INVESTED,
}


class LedgerEntry(FrozenModel):
    """A transaction the caller should record for a closed vault item."""

    kind: str
    category: str
    description: str
    amount: float


class VaultDecisionOutcome(FrozenModel):
    item: VaultItem
    released_amount: float
    entry: Optional[LedgerEntry] = None


class VaultSummary(FrozenModel):
    active_count: int
    total_target: float
    total_saved: float
    ready_count: int


def fund_vault_item(
    item: VaultItem, amount: float, *, cap_at_target: bool = VAULT_CAP_AT_TARGET
) -> VaultItem:
    """Return a copy of ``item`` with ``amount`` added to what has been saved."""
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(amount, what="funding")
    if item.status != VaultStatus.ACTIVE:
        raise VaultItemClosedError(item.name, item.status.value)

    saved = item.current_amount + amount
    if cap_at_target and saved > item.target_amount:
        saved = item.target_amount
    return item.model_copy(update={"current_amount": saved})


def decide_vault_item(item: VaultItem, decision: VaultDecision) -> VaultDecisionOutcome:
    """
    Close an active item and release what was saved for it.

    Buying books the saved amount as an expense in the item's category and
    saving books it as savings income. Investing only closes the item: the
    caller creates the investment from ``released_amount`` itself.
    """
    decision = VaultDecision(decision)
    if item.status != VaultStatus.ACTIVE:
        raise VaultItemClosedError(item.name, item.status.value)

    released = item.current_amount
    entry = None
    if decision == VaultDecision.BUY:
        entry = LedgerEntry(
            kind="expense",
            category=item.category,
            description=f"Vault Purchase: {item.name}",
            amount=released,
        )
    elif decision == VaultDecision.SAVE:
        entry = LedgerEntry(
            kind="income",
            category="Savings",
            description=f"Saved from Vault: {item.name}",
            amount=released,
        )

    closed = item.model_copy(update={"status": _DECISION_STATUS[decision]})
    logger.debug("vault_item_closed", decision=decision.value, released=released)
    return VaultDecisionOutcome(item=closed, released_amount=released, entry=entry)


def vault_progress(item: VaultItem) -> float:
    """Percent of the target saved, capped at 100."""
    return min(item.current_amount / item.target_amount * 100, 100.0)


def is_ready(item: VaultItem) -> bool:
    return item.current_amount >= item.target_amount


def summarize_vault(items: Iterable[VaultItem]) -> VaultSummary:
    active = [item for item in items if item.status == VaultStatus.ACTIVE]
    return VaultSummary(
        active_count=len(active),
        total_target=sum(item.target_amount for item in active),
        total_saved=sum(item.current_amount for item in active),
        ready_count=sum(1 for item in active if is_ready(item)),
    )


__all__ = [
    "VAULT_CAP_AT_TARGET",
    "VaultDecision",
    "LedgerEntry",
    "VaultDecisionOutcome",
    "VaultSummary",
    "fund_vault_item",
    "decide_vault_item",
    "vault_progress",
    "is_ready",
    "summarize_vault",
]
