from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import structlog
from pydantic import Field

from fincore.domain.errors import EmptyGroupError, InvalidAmountError, InvalidExpenseOwnerError
from fincore.models import Expense, FrozenModel

logger = structlog.get_logger(__name__)

# Balances within half a currency unit of zero count as settled. This absorbs
# rounding noise from the even split and is a business policy, not float slop.
SETTLEMENT_TOLERANCE = 0.5


class Transfer(FrozenModel):
    from_member: str = Field(alias="from")
    to_member: str = Field(alias="to")
    amount: float


class SettlementResult(FrozenModel):
    total_expenses: float
    share_per_person: float
    per_member_paid: Dict[str, float]
    net_balance: Dict[str, float]
    transfers: List[Transfer]
    skipped_expenses: int = 0


@dataclass(frozen=True)
class MemberBalance:
    member: str
    balance: float


Queue = Tuple[MemberBalance, ...]


def _distinct(members: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(members))


def _accepted_expenses(
    members: Sequence[str],
    expenses: Sequence[Expense],
    skip_non_positive: bool,
) -> Tuple[List[Expense], int]:
    """Check every expense before any arithmetic; return the ones to count."""
    known = set(members)
    accepted: List[Expense] = []
    skipped = 0
    for expense in expenses:
        if expense.paid_by not in known:
            raise InvalidExpenseOwnerError(expense.paid_by)
        if not math.isfinite(expense.amount):
            raise InvalidAmountError(expense.amount)
        if expense.amount <= 0:
            if not skip_non_positive:
                raise InvalidAmountError(expense.amount)
            skipped += 1
            continue
        accepted.append(expense)
    return accepted, skipped


def classify(
    net_balance: Dict[str, float], tolerance: float = SETTLEMENT_TOLERANCE
) -> Tuple[Queue, Queue]:
    """
    Split members into (debtors, creditors) queues.

    Debtors come most-negative first, creditors most-positive first. Both
    sorts are stable, so exact ties keep the group's member order.
    """
    debtors = sorted(
        (MemberBalance(m, b) for m, b in net_balance.items() if b < -tolerance),
        key=lambda entry: entry.balance,
    )
    creditors = sorted(
        (MemberBalance(m, b) for m, b in net_balance.items() if b > tolerance),
        key=lambda entry: entry.balance,
        reverse=True,
    )
    return tuple(debtors), tuple(creditors)


def match_step(
    debtors: Queue,
    creditors: Queue,
    tolerance: float = SETTLEMENT_TOLERANCE,
) -> Tuple[Optional[Transfer], Queue, Queue]:
    """
    Match the head debtor against the head creditor.

    Returns the transfer (None when it would fall within tolerance) and the
    remaining queues. A side leaves its queue once its balance is within
    tolerance of zero. The side whose balance was the smaller of the two
    ends at exactly 0.0, so at least one side leaves on every step, even
    with a zero tolerance.
    """
    debtor, creditor = debtors[0], creditors[0]
    amount = min(abs(debtor.balance), creditor.balance)

    transfer = None
    if amount > tolerance:
        transfer = Transfer(from_member=debtor.member, to_member=creditor.member, amount=amount)

    debtor = MemberBalance(debtor.member, debtor.balance + amount)
    creditor = MemberBalance(creditor.member, creditor.balance - amount)

    next_debtors = debtors[1:] if abs(debtor.balance) <= tolerance else (debtor,) + debtors[1:]
    next_creditors = creditors[1:] if creditor.balance <= tolerance else (creditor,) + creditors[1:]
    return transfer, next_debtors, next_creditors


def plan_transfers(
    debtors: Queue, creditors: Queue, tolerance: float = SETTLEMENT_TOLERANCE
) -> List[Transfer]:
    transfers: List[Transfer] = []
    while debtors and creditors:
        transfer, debtors, creditors = match_step(debtors, creditors, tolerance)
        if transfer is not None:
            transfers.append(transfer)
    return transfers


def compute_settlement(
    members: Iterable[str],
    expenses: Iterable[Expense],
    *,
    tolerance: float = SETTLEMENT_TOLERANCE,
    skip_non_positive: bool = False,
) -> SettlementResult:
    """
    Net a group's shared expenses into per-member balances and a transfer plan.

    Every expense is split evenly across all members. Duplicate member ids
    count once. With ``skip_non_positive`` the non-positive expenses are
    ignored (and counted) instead of raising InvalidAmountError. A negative
    or NaN ``tolerance`` raises ValueError before anything is read.
    """
    if not tolerance >= 0:
        raise ValueError(f"Settlement tolerance must be >= 0, got {tolerance!r}")

    group = _distinct(members)
    if not group:
        raise EmptyGroupError()

    counted, skipped = _accepted_expenses(group, list(expenses), skip_non_positive)

    total = sum(expense.amount for expense in counted)
    share = total / len(group)

    paid: Dict[str, float] = {member: 0.0 for member in group}
    for expense in counted:
        paid[expense.paid_by] += expense.amount

    net = {member: paid[member] - share for member in group}

    debtors, creditors = classify(net, tolerance)
    transfers = plan_transfers(debtors, creditors, tolerance)

    logger.debug(
        "settlement_computed",
        members=len(group),
        expenses=len(counted),
        skipped=skipped,
        debtors=len(debtors),
        creditors=len(creditors),
        transfers=len(transfers),
    )

    return SettlementResult(
        total_expenses=total,
        share_per_person=share,
        per_member_paid=paid,
        net_balance=net,
        transfers=transfers,
        skipped_expenses=skipped,
    )


__all__ = [
    "SETTLEMENT_TOLERANCE",
    "Transfer",
    "SettlementResult",
    "MemberBalance",
    "classify",
    "match_step",
    "plan_transfers",
    "compute_settlement",
]
