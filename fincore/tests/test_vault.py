from __future__ import annotations

from math import isclose

import pytest

from fincore.core.vault import (
    VaultDecision,
    decide_vault_item,
    fund_vault_item,
    is_ready,
    summarize_vault,
    vault_progress,
)
from fincore.domain.errors import InvalidAmountError, VaultItemClosedError
from fincore.models import VaultItem, VaultStatus


def item(target: float = 50000, saved: float = 0, status: VaultStatus = VaultStatus.ACTIVE) -> VaultItem:
    return VaultItem(name="PS5 Pro", target_amount=target, current_amount=saved, status=status)


def test_funding_adds_to_saved_amount():
    funded = fund_vault_item(item(saved=1000), 2500)

    assert funded.current_amount == 3500
    assert not is_ready(funded)


def test_funding_caps_at_target():
    funded = fund_vault_item(item(target=5000, saved=4000), 3000)

    assert funded.current_amount == 5000
    assert is_ready(funded)
    assert vault_progress(funded) == 100


def test_funding_can_overflow_when_cap_disabled():
    funded = fund_vault_item(item(target=5000, saved=4000), 3000, cap_at_target=False)

    assert funded.current_amount == 7000
    #progress never reports more than 100%
    assert vault_progress(funded) == 100


def test_funding_returns_a_new_item():
    original = item(saved=100)

    fund_vault_item(original, 50)

    assert original.current_amount == 100


@pytest.mark.parametrize("amount", [0, -10, float("nan"), float("inf")])
def test_funding_rejects_non_positive_amounts(amount):
    with pytest.raises(InvalidAmountError):
        fund_vault_item(item(), amount)


def test_funding_closed_item_rejected():
    with pytest.raises(VaultItemClosedError) as excinfo:
        fund_vault_item(item(status=VaultStatus.PURCHASED), 100)

    assert excinfo.value.status == "purchased"


def test_progress_percent():
    assert isclose(vault_progress(item(target=200, saved=50)), 25.0)
    assert vault_progress(item(target=200)) == 0


def test_summary_counts_active_items_only():
    items = [
        item(target=1000, saved=1000),
        item(target=3000, saved=500),
        item(target=9000, saved=9000, status=VaultStatus.SAVED),
    ]

    summary = summarize_vault(items)

    assert summary.active_count == 2
    assert summary.total_target == 4000
    assert summary.total_saved == 1500
    assert summary.ready_count == 1


def test_buying_books_an_expense_in_the_item_category():
    outcome = decide_vault_item(item(target=5000, saved=5000), VaultDecision.BUY)

    assert outcome.item.status == VaultStatus.PURCHASED
    assert outcome.released_amount == 5000
    assert outcome.entry.kind == "expense"
    assert outcome.entry.category == "Shopping"
    assert outcome.entry.description == "Vault Purchase: PS5 Pro"
    assert outcome.entry.amount == 5000


def test_saving_books_savings_income():
    # partly funded items can be closed too; only what was saved is released
    outcome = decide_vault_item(item(target=5000, saved=1200), "save")

    assert outcome.item.status == VaultStatus.SAVED
    assert outcome.released_amount == 1200
    assert outcome.entry.kind == "income"
    assert outcome.entry.category == "Savings"
    assert outcome.entry.amount == 1200


def test_investing_only_closes_the_item():
    original = item(saved=800)

    outcome = decide_vault_item(original, VaultDecision.INVEST)

    assert outcome.item.status == VaultStatus.INVESTED
    assert outcome.released_amount == 800
    assert outcome.entry is None
    assert original.status == VaultStatus.ACTIVE


def test_decision_on_closed_item_rejected():
    with pytest.raises(VaultItemClosedError):
        decide_vault_item(item(status=VaultStatus.SAVED), VaultDecision.BUY)


def test_unknown_decision_rejected():
    with pytest.raises(ValueError):
        decide_vault_item(item(), "sell")


def test_closed_item_leaves_summary():
    outcome = decide_vault_item(item(target=1000, saved=1000), VaultDecision.BUY)

    assert summarize_vault([outcome.item]).active_count == 0
