"""
fincore: settlement netting and investment valuation for a personal-finance app.

The engines are pure functions over immutable pydantic records; the Flask
app in ``fincore.app`` is a thin JSON layer on top of them.
"""

from fincore.core import (
    compute_settlement,
    decide_vault_item,
    fund_vault_item,
    summarize_portfolio,
    summarize_vault,
    valuate_investment,
)
from fincore.domain.errors import FinanceError
from fincore.models import ContributionType, Expense, Investment, VaultItem, VaultStatus

__version__ = "0.1.0"

__all__ = [
    "compute_settlement",
    "valuate_investment",
    "summarize_portfolio",
    "fund_vault_item",
    "decide_vault_item",
    "summarize_vault",
    "FinanceError",
    "ContributionType",
    "Expense",
    "Investment",
    "VaultItem",
    "VaultStatus",
]
