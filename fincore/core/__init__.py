"""Pure computation engines: settlement netting, investment valuation, vault funding."""

from fincore.core.settlement import SETTLEMENT_TOLERANCE, SettlementResult, Transfer, compute_settlement
from fincore.core.valuation import (
    PortfolioSummary,
    ValuationResult,
    summarize_portfolio,
    valuate_investment,
)
from fincore.core.vault import (
    VAULT_CAP_AT_TARGET,
    VaultDecision,
    VaultSummary,
    decide_vault_item,
    fund_vault_item,
    summarize_vault,
)

__all__ = [
    "SETTLEMENT_TOLERANCE",
    "SettlementResult",
    "Transfer",
    "compute_settlement",
    "ValuationResult",
    "PortfolioSummary",
    "valuate_investment",
    "summarize_portfolio",
    "VAULT_CAP_AT_TARGET",
    "VaultSummary",
    "VaultDecision",
    "fund_vault_item",
    "decide_vault_item",
    "summarize_vault",
]
