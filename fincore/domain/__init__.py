"""Domain-level errors shared by the engines and the HTTP layer."""

from fincore.domain.errors import (
    EmptyGroupError,
    FinanceError,
    InvalidAmountError,
    InvalidExpenseOwnerError,
    InvalidHorizonError,
    VaultItemClosedError,
)

__all__ = [
    "FinanceError",
    "EmptyGroupError",
    "InvalidExpenseOwnerError",
    "InvalidAmountError",
    "InvalidHorizonError",
    "VaultItemClosedError",
]
