"""Typed precondition failures raised by the computation engines."""

from __future__ import annotations

from typing import Optional


class FinanceError(ValueError):
    """Base class for engine failures. ``code`` is stable and safe to expose."""

    code = "FinanceError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": self.message}


class EmptyGroupError(FinanceError):
    code = "EmptyGroup"

    def __init__(self) -> None:
        super().__init__("group must have at least one member")


class InvalidExpenseOwnerError(FinanceError):
    code = "InvalidExpenseOwner"

    def __init__(self, member: str):
        super().__init__(f"expense paid by {member!r} who is not a group member")
        self.member = member


class InvalidAmountError(FinanceError):
    code = "InvalidAmount"

    def __init__(self, amount: float, what: str = "expense"):
        super().__init__(f"{what} amount must be a positive finite number, got {amount}")
        self.amount = amount


class InvalidHorizonError(FinanceError):
    code = "InvalidHorizon"

    def __init__(self, start: object, end: Optional[object]):
        super().__init__(f"expected end date {end} is not after start date {start}")
        self.start = start
        self.end = end


class VaultItemClosedError(FinanceError):
    code = "VaultItemClosed"

    def __init__(self, name: str, status: str):
        super().__init__(f"vault item {name!r} is {status} and no longer active")
        self.status = status


__all__ = [
    "FinanceError",
    "EmptyGroupError",
    "InvalidExpenseOwnerError",
    "InvalidAmountError",
    "InvalidHorizonError",
    "VaultItemClosedError",
]
