from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    """Immutable input record; camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class ContributionType(str, Enum):
    ONE_TIME = "oneTime"
    RECURRING = "recurring"


class Investment(FrozenModel):
    """
    One investment as stored by the application.

    principal_amount is the lump sum for a one-time contribution, or the
    monthly amount for a recurring one. expected_annual_return_rate is a
    percentage (12 means 12% a year).
    """

    contribution_type: ContributionType
    principal_amount: float = Field(gt=0)
    start_date: date
    expected_annual_return_rate: float = Field(default=0.0, ge=0)
    expected_end_date: Optional[date] = None

    name: Optional[str] = None
    category: Optional[str] = None

    @property
    def is_recurring(self) -> bool:
        return self.contribution_type == ContributionType.RECURRING


class Expense(FrozenModel):
    # amount is not constrained here: the settlement engine owns the
    # positive-amount policy (reject or skip)
    amount: float
    paid_by: str = Field(min_length=1)
    description: Optional[str] = None
    spent_on: Optional[date] = Field(default=None, alias="date")

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class VaultStatus(str, Enum):
    ACTIVE = "active"
    PURCHASED = "purchased"
    SAVED = "saved"
    INVESTED = "invested"


class VaultItem(FrozenModel):
    name: str = Field(min_length=1)
    target_amount: float = Field(ge=1)
    current_amount: float = Field(default=0.0, ge=0)
    category: str = "Shopping"
    description: Optional[str] = None
    status: VaultStatus = VaultStatus.ACTIVE

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


__all__ = [
    "FrozenModel",
    "ContributionType",
    "Investment",
    "Expense",
    "VaultStatus",
    "VaultItem",
]
