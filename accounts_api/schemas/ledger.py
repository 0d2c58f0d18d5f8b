"""
Account and transaction schemas
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from accounts_api.schemas.base import AmountInput


class AccountCreate(BaseModel):
    """Account creation; the client sends ``balanceType``."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    balance: AmountInput = None
    balance_type: Optional[str] = Field(default=None, alias="balanceType")


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    balance: float
    balance_type: Optional[str] = None
    created_at: dt.datetime


class TransactionInput(BaseModel):
    """Transaction create/edit body"""
    date: Optional[dt.date] = None
    debit: AmountInput = None
    credit: AmountInput = None
    details: Optional[str] = None


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    account_id: int
    date: Optional[dt.date] = None
    debit: float
    credit: float
    details: Optional[str] = None
    created_at: dt.datetime
