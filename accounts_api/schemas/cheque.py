"""
Cheque and cheque-holder schemas
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from accounts_api.schemas.base import AmountInput

PHONE_MAX_LENGTH = 20


class ChequeCreate(BaseModel):
    """Cheque creation — every field except ``status`` is required."""
    cheque_number: Optional[str] = None
    bank_drawn: Optional[str] = None
    payer: Optional[str] = None
    payee: Optional[str] = None
    amount: AmountInput = None
    admin_charge: AmountInput = None
    net_to_payee: AmountInput = None
    date_posted: Optional[date] = None
    status: Optional[str] = None

    @field_validator("cheque_number", mode="before")
    @classmethod
    def _number_as_text(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ChequeUpdate(BaseModel):
    """Cheque edit; only the fields sent are changed."""
    bank_drawn: Optional[str] = None
    payer: Optional[str] = None
    payee: Optional[str] = None
    amount: AmountInput = None
    admin_charge: AmountInput = None
    net_to_payee: AmountInput = None
    date_posted: Optional[date] = None
    status: Optional[str] = None


class ChequeStatusUpdate(BaseModel):
    status: Optional[str] = Field(default=None, description="Free text, e.g. pending|cleared|bounced")


class ChequeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cheque_number: str
    bank_drawn: str
    payer: str
    payee: str
    amount: float
    admin_charge: float
    net_to_payee: float
    date_posted: Optional[date] = None
    status: str
    created_at: datetime
    updated_at: datetime


def _clean_phone(v):
    if v is None:
        return v
    if isinstance(v, int) and not isinstance(v, bool):
        v = str(v)
    if not isinstance(v, str):
        raise ValueError("phone_number must be a string of digits")
    v = v.strip()
    if v and not v.isdigit():
        raise ValueError("phone_number must contain digits only")
    if len(v) > PHONE_MAX_LENGTH:
        raise ValueError(f"phone_number must be at most {PHONE_MAX_LENGTH} digits")
    return v


class ChequeDetailsUpsert(BaseModel):
    """Cheque-holder identity; address, phone and ID are required on insert."""
    address: Optional[str] = None
    phone_number: Optional[str] = None
    id_type: Optional[str] = None
    id_number: Optional[str] = None
    date_of_issue: Optional[date] = None
    date_of_expiry: Optional[date] = None
    date_of_birth: Optional[date] = None

    _phone = field_validator("phone_number", mode="before")(_clean_phone)


class ChequeDetailsPatch(ChequeDetailsUpsert):
    """Partial update. The field set above is the allow-list; unknown keys are rejected."""
    model_config = ConfigDict(extra="forbid")


class ChequeDetailsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    cheque_number: str
    address: Optional[str] = None
    phone_number: Optional[str] = None
    id_type: Optional[str] = None
    id_number: Optional[str] = None
    date_of_issue: Optional[date] = None
    date_of_expiry: Optional[date] = None
    date_of_birth: Optional[date] = None
    created_at: datetime
    updated_at: datetime
