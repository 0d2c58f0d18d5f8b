"""
Daily receivables and structured daily report schemas
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from accounts_api.schemas.base import AmountInput


# ---------------------------------------------------------------------------
# Daily receivables
# ---------------------------------------------------------------------------

class DailyReceivablesUpsert(BaseModel):
    """Receivables snapshot, upserted by ``report_date``"""
    report_date: Optional[str] = Field(default=None, description="YYYY-MM-DD (longer ISO strings are cut to the date)")
    opening_balance: AmountInput = None
    closing_balance: AmountInput = None
    report_data: Any = None


class DailyReceivablesUpdate(BaseModel):
    opening_balance: AmountInput = None
    closing_balance: AmountInput = None
    report_data: Any = None


class DailyReceivablesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    report_date: date
    opening_balance: float
    closing_balance: float
    report_data: Dict[str, Any] = Field(default_factory=dict)
    status: str
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Structured daily report
# ---------------------------------------------------------------------------

class DerivedTotals(BaseModel):
    """Totals computed server-side from the report inputs."""
    total_cash_payouts: float = 0.0
    total_cash_proceedings: float = 0.0
    subtotal: float = 0.0
    cash_surplus_deficit: float = 0.0
    overall_sales: float = 0.0


class DailyReportInput(BaseModel):
    """Create/edit body. Derived totals sent by the client are ignored."""
    report_date: Optional[str] = None
    cash_particulars: Optional[Dict[str, Any]] = None
    credit_particulars: Optional[Dict[str, Any]] = None
    outbound_cash_sale: Optional[Dict[str, Any]] = None
    cash_correspondence: Optional[Dict[str, Any]] = None
    cash_bf: AmountInput = None
    starting_cash: AmountInput = None
    total_proceedings: Optional[Dict[str, Any]] = Field(
        default=None,
        description='Must contain "Cash Sales", "Credit Sales", "Outbound Sales", "Cash Payouts"',
    )


class DailyReportResponse(DerivedTotals):
    model_config = ConfigDict(from_attributes=True)

    id: int
    report_date: date
    cash_particulars: Dict[str, Any] = Field(default_factory=dict)
    credit_particulars: Dict[str, Any] = Field(default_factory=dict)
    outbound_cash_sale: Dict[str, Any] = Field(default_factory=dict)
    cash_correspondence: Dict[str, Any] = Field(default_factory=dict)
    cash_bf: float
    starting_cash: float
    total_proceedings: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
