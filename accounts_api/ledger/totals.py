"""
Derived totals of the structured daily report.

    total_cash_payouts     = sum(outbound_cash_sale)
    total_cash_proceedings = sum(cash_particulars)
    subtotal               = total_cash_payouts + total_cash_proceedings
    cash_surplus_deficit   = cash_bf + starting_cash - subtotal
    overall_sales          = Cash Sales + Credit Sales + Outbound Sales - Cash Payouts

``overall_sales`` reads the client-submitted ``total_proceedings`` map as-is;
the other totals are always recomputed from the category maps.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from accounts_api.errors import ValidationError
from accounts_api.ledger.coercion import to_amount
from accounts_api.schemas.report import DerivedTotals

logger = logging.getLogger(__name__)

CASH_SALES = "Cash Sales"
CREDIT_SALES = "Credit Sales"
OUTBOUND_SALES = "Outbound Sales"
CASH_PAYOUTS = "Cash Payouts"
PROCEEDINGS_KEYS = (CASH_SALES, CREDIT_SALES, OUTBOUND_SALES, CASH_PAYOUTS)


def sum_category_map(categories: Optional[Mapping[str, Any]], name: str = "categories") -> float:
    """Sum a label -> amount map; blank amounts count as zero."""
    if not categories:
        return 0.0
    if not isinstance(categories, Mapping):
        raise ValidationError(f"Field '{name}' must be an object of label -> amount")
    return sum(
        to_amount(value, field=f"{name}[{label!r}]") for label, value in categories.items()
    )


def _proceedings(total_proceedings: Optional[Mapping[str, Any]]) -> dict[str, float]:
    if not isinstance(total_proceedings, Mapping):
        total_proceedings = {}
    for key in PROCEEDINGS_KEYS:
        if key not in total_proceedings:
            raise ValidationError(f"total_proceedings is missing required key '{key}'")
    return {
        key: to_amount(total_proceedings[key], field=f"total_proceedings[{key!r}]")
        for key in PROCEEDINGS_KEYS
    }


def compute_derived_totals(
    cash_particulars: Optional[Mapping[str, Any]],
    outbound_cash_sale: Optional[Mapping[str, Any]],
    cash_bf: Any,
    starting_cash: Any,
    total_proceedings: Optional[Mapping[str, Any]],
) -> DerivedTotals:
    """Compute the five derived scalars. Pure function of its inputs."""
    proceedings = _proceedings(total_proceedings)

    total_cash_payouts = sum_category_map(outbound_cash_sale, "outbound_cash_sale")
    total_cash_proceedings = sum_category_map(cash_particulars, "cash_particulars")
    subtotal = total_cash_payouts + total_cash_proceedings
    cash_surplus_deficit = (
        to_amount(cash_bf, "cash_bf") + to_amount(starting_cash, "starting_cash") - subtotal
    )
    overall_sales = (
        proceedings[CASH_SALES]
        + proceedings[CREDIT_SALES]
        + proceedings[OUTBOUND_SALES]
        - proceedings[CASH_PAYOUTS]
    )

    totals = DerivedTotals(
        total_cash_payouts=total_cash_payouts,
        total_cash_proceedings=total_cash_proceedings,
        subtotal=subtotal,
        cash_surplus_deficit=cash_surplus_deficit,
        overall_sales=overall_sales,
    )
    logger.debug("Derived totals: %s", totals.model_dump())
    return totals
