"""
Bookkeeping rules shared by the routers.

Numeric/text coercion, natural-key upserts and the derived totals of the
structured daily report. Nothing here knows about HTTP.
"""
from accounts_api.ledger.coercion import (
    normalize_report_data,
    parse_report_date,
    to_amount,
    trim_text,
)
from accounts_api.ledger.totals import compute_derived_totals, sum_category_map
from accounts_api.ledger.upsert import delete_by_key, insert_unique, upsert_by_key

__all__ = [
    "compute_derived_totals",
    "delete_by_key",
    "insert_unique",
    "normalize_report_data",
    "parse_report_date",
    "sum_category_map",
    "to_amount",
    "trim_text",
    "upsert_by_key",
]
