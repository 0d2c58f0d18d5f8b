"""
Input coercion: amounts, free text, report dates and report payloads.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any, Optional

from accounts_api.errors import ValidationError, not_numeric

PLAIN_DECIMAL = re.compile(r"^-?\d+(\.\d+)?$")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def to_amount(value: Any, field: str = "amount") -> float:
    """Coerce a submitted amount to float.

    Blank (``None`` or an empty/whitespace string) counts as ``0``; anything
    that is not a finite number raises :class:`ValidationError`.
    """
    if is_blank(value):
        return 0.0
    if isinstance(value, bool):
        raise ValidationError(not_numeric(field, value))
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not PLAIN_DECIMAL.match(text):
            raise ValidationError(not_numeric(field, value))
        number = float(text)
    else:
        raise ValidationError(not_numeric(field, value))
    if not math.isfinite(number):
        raise ValidationError(not_numeric(field, value))
    return number


def trim_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


def parse_report_date(value: Any, field: str = "report_date") -> date:
    """Parse a report date from its ``YYYY-MM-DD`` textual prefix.

    ``2024-01-01``, ``2024-01-01T00:00:00.000Z`` and ``2024-01-01 09:30`` all
    address the same day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if is_blank(value):
        raise ValidationError(f"Missing required field: {field}")
    text = str(value).strip()
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Field '{field}' must be a date (YYYY-MM-DD), got {value!r}") from None


def normalize_report_data(value: Any) -> dict:
    """Receivables payloads are always stored as a JSON object."""
    if isinstance(value, dict):
        return value
    return {}
