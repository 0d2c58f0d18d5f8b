"""
Shared schema primitives.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

# Amounts arrive as numbers or strings ("10", "", "1,250.00"); see ledger.coercion.to_amount
AmountInput = Optional[Union[float, str]]


class MessageResponse(BaseModel):
    message: str
