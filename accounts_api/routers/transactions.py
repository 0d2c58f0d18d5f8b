"""
Transaction edits.

PUT    /transactions/{id}   — replace date, debit, credit, details
DELETE /transactions/{id}   — delete
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from accounts_api.database import get_db
from accounts_api.ledger import delete_by_key, to_amount, trim_text
from accounts_api.models import TransactionModel
from accounts_api.schemas import MessageResponse, TransactionInput, TransactionResponse

logger = logging.getLogger(__name__)
router = APIRouter()


# ── PUT /transactions/{transaction_id} ────────────────────────────────────
@router.put("/transactions/{transaction_id}", response_model=TransactionResponse)
def update_transaction(transaction_id: int, req: TransactionInput, db: Session = Depends(get_db)):
    # debit/credit may both be zero after an edit
    debit = to_amount(req.debit, "debit")
    credit = to_amount(req.credit, "credit")

    row = db.query(TransactionModel).filter(TransactionModel.id == transaction_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Transaction not found")

    row.date = req.date
    row.debit = debit
    row.credit = credit
    row.details = trim_text(req.details)
    db.commit()
    db.refresh(row)
    logger.info("Updated transaction %s", transaction_id)
    return row


# ── DELETE /transactions/{transaction_id} ─────────────────────────────────
@router.delete("/transactions/{transaction_id}", response_model=MessageResponse)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    delete_by_key(db, TransactionModel, "id", transaction_id, "Transaction not found")
    return {"message": "Transaction deleted successfully"}
