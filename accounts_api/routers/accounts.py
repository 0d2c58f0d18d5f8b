"""
Chart of accounts and per-account transactions.

GET    /accounts                       — list accounts, newest first
POST   /accounts                       — create account (name must be unique)
DELETE /accounts/{id}                  — delete account (transactions are kept)
GET    /accounts/{id}/transactions     — list an account's transactions, latest date first
POST   /accounts/{id}/transactions     — add a transaction
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from accounts_api.database import get_db
from accounts_api.errors import missing_field
from accounts_api.ledger import delete_by_key, insert_unique, to_amount, trim_text
from accounts_api.models import AccountModel, TransactionModel
from accounts_api.schemas import (
    AccountCreate,
    AccountResponse,
    MessageResponse,
    TransactionInput,
    TransactionResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()


# ── GET /accounts ─────────────────────────────────────────────────────────
@router.get("/accounts", response_model=List[AccountResponse])
def list_accounts(db: Session = Depends(get_db)):
    rows = (
        db.query(AccountModel)
        .order_by(AccountModel.created_at.desc(), AccountModel.id.desc())
        .all()
    )
    logger.info("Found %d accounts", len(rows))
    return rows


# ── POST /accounts ────────────────────────────────────────────────────────
@router.post("/accounts", response_model=AccountResponse, status_code=201)
def create_account(req: AccountCreate, db: Session = Depends(get_db)):
    name = trim_text(req.name)
    if not name:
        raise HTTPException(status_code=400, detail=missing_field("name"))

    return insert_unique(
        db,
        AccountModel,
        "name",
        name,
        {
            "balance": to_amount(req.balance, "balance"),
            "balance_type": trim_text(req.balance_type),
        },
        conflict_message="Account already exists.",
    )


# ── DELETE /accounts/{account_id} ─────────────────────────────────────────
@router.delete("/accounts/{account_id}", response_model=MessageResponse)
def delete_account(account_id: int, db: Session = Depends(get_db)):
    delete_by_key(db, AccountModel, "id", account_id, "Account not found")
    return {"message": "Account deleted successfully"}


# ── GET /accounts/{account_id}/transactions ───────────────────────────────
@router.get("/accounts/{account_id}/transactions", response_model=List[TransactionResponse])
def list_transactions(account_id: int, db: Session = Depends(get_db)):
    rows = (
        db.query(TransactionModel)
        .filter(TransactionModel.account_id == account_id)
        .order_by(TransactionModel.date.desc(), TransactionModel.id.desc())
        .all()
    )
    logger.info("Found %d transactions for account %s", len(rows), account_id)
    return rows


# ── POST /accounts/{account_id}/transactions ──────────────────────────────
@router.post("/accounts/{account_id}/transactions", response_model=TransactionResponse, status_code=201)
def create_transaction(account_id: int, req: TransactionInput, db: Session = Depends(get_db)):
    account = db.query(AccountModel).filter(AccountModel.id == account_id).first()
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")

    debit = to_amount(req.debit, "debit")
    credit = to_amount(req.credit, "credit")
    if debit == 0 and credit == 0:
        raise HTTPException(status_code=400, detail="Either debit or credit must be provided.")

    row = TransactionModel(
        account_id=account_id,
        date=req.date,
        debit=debit,
        credit=credit,
        details=trim_text(req.details),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Created transaction %s on account %s", row.id, account_id)
    return row
