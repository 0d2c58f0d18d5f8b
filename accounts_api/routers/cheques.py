"""
Cheque API endpoints.

GET          /cheques                      — list cheques, latest posting first
GET          /cheques/{number}             — get one cheque
POST         /cheques                      — issue a cheque (all fields required)
PUT|PATCH    /cheques/{number}             — edit the fields sent
PUT|PATCH    /cheques/{number}/status      — set status (any text)
DELETE       /cheques/{number}             — delete (details are kept)
GET          /cheques/{number}/details     — cheque-holder identity
POST         /cheques/{number}/details     — upsert cheque-holder identity
PATCH        /cheques/{number}/details     — partial update of cheque-holder identity
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from accounts_api.database import get_db
from accounts_api.errors import missing_field
from accounts_api.ledger import delete_by_key, insert_unique, to_amount, trim_text, upsert_by_key
from accounts_api.ledger.coercion import is_blank
from accounts_api.models import ChequeDetailsModel, ChequeModel
from accounts_api.schemas import (
    ChequeCreate,
    ChequeDetailsPatch,
    ChequeDetailsResponse,
    ChequeDetailsUpsert,
    ChequeResponse,
    ChequeStatusUpdate,
    ChequeUpdate,
    MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

CHEQUE_REQUIRED = (
    "cheque_number",
    "bank_drawn",
    "payer",
    "payee",
    "amount",
    "admin_charge",
    "net_to_payee",
    "date_posted",
)
CHEQUE_AMOUNTS = ("amount", "admin_charge", "net_to_payee")
DETAILS_REQUIRED = ("address", "phone_number", "id_type", "id_number")
DETAILS_TEXT = ("address", "id_type", "id_number")


def get_cheque_or_404(db: Session, cheque_number: str) -> ChequeModel:
    cheque = db.query(ChequeModel).filter(ChequeModel.cheque_number == cheque_number).first()
    if not cheque:
        logger.warning("Cheque not found: %s", cheque_number)
        raise HTTPException(status_code=404, detail="Cheque not found")
    return cheque


def cheque_changes(fields: dict) -> dict:
    """Trim text and coerce amounts of a cheque field subset."""
    changes = {}
    for field, value in fields.items():
        if field in CHEQUE_AMOUNTS:
            changes[field] = to_amount(value, field)
        elif isinstance(value, str):
            changes[field] = value.strip()
        else:
            changes[field] = value
    return changes


def details_changes(fields: dict) -> dict:
    return {
        field: trim_text(value) if field in DETAILS_TEXT else value
        for field, value in fields.items()
    }


# ── GET /cheques ──────────────────────────────────────────────────────────
@router.get("/cheques", response_model=List[ChequeResponse])
def list_cheques(db: Session = Depends(get_db)):
    rows = (
        db.query(ChequeModel)
        .order_by(ChequeModel.date_posted.desc(), ChequeModel.created_at.desc())
        .all()
    )
    logger.info("Found %d cheques", len(rows))
    return rows


# ── GET /cheques/{cheque_number} ──────────────────────────────────────────
@router.get("/cheques/{cheque_number}", response_model=ChequeResponse)
def get_cheque(cheque_number: str, db: Session = Depends(get_db)):
    return get_cheque_or_404(db, cheque_number)


# ── POST /cheques ─────────────────────────────────────────────────────────
@router.post("/cheques", response_model=ChequeResponse, status_code=201)
def create_cheque(req: ChequeCreate, db: Session = Depends(get_db)):
    fields = req.model_dump()
    for field in CHEQUE_REQUIRED:
        if is_blank(fields[field]):
            raise HTTPException(status_code=400, detail=missing_field(field))

    values = cheque_changes({k: v for k, v in fields.items() if k != "cheque_number"})
    if is_blank(values["status"]):
        values["status"] = "pending"

    return insert_unique(
        db,
        ChequeModel,
        "cheque_number",
        fields["cheque_number"].strip(),
        values,
        conflict_message="Cheque already exists.",
    )


# ── PUT|PATCH /cheques/{cheque_number} ────────────────────────────────────
@router.api_route("/cheques/{cheque_number}", methods=["PUT", "PATCH"], response_model=ChequeResponse)
def update_cheque(cheque_number: str, req: ChequeUpdate, db: Session = Depends(get_db)):
    changes = cheque_changes(req.model_dump(exclude_unset=True))
    for field in ("bank_drawn", "payer", "payee", "status"):
        if field in changes and is_blank(changes[field]):
            raise HTTPException(status_code=400, detail=missing_field(field))

    cheque = get_cheque_or_404(db, cheque_number)
    for field, value in changes.items():
        setattr(cheque, field, value)
    db.commit()
    db.refresh(cheque)
    logger.info("Updated cheque %s (%s)", cheque_number, ", ".join(changes) or "no fields")
    return cheque


# ── PUT|PATCH /cheques/{cheque_number}/status ─────────────────────────────
@router.api_route("/cheques/{cheque_number}/status", methods=["PUT", "PATCH"], response_model=ChequeResponse)
def update_cheque_status(cheque_number: str, req: ChequeStatusUpdate, db: Session = Depends(get_db)):
    status = trim_text(req.status)
    if not status:
        raise HTTPException(status_code=400, detail=missing_field("status"))

    cheque = get_cheque_or_404(db, cheque_number)
    cheque.status = status
    db.commit()
    db.refresh(cheque)
    logger.info("Cheque %s status -> %s", cheque_number, status)
    return cheque


# ── DELETE /cheques/{cheque_number} ───────────────────────────────────────
@router.delete("/cheques/{cheque_number}", response_model=MessageResponse)
def delete_cheque(cheque_number: str, db: Session = Depends(get_db)):
    delete_by_key(db, ChequeModel, "cheque_number", cheque_number, "Cheque not found")
    return {"message": "Cheque deleted successfully"}


# ── GET /cheques/{cheque_number}/details ──────────────────────────────────
@router.get("/cheques/{cheque_number}/details", response_model=ChequeDetailsResponse)
def get_cheque_details(cheque_number: str, db: Session = Depends(get_db)):
    details = db.query(ChequeDetailsModel).filter(ChequeDetailsModel.cheque_number == cheque_number).first()
    if not details:
        raise HTTPException(status_code=404, detail="Cheque details not found")
    return details


# ── POST /cheques/{cheque_number}/details ─────────────────────────────────
@router.post("/cheques/{cheque_number}/details", response_model=ChequeDetailsResponse)
def upsert_cheque_details(
    cheque_number: str,
    req: ChequeDetailsUpsert,
    response: Response,
    db: Session = Depends(get_db),
):
    fields = req.model_dump()
    for field in DETAILS_REQUIRED:
        if is_blank(fields[field]):
            raise HTTPException(status_code=400, detail=missing_field(field))

    details, created = upsert_by_key(
        db, ChequeDetailsModel, "cheque_number", cheque_number, details_changes(fields)
    )
    response.status_code = 201 if created else 200
    return details


# ── PATCH /cheques/{cheque_number}/details ────────────────────────────────
@router.patch("/cheques/{cheque_number}/details", response_model=ChequeDetailsResponse)
def patch_cheque_details(cheque_number: str, req: ChequeDetailsPatch, db: Session = Depends(get_db)):
    changes = details_changes(req.model_dump(exclude_unset=True))
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")

    details = db.query(ChequeDetailsModel).filter(ChequeDetailsModel.cheque_number == cheque_number).first()
    if not details:
        raise HTTPException(status_code=404, detail="Cheque details not found")

    for field, value in changes.items():
        setattr(details, field, value)
    db.commit()
    db.refresh(details)
    logger.info("Patched cheque details %s (%s)", cheque_number, ", ".join(changes))
    return details
