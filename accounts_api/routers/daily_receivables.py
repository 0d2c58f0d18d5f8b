"""
Daily receivables snapshots, one per report date.

GET    /daily-receivables                 — list, latest date first
GET    /daily-receivables/{date}          — get one
POST   /daily-receivables                 — upsert by report_date
PUT    /daily-receivables/{date}          — update an existing snapshot
PUT    /daily-receivables/finish/{date}   — mark as finished
DELETE /daily-receivables/{date}          — delete

``{date}`` is matched on its ``YYYY-MM-DD`` prefix. Status is "open" on insert
and only the finish route moves it to "finished".
"""
from __future__ import annotations

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from accounts_api.database import get_db
from accounts_api.ledger import (
    delete_by_key,
    normalize_report_data,
    parse_report_date,
    to_amount,
    upsert_by_key,
)
from accounts_api.models import DailyReceivablesModel
from accounts_api.schemas import (
    DailyReceivablesResponse,
    DailyReceivablesUpdate,
    DailyReceivablesUpsert,
    MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

STATUS_OPEN = "open"
STATUS_FINISHED = "finished"


def receivables_changes(fields: dict) -> dict:
    changes = {}
    for field, value in fields.items():
        if field in ("opening_balance", "closing_balance"):
            changes[field] = to_amount(value, field)
        elif field == "report_data":
            changes[field] = normalize_report_data(value)
    return changes


def get_report_or_404(db: Session, report_date: date) -> DailyReceivablesModel:
    report = (
        db.query(DailyReceivablesModel)
        .filter(DailyReceivablesModel.report_date == report_date)
        .first()
    )
    if not report:
        logger.warning("Daily receivables not found: %s", report_date)
        raise HTTPException(status_code=404, detail="Daily receivables report not found")
    return report


# ── GET /daily-receivables ────────────────────────────────────────────────
@router.get("/daily-receivables", response_model=List[DailyReceivablesResponse])
def list_daily_receivables(db: Session = Depends(get_db)):
    rows = db.query(DailyReceivablesModel).order_by(DailyReceivablesModel.report_date.desc()).all()
    logger.info("Found %d daily receivables reports", len(rows))
    return rows


# ── GET /daily-receivables/{report_date} ──────────────────────────────────
@router.get("/daily-receivables/{report_date}", response_model=DailyReceivablesResponse)
def get_daily_receivables(report_date: str, db: Session = Depends(get_db)):
    return get_report_or_404(db, parse_report_date(report_date))


# ── POST /daily-receivables ───────────────────────────────────────────────
@router.post("/daily-receivables", response_model=DailyReceivablesResponse)
def upsert_daily_receivables(
    req: DailyReceivablesUpsert,
    response: Response,
    db: Session = Depends(get_db),
):
    report_date = parse_report_date(req.report_date)
    fields = req.model_dump(exclude_unset=True, exclude={"report_date"})

    report, created = upsert_by_key(
        db,
        DailyReceivablesModel,
        "report_date",
        report_date,
        receivables_changes(fields),
        defaults={
            "opening_balance": 0.0,
            "closing_balance": 0.0,
            "report_data": {},
            "status": STATUS_OPEN,
        },
    )
    response.status_code = 201 if created else 200
    return report


# ── PUT /daily-receivables/finish/{report_date} ───────────────────────────
@router.put("/daily-receivables/finish/{report_date}", response_model=DailyReceivablesResponse)
def finish_daily_receivables(report_date: str, db: Session = Depends(get_db)):
    report = get_report_or_404(db, parse_report_date(report_date))
    report.status = STATUS_FINISHED
    db.commit()
    db.refresh(report)
    logger.info("Daily receivables %s finished", report.report_date)
    return report


# ── PUT /daily-receivables/{report_date} ──────────────────────────────────
@router.put("/daily-receivables/{report_date}", response_model=DailyReceivablesResponse)
def update_daily_receivables(report_date: str, req: DailyReceivablesUpdate, db: Session = Depends(get_db)):
    changes = receivables_changes(req.model_dump(exclude_unset=True))
    report = get_report_or_404(db, parse_report_date(report_date))
    for field, value in changes.items():
        setattr(report, field, value)
    db.commit()
    db.refresh(report)
    logger.info("Updated daily receivables %s (%s)", report.report_date, ", ".join(changes) or "no fields")
    return report


# ── DELETE /daily-receivables/{report_date} ───────────────────────────────
@router.delete("/daily-receivables/{report_date}", response_model=MessageResponse)
def delete_daily_receivables(report_date: str, db: Session = Depends(get_db)):
    delete_by_key(
        db,
        DailyReceivablesModel,
        "report_date",
        parse_report_date(report_date),
        "Daily receivables report not found",
    )
    return {"message": "Daily receivables report deleted successfully"}
