"""
Structured daily cash/credit reports with derived totals.

POST   /daily-reports          — create (insert only; several reports may share a date)
GET    /daily-reports          — list, latest date first
GET    /daily-reports/{key}    — get by numeric id, or the latest report for a date
PUT    /daily-reports/{id}     — update; derived totals are recomputed
DELETE /daily-reports/{id}     — delete

Also mounted under ``/daily-report``.
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from accounts_api.database import get_db
from accounts_api.ledger import compute_derived_totals, delete_by_key, parse_report_date, to_amount
from accounts_api.models import DailyReportModel
from accounts_api.schemas import DailyReportInput, DailyReportResponse, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter()

CATEGORY_MAPS = ("cash_particulars", "credit_particulars", "outbound_cash_sale", "cash_correspondence")


def build_report_values(inputs: dict) -> dict:
    """Column values for a report: the raw inputs plus freshly derived totals."""
    totals = compute_derived_totals(
        cash_particulars=inputs.get("cash_particulars"),
        outbound_cash_sale=inputs.get("outbound_cash_sale"),
        cash_bf=inputs.get("cash_bf"),
        starting_cash=inputs.get("starting_cash"),
        total_proceedings=inputs.get("total_proceedings"),
    )
    values = {name: inputs.get(name) or {} for name in CATEGORY_MAPS}
    values.update(
        report_date=parse_report_date(inputs.get("report_date")),
        cash_bf=to_amount(inputs.get("cash_bf"), "cash_bf"),
        starting_cash=to_amount(inputs.get("starting_cash"), "starting_cash"),
        total_proceedings=inputs.get("total_proceedings") or {},
    )
    values.update(totals.model_dump())
    return values


def report_inputs(report: DailyReportModel) -> dict:
    return {
        "report_date": report.report_date,
        "cash_particulars": report.cash_particulars,
        "credit_particulars": report.credit_particulars,
        "outbound_cash_sale": report.outbound_cash_sale,
        "cash_correspondence": report.cash_correspondence,
        "cash_bf": report.cash_bf,
        "starting_cash": report.starting_cash,
        "total_proceedings": report.total_proceedings,
    }


def get_report_or_404(db: Session, report_id: int) -> DailyReportModel:
    report = db.query(DailyReportModel).filter(DailyReportModel.id == report_id).first()
    if not report:
        logger.warning("Daily report not found: %s", report_id)
        raise HTTPException(status_code=404, detail="Daily report not found")
    return report


# ── POST /daily-reports ───────────────────────────────────────────────────
@router.post("", response_model=DailyReportResponse, status_code=201)
def create_daily_report(req: DailyReportInput, db: Session = Depends(get_db)):
    report = DailyReportModel(**build_report_values(req.model_dump()))
    db.add(report)
    db.commit()
    db.refresh(report)
    logger.info(
        "Created daily report %s for %s (surplus/deficit %.2f, overall sales %.2f)",
        report.id, report.report_date, report.cash_surplus_deficit, report.overall_sales,
    )
    return report


# ── GET /daily-reports ────────────────────────────────────────────────────
@router.get("", response_model=List[DailyReportResponse])
def list_daily_reports(db: Session = Depends(get_db)):
    rows = (
        db.query(DailyReportModel)
        .order_by(DailyReportModel.report_date.desc(), DailyReportModel.id.desc())
        .all()
    )
    logger.info("Found %d daily reports", len(rows))
    return rows


# ── GET /daily-reports/{key} ──────────────────────────────────────────────
@router.get("/{key}", response_model=DailyReportResponse)
def get_daily_report(key: str, db: Session = Depends(get_db)):
    if key.isdigit():
        return get_report_or_404(db, int(key))

    report_date = parse_report_date(key)
    report = (
        db.query(DailyReportModel)
        .filter(DailyReportModel.report_date == report_date)
        .order_by(DailyReportModel.id.desc())
        .first()
    )
    if not report:
        logger.warning("Daily report not found for %s", report_date)
        raise HTTPException(status_code=404, detail="Daily report not found")
    return report


# ── PUT /daily-reports/{report_id} ────────────────────────────────────────
@router.put("/{report_id}", response_model=DailyReportResponse)
def update_daily_report(report_id: int, req: DailyReportInput, db: Session = Depends(get_db)):
    report = get_report_or_404(db, report_id)

    inputs = report_inputs(report)
    inputs.update(req.model_dump(exclude_unset=True))
    for field, value in build_report_values(inputs).items():
        setattr(report, field, value)
    db.commit()
    db.refresh(report)
    logger.info("Updated daily report %s", report_id)
    return report


# ── DELETE /daily-reports/{report_id} ─────────────────────────────────────
@router.delete("/{report_id}", response_model=MessageResponse)
def delete_daily_report(report_id: int, db: Session = Depends(get_db)):
    delete_by_key(db, DailyReportModel, "id", report_id, "Daily report not found")
    return {"message": "Daily report deleted successfully"}
