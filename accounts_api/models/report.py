"""
Daily reports: receivables snapshot and structured cash/credit reconciliation
"""
from sqlalchemy import Column, Date, DateTime, Integer, JSON, Numeric, String
from datetime import datetime
from accounts_api.database import Base


class DailyReceivablesModel(Base):
    """Receivables snapshot, one per report date"""
    __tablename__ = "daily_receivables"

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_date = Column(Date, nullable=False, unique=True)
    opening_balance = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    closing_balance = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    report_data = Column(JSON, nullable=False, default=dict)  # opaque client document
    status = Column(String(20), nullable=False, default="open")  # open, finished
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class DailyReportModel(Base):
    """Structured daily report; derived totals are stored next to their inputs"""
    __tablename__ = "daily_reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_date = Column(Date, nullable=False, index=True)

    # category -> amount maps
    cash_particulars = Column(JSON, nullable=False, default=dict)
    credit_particulars = Column(JSON, nullable=False, default=dict)
    outbound_cash_sale = Column(JSON, nullable=False, default=dict)
    cash_correspondence = Column(JSON, nullable=False, default=dict)
    total_proceedings = Column(JSON, nullable=False, default=dict)

    cash_bf = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    starting_cash = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)

    # derived, recomputed on every write
    total_cash_payouts = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    total_cash_proceedings = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    subtotal = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    cash_surplus_deficit = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    overall_sales = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
