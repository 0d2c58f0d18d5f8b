"""
Cheques and cheque-holder identity details
"""
from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String, Text
from datetime import datetime
from accounts_api.database import Base


class ChequeModel(Base):
    """Issued cheque, keyed by its cheque number"""
    __tablename__ = "cheques"

    cheque_number = Column(String(64), primary_key=True)
    bank_drawn = Column(String(255), nullable=False)
    payer = Column(String(255), nullable=False)
    payee = Column(String(255), nullable=False)
    amount = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    admin_charge = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    net_to_payee = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    date_posted = Column(Date)
    status = Column(String(50), nullable=False, default="pending")  # free text
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class ChequeDetailsModel(Base):
    """Identity of the cheque holder (1:1 with a cheque, not FK-enforced)"""
    __tablename__ = "cheque_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cheque_number = Column(String(64), nullable=False, unique=True)
    address = Column(Text)
    phone_number = Column(String(20))  # digits only
    id_type = Column(String(50))  # passport, national_id, driving_licence ...
    id_number = Column(String(100))
    date_of_issue = Column(Date)
    date_of_expiry = Column(Date)
    date_of_birth = Column(Date)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
