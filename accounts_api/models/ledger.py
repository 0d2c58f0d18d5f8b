"""
Chart of accounts and ledger transactions
"""
from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String, Text
from datetime import datetime
from accounts_api.database import Base


class AccountModel(Base):
    """Ledger account"""
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)  # stored trimmed
    balance = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    balance_type = Column(String(20))  # debit, credit
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class TransactionModel(Base):
    """Debit/credit entry against one account"""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # references accounts.id; not FK-enforced so deleting an account keeps its transactions
    account_id = Column(Integer, nullable=False, index=True)
    date = Column(Date, index=True)
    debit = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    credit = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    details = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
