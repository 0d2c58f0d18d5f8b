from accounts_api.models.ledger import AccountModel, TransactionModel
from accounts_api.models.cheque import ChequeModel, ChequeDetailsModel
from accounts_api.models.report import DailyReceivablesModel, DailyReportModel

__all__ = [
    "AccountModel",
    "TransactionModel",
    "ChequeModel",
    "ChequeDetailsModel",
    "DailyReceivablesModel",
    "DailyReportModel",
]
