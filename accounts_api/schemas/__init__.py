from accounts_api.schemas.base import AmountInput, MessageResponse
from accounts_api.schemas.ledger import (
    AccountCreate,
    AccountResponse,
    TransactionInput,
    TransactionResponse,
)
from accounts_api.schemas.cheque import (
    ChequeCreate,
    ChequeDetailsPatch,
    ChequeDetailsResponse,
    ChequeDetailsUpsert,
    ChequeResponse,
    ChequeStatusUpdate,
    ChequeUpdate,
)
from accounts_api.schemas.report import (
    DailyReceivablesResponse,
    DailyReceivablesUpdate,
    DailyReceivablesUpsert,
    DailyReportInput,
    DailyReportResponse,
    DerivedTotals,
)
