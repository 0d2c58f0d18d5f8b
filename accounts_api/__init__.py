"""
Accounts API — bookkeeping backend (accounts, transactions, cheques, daily reports).
"""
__version__ = "0.1.0"
