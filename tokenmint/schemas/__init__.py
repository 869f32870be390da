"""Pydantic schemas for balances and mint runs."""

from tokenmint.schemas.balance import BalanceEntry, Ledger
from tokenmint.schemas.mint import AuditRecord, MintEntry, MintOptions, MintPlan

__all__ = [
    "AuditRecord",
    "BalanceEntry",
    "Ledger",
    "MintEntry",
    "MintOptions",
    "MintPlan",
]
