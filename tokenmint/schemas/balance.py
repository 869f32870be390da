"""Pydantic schemas for balance entries read from balance files."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Identifier -> accumulated amount, scaled by DENOMINATOR
Ledger = dict[str, int]


class BalanceEntry(BaseModel):
    """A single identifier/amount pair read from one balance file."""

    identifier: str = Field(..., min_length=1)
    amount: int = Field(
        ...,
        description="Token amount scaled by DENOMINATOR, truncated toward zero",
    )
    source_file: str
