"""Pydantic schemas for mint runs, mint plans, and audit records."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class MintOptions(BaseModel):
    """Run configuration for a single mint invocation."""

    max_amount: Decimal = Field(
        Decimal("100"),
        description="Maximum amount to mint per identifier in one run",
    )
    dry_run: bool = False
    randomize: bool = Field(
        False,
        description="Jitter the maximum independently for every identifier",
    )
    memo: Optional[str] = None
    json_output: bool = Field(
        False,
        description="Render the plan as JSON instead of a ledger command line",
    )
    pem: Optional[Path] = None
    seed: Optional[int] = None


class MintEntry(BaseModel):
    """Amount to mint for one identifier, with the cap that was applied."""

    identifier: str
    amount: int
    cap: int


class MintPlan(BaseModel):
    """The computed mint for every identifier, ordered by identifier."""

    entries: list[MintEntry] = Field(default_factory=list)

    @property
    def amounts(self) -> dict[str, int]:
        return {entry.identifier: entry.amount for entry in self.entries}

    @property
    def total(self) -> int:
        return sum(entry.amount for entry in self.entries)

    def is_empty(self) -> bool:
        return not self.entries


class AuditRecord(BaseModel):
    """Debits written after a real mint so the next run sees lower balances."""

    filename: str
    debits: dict[str, str] = Field(
        default_factory=dict,
        description="Identifier -> negative minted amount as a decimal string",
    )
