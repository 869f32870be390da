"""Plain-text reports over the ledger and a computed mint plan."""

from __future__ import annotations

from datetime import datetime
from email.utils import format_datetime

from tokenmint.schemas.balance import Ledger
from tokenmint.schemas.mint import MintOptions, MintPlan
from tokenmint.services.ingestion.normalizer import format_amount

SEPARATOR = "-" * 50


class BalanceReporter:
    """Formats balances for the console."""

    def report(self, ledger: Ledger) -> list[str]:
        """One ``<id>: <amount>`` line per positive balance."""
        return [
            f"{identifier}: {format_amount(balance)}"
            for identifier, balance in ledger.items()
            if balance > 0
        ]

    def mint_summary(
        self, plan: MintPlan, options: MintOptions, now: datetime
    ) -> list[str]:
        """Header, flags and an aligned amount table for a mint run.

        The date is rendered in RFC 2822 form from the local time ``now``.
        """
        local_now = now if now.tzinfo else now.astimezone()
        flags = options.model_dump(mode="json")

        lines = [
            "Minting tokens...",
            f"Date: {format_datetime(local_now)}",
            f"Flags: {flags}",
            "",
        ]

        amounts = [(e.identifier, format_amount(e.amount)) for e in plan.entries]
        width = max((len(text) for _, text in amounts), default=0)
        lines.extend(f"{identifier}\t{text:>{width}}" for identifier, text in amounts)
        lines.append(SEPARATOR)
        return lines
