"""Mint planning: per-identifier caps, clamping, and audit files.

The plan itself is computed without side effects. Only :meth:`MintPlanner.plan`
touches the filesystem, and only when the run is not a dry run: it writes a
``mint-YYYYMMDD-HHMMSS.json`` file holding the negative of every minted
amount. That file is a valid balance file, so the next aggregation sees the
balances already reduced by what was minted.
"""

from __future__ import annotations

import json
import random
from datetime import datetime
from pathlib import Path
from typing import Optional

from tokenmint.core.config import DENOMINATOR, Settings, settings as default_settings
from tokenmint.core.exceptions import AuditWriteError, SanityCheckError
from tokenmint.core.logging import get_logger
from tokenmint.schemas.balance import Ledger
from tokenmint.schemas.mint import AuditRecord, MintEntry, MintOptions, MintPlan
from tokenmint.services.ingestion.normalizer import format_decimal, to_scaled

logger = get_logger(__name__)

AUDIT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


class MintPlanner:
    """Computes how much to mint per identifier for one run.

    Args:
        config: Tool settings (jitter band, audit file prefix).
        rng: Random source for the jitter. When omitted, a generator seeded
            from ``MintOptions.seed`` is created for each plan.
    """

    def __init__(
        self,
        config: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or default_settings
        self.rng = rng

    def compute_plan(self, ledger: Ledger, options: MintOptions) -> MintPlan:
        """Clamp every ledger balance to its (possibly jittered) cap.

        Entries that clamp to zero are left out of the plan.
        """
        max_scaled = self._scaled_max(options)
        low, high = self._jitter_band()
        rng = self.rng if self.rng is not None else random.Random(options.seed)

        entries: list[MintEntry] = []
        for identifier, balance in ledger.items():
            if options.randomize:
                # Fresh factor per identifier, never shared
                cap = int(max_scaled * rng.uniform(low, high))
            else:
                cap = max_scaled
            amount = min(balance, cap)
            if amount <= 0:
                logger.debug("Skipping %s: nothing to mint (cap=%d)", identifier, cap)
                continue
            entries.append(MintEntry(identifier=identifier, amount=amount, cap=cap))

        plan = MintPlan(entries=entries)
        logger.info(
            "Mint plan: %d of %d identifiers, total %d (randomize=%s)",
            len(plan.entries),
            len(ledger),
            plan.total,
            options.randomize,
        )
        return plan

    def build_audit_record(self, plan: MintPlan, now: datetime) -> AuditRecord:
        """Debit record for ``plan``, named after the local timestamp."""
        filename = (
            f"{self.config.audit_file_prefix}-{now.strftime(AUDIT_TIMESTAMP_FORMAT)}.json"
        )
        debits = {
            entry.identifier: format_decimal(-entry.amount) for entry in plan.entries
        }
        return AuditRecord(filename=filename, debits=debits)

    def write_audit_file(self, directory: Path | str, record: AuditRecord) -> Path:
        """Write ``record`` into ``directory``. Refuses to overwrite a file."""
        path = Path(directory) / record.filename
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(json.dumps(record.debits, indent=2))
                f.write("\n")
        except OSError as exc:
            raise AuditWriteError(f"Failed to write audit file '{path}': {exc}") from exc

        logger.info("Wrote audit file %s with %d debits", path, len(record.debits))
        return path

    def plan(
        self,
        directory: Path | str,
        ledger: Ledger,
        options: MintOptions,
        now: Optional[datetime] = None,
    ) -> tuple[MintPlan, Optional[AuditRecord]]:
        """Compute the plan and, unless dry-running, persist its audit file.

        Returns:
            The plan and the audit record that was written, or None when
            nothing was written (dry run or empty plan).
        """
        plan = self.compute_plan(ledger, options)

        if options.dry_run:
            logger.info("Dry run: no audit file written")
            return plan, None
        if plan.is_empty():
            logger.warning("Nothing to mint: no audit file written")
            return plan, None

        record = self.build_audit_record(plan, now or datetime.now())
        self.write_audit_file(directory, record)
        return plan, record

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _scaled_max(options: MintOptions) -> int:
        if not options.max_amount.is_finite() or options.max_amount < 0:
            raise SanityCheckError(f"Invalid maximum amount {options.max_amount}")
        if options.max_amount > DENOMINATOR:
            raise SanityCheckError(
                f"Maximum amount {options.max_amount} exceeds sanity limit {DENOMINATOR}"
            )
        return to_scaled(options.max_amount)

    def _jitter_band(self) -> tuple[float, float]:
        low, high = self.config.jitter_low, self.config.jitter_high
        if low < 0 or low > high:
            raise SanityCheckError(f"Invalid jitter band [{low}, {high}]")
        return low, high
