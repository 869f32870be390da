"""Balance aggregation across a directory of JSON balance files.

Every ``*.json`` file directly inside the directory is a flat mapping of
identifier -> amount. Amounts for the same identifier are summed across
files, so credits, debits and the audit files written by earlier mint runs
all fold into one running balance per identifier.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from tokenmint.core.config import MAX_BALANCE
from tokenmint.core.exceptions import BalanceInputError, BalanceOverflowError
from tokenmint.core.logging import get_logger
from tokenmint.schemas.balance import Ledger
from tokenmint.services.ingestion.json_parser import JsonParser

logger = get_logger(__name__)

JSON_EXTENSIONS = frozenset({".json"})


class BalanceAggregator:
    """Builds the ledger of positive balances from a balance directory."""

    def __init__(self, parser: JsonParser | None = None) -> None:
        self.parser = parser or JsonParser()

    def aggregate(self, directory: Path | str) -> Ledger:
        """Sum all balance files in ``directory`` into a fixed-point ledger.

        Returns:
            Identifier -> scaled balance, sorted by identifier, containing
            only strictly positive balances.

        Raises:
            BalanceInputError: The directory or a file cannot be read or parsed.
            SanityCheckError: A single amount is larger than the denominator.
            BalanceOverflowError: A total reaches the unsigned 64-bit limit.
        """
        root = Path(directory)
        totals: dict[str, int] = {}
        files_read = 0

        for path in self._balance_files(root):
            try:
                content = path.read_bytes()
            except OSError as exc:
                raise BalanceInputError(
                    f"Failed to read balance file '{path}': {exc}"
                ) from exc

            for entry in self.parser.parse(content, str(path)):
                totals[entry.identifier] = totals.get(entry.identifier, 0) + entry.amount
            files_read += 1

        ledger: Ledger = {}
        for identifier in sorted(totals):
            balance = totals[identifier]
            if balance >= MAX_BALANCE:
                raise BalanceOverflowError(f"Balance for '{identifier}' is too large")
            if balance > 0:
                ledger[identifier] = balance
            else:
                logger.debug("Dropping %s with non-positive balance %d", identifier, balance)

        logger.info(
            "Aggregated %d files in %s: %d identifiers, %d with positive balance",
            files_read,
            root,
            len(totals),
            len(ledger),
        )
        return ledger

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _balance_files(root: Path) -> Iterator[Path]:
        """Yield the JSON files directly inside ``root`` in name order."""
        try:
            paths = sorted(root.iterdir())
        except OSError as exc:
            raise BalanceInputError(f"Failed to read directory '{root}': {exc}") from exc

        for path in paths:
            if path.is_dir():
                continue
            if not path.suffix:
                raise BalanceInputError(f"File without extension in balance directory: '{path}'")
            if path.suffix.lower() not in JSON_EXTENSIONS:
                logger.debug("Ignoring non-JSON file %s", path)
                continue
            yield path


def aggregate(directory: Path | str) -> Ledger:
    """Shortcut for ``BalanceAggregator().aggregate(directory)``."""
    return BalanceAggregator().aggregate(directory)
