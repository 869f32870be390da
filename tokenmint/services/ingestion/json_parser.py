"""JSON balance file parser."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, List

from tokenmint.core.exceptions import BalanceInputError, SanityCheckError
from tokenmint.core.logging import get_logger
from tokenmint.schemas.balance import BalanceEntry
from tokenmint.services.ingestion.normalizer import (
    exceeds_denominator,
    normalize_amount,
    to_scaled,
)

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not a token amount")


class JsonParser:
    """Parser for flat JSON balance files.

    Expected JSON structure::

        {
            "alice": 50,
            "bob": "1,234.5",
            "carol": "-12.25"
        }

    Negative amounts are allowed; earlier mint runs write them as debits.
    Unlike a best-effort importer, any bad value aborts the whole run.
    """

    def parse(self, file_content: bytes, filename: str) -> List[BalanceEntry]:
        """Parse JSON bytes into scaled balance entries.

        Args:
            file_content: Raw bytes of the balance file.
            filename: Path of the file, used in error messages.

        Returns:
            One BalanceEntry per identifier in the file, in file order.

        Raises:
            BalanceInputError: Malformed JSON or a value that is not an amount.
            SanityCheckError: An amount larger than the denominator.
        """
        try:
            data = json.loads(
                file_content.decode("utf-8-sig"),
                parse_float=Decimal,
                parse_constant=_reject_constant,
            )
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as exc:
            raise BalanceInputError(
                f"Failed to decode JSON file '{filename}': {exc}"
            ) from exc

        if not isinstance(data, dict):
            raise BalanceInputError(
                f"Expected a JSON object in '{filename}', got {type(data).__name__}"
            )

        entries = [
            self._parse_item(identifier, value, filename)
            for identifier, value in data.items()
        ]

        logger.info(
            "JSON parse complete for %s: %d entries parsed", filename, len(entries)
        )
        return entries

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_item(identifier: str, value: Any, filename: str) -> BalanceEntry:
        """Convert a single identifier/value pair to a BalanceEntry."""
        if not identifier:
            raise BalanceInputError(f"Empty identifier in file '{filename}'")

        try:
            amount = normalize_amount(value)
        except ValueError as exc:
            raise BalanceInputError(
                f"Invalid token amount {value!r} for '{identifier}' "
                f"in file '{filename}': {exc}"
            ) from exc

        if exceeds_denominator(amount):
            raise SanityCheckError(
                f"Invalid token amount {value!r} for '{identifier}' "
                f"in file '{filename}': exceeds sanity limit"
            )

        scaled = to_scaled(amount)
        logger.debug(
            "Parsed %s: id=%s amount=%s scaled=%d", filename, identifier, amount, scaled
        )
        return BalanceEntry(identifier=identifier, amount=scaled, source_file=filename)
