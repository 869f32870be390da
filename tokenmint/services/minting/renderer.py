"""Output rendering for a computed mint plan.

Two formats are supported over the same plan:

- ``render_json``: pretty-printed identifier -> scaled amount object.
- ``render_command``: a single-line ``ledger ... token mint ...`` invocation
  ready to be pasted into a shell.
"""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Optional

from tokenmint.core.config import Settings, settings as default_settings
from tokenmint.core.exceptions import SanityCheckError
from tokenmint.schemas.mint import MintOptions, MintPlan


def _single_quote(text: str) -> str:
    """Wrap ``text`` in single quotes for a POSIX shell."""
    return "'" + text.replace("'", "'\"'\"'") + "'"


def render_json(plan: MintPlan) -> str:
    return json.dumps(plan.amounts, indent=2)


def render_command(
    plan: MintPlan,
    pem: Path | str,
    memo: Optional[str] = None,
    config: Settings | None = None,
) -> str:
    """Render the ledger command line that mints ``plan``.

    Amounts in the embedded JSON are scaled integers, which is what the
    ledger program expects.
    """
    config = config or default_settings
    amounts = json.dumps(plan.amounts, separators=(", ", ": "))
    parts = [
        config.ledger_binary,
        "--pem",
        shlex.quote(str(pem)),
        config.ledger_api_url,
        "token",
        "mint",
        config.token_id,
        _single_quote(amounts),
    ]
    if memo is not None:
        parts.extend(["--memo", _single_quote(memo)])
    return " ".join(parts)


def render(
    plan: MintPlan, options: MintOptions, config: Settings | None = None
) -> Optional[str]:
    """Render ``plan`` in the format selected by ``options``.

    Returns None when there is no command to print (empty plan in
    command-line mode).

    Raises:
        SanityCheckError: Command-line output requested without a PEM file.
    """
    if options.json_output:
        return render_json(plan)
    if plan.is_empty():
        return None
    if options.pem is None:
        raise SanityCheckError("A --pem file is required unless --json is given")
    return render_command(plan, options.pem, options.memo, config)
