"""tokenmint - aggregate token balances and plan ledger mints.

Usage::

    tokenmint --dir ./balances balances
    tokenmint --dir ./balances mint --pem ./identity.pem --max 100 --randomize
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import NoReturn, Optional

import typer

from tokenmint.core.config import settings
from tokenmint.core.exceptions import SanityCheckError, TokenMintError
from tokenmint.core.logging import get_logger, setup_logging
from tokenmint.schemas.mint import MintOptions
from tokenmint.services.aggregation.aggregator import BalanceAggregator
from tokenmint.services.ingestion.normalizer import normalize_amount
from tokenmint.services.minting.planner import MintPlanner
from tokenmint.services.minting.renderer import render
from tokenmint.services.reporting.balance_reporter import BalanceReporter

logger = get_logger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Aggregate token balances from a directory of JSON files and print "
        "the ledger command that mints them."
    ),
)


def _fail(exc: TokenMintError) -> NoReturn:
    logger.debug("Aborting run", exc_info=exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(1)


def _parse_max(raw: str) -> Decimal:
    try:
        return normalize_amount(raw)
    except ValueError as exc:
        raise SanityCheckError(f"Invalid maximum amount {raw!r}") from exc


@app.callback()
def _root(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        help="Directory that contains the JSON balance files and the PEM file. "
        "Defaults to the current directory.",
        file_okay=False,
    ),
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Log level for stderr diagnostics."
    ),
) -> None:
    """Root command: resolves the balance directory and configures logging."""
    setup_logging(log_level)
    ctx.obj = directory or Path.cwd()


@app.command("mint")
def mint_cmd(
    ctx: typer.Context,
    max_amount: str = typer.Option(
        str(settings.default_max_amount),
        "--max",
        help="The maximum amount to mint per identifier in one run.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Do not write the JSON file with the negatives of the minted amounts.",
    ),
    randomize: bool = typer.Option(
        False,
        "--randomize",
        help="Randomize the maximum within 20%, independently for each identifier.",
    ),
    memo: Optional[str] = typer.Option(
        None, "--memo", help="A memo to pass to the minting command."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Only output JSON, not the full command line."
    ),
    pem: Optional[Path] = typer.Option(
        None, "--pem", help="The PEM file to use in the command line."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for --randomize, for reproducible runs."
    ),
) -> None:
    """Output the minting command to run."""
    directory: Path = ctx.obj
    now = datetime.now()

    try:
        options = MintOptions(
            max_amount=_parse_max(max_amount),
            dry_run=dry_run,
            randomize=randomize,
            memo=memo,
            json_output=json_output,
            pem=pem,
            seed=seed,
        )
        if not options.json_output and options.pem is None:
            raise SanityCheckError("A --pem file is required unless --json is given")

        ledger = BalanceAggregator().aggregate(directory)
        plan, _ = MintPlanner(settings).plan(directory, ledger, options, now=now)

        for line in BalanceReporter().mint_summary(plan, options, now):
            typer.echo(line, err=True)

        output = render(plan, options, settings)
    except TokenMintError as exc:
        _fail(exc)

    if output is not None:
        typer.echo(output)


@app.command("balances")
def balances_cmd(ctx: typer.Context) -> None:
    """Show remaining balances to mint."""
    directory: Path = ctx.obj

    try:
        ledger = BalanceAggregator().aggregate(directory)
    except TokenMintError as exc:
        _fail(exc)

    for line in BalanceReporter().report(ledger):
        typer.echo(line)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
