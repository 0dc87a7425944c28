#!/usr/bin/env python3
"""Command line front end for pemkeys.

Reads PEM files and reports how each private key was decoded. All decoding is
delegated to ``pemkeys.dispatch``; this module only handles files and output.
"""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pemkeys import __version__
from pemkeys.defaults import DEFAULT_LOG_LEVEL, ENV_LOG_FILE, ENV_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT
from pemkeys.dispatch import decode_private_key
from pemkeys.errors import PrivateKeyDecodeError
from pemkeys.models import KeySummary, summarize
from pemkeys.preamble import supported_labels
from pemkeys.result import Failure, Result, Success
from pemkeys.types import Preamble

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _setup_logging(level: str, log_file: Path | None) -> None:
    """Initializes logging for the application."""
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def inspect_file(path: Path) -> Result[KeySummary, PrivateKeyDecodeError | OSError]:
    """Decode the private key stored in a PEM file.

    Args:
    ----
        path: File containing a PEM private key

    Returns:
    -------
        Result with the key summary or the error that stopped decoding

    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        return Failure(e)

    logger.info(f"Decoding private key from {path}")
    decoded_result = decode_private_key(raw)
    if isinstance(decoded_result, Failure):
        return decoded_result
    return Success(summarize(decoded_result.unwrap(), source=str(path)))


def _summary_table(summaries: list[KeySummary]) -> Table:
    table = Table(title="Private Keys")
    table.add_column("File", style="bold")
    table.add_column("Encoding")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Curve")
    table.add_column("Fingerprint", overflow="fold")

    for summary in summaries:
        table.add_row(
            summary.source or "-",
            summary.encoding_name,
            summary.algorithm.value,
            str(summary.key_size),
            summary.curve or "-",
            summary.fingerprint,
        )
    return table


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar=ENV_LOG_LEVEL,
    help="Logging verbosity",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=ENV_LOG_FILE,
    help="Write log records to this file instead of stderr",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_file: Path | None) -> None:
    """pemkeys - identify and decode PEM private keys."""
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console()
    _setup_logging(log_level, log_file)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_context
def inspect(ctx: click.Context, paths: tuple[Path, ...], json_output: bool) -> None:
    """Decode private keys from PEM files and show their algorithm."""
    console = ctx.obj["console"]
    summaries: list[KeySummary] = []
    failed = False

    for path in paths:
        result = inspect_file(path)
        if isinstance(result, Failure):
            failed = True
            message = f"{path}: {result.error}"
            console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
            continue
        summaries.append(result.unwrap())

    if json_output:
        click.echo(json.dumps([summary.model_dump(mode="json") for summary in summaries], indent=2))
    elif summaries:
        console.print(_summary_table(summaries))

    if failed:
        ctx.exit(1)


@cli.command()
@click.pass_context
def labels(ctx: click.Context) -> None:
    """List the PEM labels accepted for private keys."""
    console = ctx.obj["console"]
    table = Table(title="Supported PEM labels")
    table.add_column("Label", style="bold")
    table.add_column("Encoding")
    for label in supported_labels():
        table.add_row(label, Preamble(label).encoding_name)
    console.print(table)


if __name__ == "__main__":
    cli()
