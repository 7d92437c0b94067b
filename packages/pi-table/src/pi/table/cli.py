"""CLI entry point for pi-table. Uses Click for argument parsing."""

from __future__ import annotations

import csv
import logging
import sys

import click

from pi.table.config import Config
from pi.table.errors import TableError
from pi.table.render import TableStyle
from pi.table.table import ElasticTable
from pi.table.terminal import ProcessTerminal

logger = logging.getLogger(__name__)


def _load_config(width: int | None) -> Config:
    try:
        config = Config.from_env()
    except TableError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)
    if width is not None:
        config.columns = width
    return config


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-d", "--delimiter", default=",", show_default=True, help="Field delimiter")
@click.option("--tsv", is_flag=True, help="Read tab-separated input")
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=1),
    default=None,
    help="Available width (default: terminal width)",
)
@click.option("--pad-rows", is_flag=True, help="Fill short rows with empty cells instead of failing")
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
)
def main(source, delimiter, tsv, width, pad_rows, log_level):
    """Render delimited text from SOURCE (default: stdin) as an elastic table.

    The first record is the header.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = _load_config(width)

    if tsv:
        delimiter = "\t"
    if len(delimiter) != 1:
        click.echo("Delimiter must be a single character", err=True)
        sys.exit(1)

    try:
        records = [record for record in csv.reader(source, delimiter=delimiter) if record]
    except (UnicodeDecodeError, csv.Error) as e:
        click.echo(f"Cannot read input: {e}", err=True)
        sys.exit(1)
    if not records:
        click.echo("No input", err=True)
        sys.exit(1)

    header, body = records[0], records[1:]
    style = TableStyle.with_glyphs(padding=config.padding, border=config.border)
    table = ElasticTable(header, style=style, terminal=ProcessTerminal(config))

    for number, record in enumerate(body, start=2):
        if pad_rows and len(record) < len(header):
            record = record + [""] * (len(header) - len(record))
        try:
            table.add_row(record)
        except TableError as e:
            click.echo(f"Record {number}: {e}", err=True)
            sys.exit(1)

    plan = table.plan()
    if plan.over_budget:
        logger.info("Table is %d columns wider than the terminal", plan.total - plan.budget)
    table.render()


if __name__ == "__main__":
    main()
