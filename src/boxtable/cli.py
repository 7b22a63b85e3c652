"""Command-line interface for rendering tables from YAML or CSV input."""

from __future__ import annotations

import csv
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

import click
import yaml
from click.core import ParameterSource

from .config import TableConfig
from .exceptions import BoxTableError
from .table import Table

YAML_SUFFIXES = (".yaml", ".yml", ".json")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# CLI option name -> TableConfig field
_SETTING_OPTIONS = {
    "padding": "padding",
    "align_header_right": "header_align_right",
    "align_rows_right": "row_align_right",
    "align_footer_right": "footer_align_right",
}


@click.group()
@click.version_option()
def cli() -> None:
    """boxtable: render tables with box-drawing borders."""
    pass


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or CSV table file (default: read CSV from stdin).",
)
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["auto", "yaml", "csv"]),
    default="auto",
    show_default=True,
    help="Input format. 'auto' picks YAML for .yaml/.yml/.json files, CSV otherwise.",
)
@click.option(
    "--header/--no-header",
    default=True,
    help="Treat the first CSV record as the header (default: enabled).",
)
@click.option(
    "--footer/--no-footer",
    default=False,
    help="Treat the last CSV record as the footer (default: disabled).",
)
@click.option(
    "--padding",
    type=click.IntRange(min=0),
    default=1,
    help="Spaces left and right of each cell (default: BOXTABLE_PADDING or 1).",
)
@click.option("--align-header-right", is_flag=True, help="Right-align header cells.")
@click.option("--align-rows-right", is_flag=True, help="Right-align data row cells.")
@click.option("--align-footer-right", is_flag=True, help="Right-align footer cells.")
@click.option("--verbose", "-v", is_flag=True, help="Log rendering details to stderr.")
def render(
    file_path: str | None,
    input_format: str,
    header: bool,
    footer: bool,
    padding: int,
    align_header_right: bool,
    align_rows_right: bool,
    align_footer_right: bool,
    verbose: bool,
) -> None:
    """Render a table and print it.

    YAML documents are mappings with optional 'headers', 'rows' and
    'footers' keys, plus optional settings such as 'padding' or
    'row_align_right'. Rows may have different numbers of cells.
    """
    if input_format == "auto":
        is_yaml = file_path is not None and Path(file_path).suffix.lower() in YAML_SUFFIXES
        input_format = "yaml" if is_yaml else "csv"

    explicit = _explicit_settings(
        padding=padding,
        align_header_right=align_header_right,
        align_rows_right=align_rows_right,
        align_footer_right=align_footer_right,
    )

    with _verbose_logging(verbose):
        # Validation waits until every source is applied: explicit options
        # may override a bad value from the environment or the document.
        try:
            settings = TableConfig.environment_settings(skip=explicit)
        except BoxTableError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if input_format == "yaml":
            data = _load_yaml(file_path)
            content = _content_from_mapping(data)
            settings.update(
                {k: v for k, v in data.items() if k in TableConfig.field_names()}
            )
        else:
            content = _content_from_csv(file_path, header=header, footer=footer)

        settings.update(explicit)

        try:
            table = Table(*content, config=TableConfig(**settings))
            output = table.render()
        except BoxTableError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    click.echo(output, nl=False)


@contextmanager
def _verbose_logging(enabled: bool) -> Iterator[None]:
    """Send DEBUG records of the boxtable loggers to stderr while active."""
    if not enabled:
        yield
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("boxtable")
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def _explicit_settings(**params: Any) -> dict[str, Any]:
    """Return settings whose options were given on the command line."""
    ctx = click.get_current_context()
    return {
        field: params[option]
        for option, field in _SETTING_OPTIONS.items()
        if ctx.get_parameter_source(option) == ParameterSource.COMMANDLINE
    }


def _open_input(file_path: str | None) -> IO[str]:
    if file_path is None:
        return click.get_text_stream("stdin")
    return open(file_path, newline="", encoding="utf-8")


def _load_yaml(file_path: str | None) -> dict[str, Any]:
    """Load and parse a YAML table document."""
    stream = _open_input(file_path)
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        click.echo(f"Error: Invalid YAML: {e}", err=True)
        sys.exit(1)
    finally:
        if file_path is not None:
            stream.close()
    if not isinstance(data, dict):
        click.echo("Error: YAML file must contain a mapping", err=True)
        sys.exit(1)
    return data


def _content_from_mapping(
    data: dict[str, Any],
) -> tuple[list[Any], list[list[Any]], list[Any]]:
    """Extract headers, rows and footers from a YAML table document."""
    headers = data.get("headers") or []
    rows = data.get("rows") or []
    footers = data.get("footers") or []

    for key, value in (("headers", headers), ("footers", footers), ("rows", rows)):
        if not isinstance(value, list):
            click.echo(f"Error: '{key}' must be a list", err=True)
            sys.exit(1)
    for index, row in enumerate(rows):
        if row is not None and not isinstance(row, list):
            click.echo(f"Error: row {index + 1} must be a list", err=True)
            sys.exit(1)

    return headers, rows, footers


def _content_from_csv(
    file_path: str | None,
    header: bool,
    footer: bool,
) -> tuple[list[str], list[list[str]], list[str]]:
    """Split CSV records into headers, rows and footers."""
    stream = _open_input(file_path)
    try:
        records = list(csv.reader(stream))
    finally:
        if file_path is not None:
            stream.close()

    headers = records.pop(0) if header and records else []
    footers = records.pop() if footer and records else []
    return headers, records, footers


if __name__ == "__main__":
    cli()
