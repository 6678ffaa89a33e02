"""Command-line interface for tagbind.

Preview resolved formats and rendered expressions per culture:

    tagbind render OrderDate --type DateTime --locale de-DE
    tagbind render Total --pipe currency --par invoice
    tagbind formats --locale ko-KR
    tagbind locales
"""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Annotated, Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from tagbind.attributes import options_from_attributes
from tagbind.config import BindingConfig
from tagbind.errors import ErrorCode, TagBindError
from tagbind.expressions import render_expression
from tagbind.formats import FormatResolver
from tagbind.locale import get_locale_pattern, get_supported_locales, load_locale_from_file
from tagbind.types import DataTypeCategory, PropertyDescriptor

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tagbind",
    help="Render client template bindings for server-side properties",
    add_completion=False,
)

F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Convert errors raised by a command into a message and exit code."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except TagBindError as e:
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            if e.hint:
                typer.echo(typer.style(f"Hint: {e.hint}", fg="yellow"), err=True)
            raise typer.Exit(e.code.value)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore


LocalesFileOpt = Annotated[
    Optional[Path],
    typer.Option("--locales-file", help="JSON/YAML file with extra locale patterns"),
]


def _load_extra_locales(path: Path | None) -> None:
    if path is not None:
        loaded = load_locale_from_file(path)
        logger.info("Loaded %d locale pattern(s) from %s", len(loaded), path)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Render client template bindings for server-side properties."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(name="render")
@error_boundary
def render_cmd(
    name: Annotated[str, typer.Argument(help="Server property name (e.g. OrderDate)")],
    data_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Data type: Plain, Date, DateTime or Time"),
    ] = "Plain",
    par: Annotated[Optional[str], typer.Option("--par", help="Parent object alias")] = None,
    var: Annotated[Optional[str], typer.Option("--var", help="Alternate variable name")] = None,
    pipe: Annotated[Optional[str], typer.Option("--pipe", help="Client value pipe")] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Culture name (e.g. de-DE)"),
    ] = None,
    moment: Annotated[
        Optional[str],
        typer.Option("--moment", help="local, date, time, datetime or custom:<format>"),
    ] = None,
    locales_file: LocalesFileOpt = None,
) -> None:
    """Render the template expression for a property."""
    _load_extra_locales(locales_file)
    config = BindingConfig.from_env()

    descriptor = PropertyDescriptor.from_field(name, data_type)
    options = options_from_attributes(
        {"par": par, "var": var, "pipe": pipe, "moment": moment}
    )
    typer.echo(render_expression(descriptor, options, locale, config=config))


@app.command(name="formats")
@error_boundary
def formats_cmd(
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Culture name (default from config)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail for unknown cultures instead of falling back"),
    ] = False,
    locales_file: LocalesFileOpt = None,
) -> None:
    """Show the resolved date/time formats for a culture."""
    _load_extra_locales(locales_file)
    config = BindingConfig.from_env()
    pattern = get_locale_pattern(
        locale or config.default_locale,
        strict=strict,
        default=config.default_locale,
    )
    resolver = FormatResolver()

    table = Table(title=f"Formats for {pattern.name or 'invariant'}", header_style="bold")
    table.add_column("Type", style="cyan")
    table.add_column("Format")
    for category in (DataTypeCategory.DATE, DataTypeCategory.TIME, DataTypeCategory.DATETIME):
        table.add_row(category.value, resolver.resolve(category, pattern))

    Console().print(table)


@app.command(name="locales")
@error_boundary
def locales_cmd(
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (console, json)"),
    ] = "console",
    locales_file: LocalesFileOpt = None,
) -> None:
    """List registered cultures and their short patterns."""
    _load_extra_locales(locales_file)
    patterns = [get_locale_pattern(name) for name in get_supported_locales()]

    if format == "json":
        typer.echo(json.dumps([p.to_dict() for p in patterns], indent=2, ensure_ascii=False))
        return

    table = Table(header_style="bold")
    table.add_column("Locale", style="cyan")
    table.add_column("Short date")
    table.add_column("Short time")
    for pattern in patterns:
        table.add_row(pattern.name, pattern.short_date_pattern, pattern.short_time_pattern)

    Console().print(table)


if __name__ == "__main__":
    app()
