# src/histocat/cli.py
"""
histocat Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`. It
plays the role of a small host application: it supplies the language tag and
the note-format preference that a genealogy server would otherwise take from
the current request and tree.

Commands
--------
- **events**: Print the rendered event blocks for a language.
- **languages**: Table of supported language tags and their event counts.
- **info**: Module metadata (title, version, support links).
- **check**: Validate a catalog dataset JSON file.

Usage
-----
    $ histocat events fr --format markdown --limit 3
    $ histocat events fr-CA --raw > events.txt
    $ histocat check my_catalog.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from histocat.catalog import CatalogDataError, check_dataset, default_catalog
from histocat.core.rendering import resolve_mode
from histocat.core.settings import load_settings
from histocat.provider import HistoricEventsProvider

# Pick up HISTOCAT_* variables from a local .env before settings are read.
load_dotenv()

app = typer.Typer(
    help="histocat: historical events for genealogy timelines.",
    rich_markup_mode="markdown",
)
console = Console()


def _build_provider() -> HistoricEventsProvider:
    """Helper: provider over the packaged catalog; fails with exit code 1."""
    try:
        return HistoricEventsProvider(catalog=default_catalog())
    except CatalogDataError as e:
        console.print(f"[bold red]❌ Catalog Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def events(
    language: Annotated[
        str | None,
        typer.Argument(help="Language tag, e.g. 'fr' or 'fr-CA' (default: HISTOCAT_LANGUAGE)."),
    ] = None,
    format_text: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Note format preference: 'markdown' or anything else for plain text.",
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", min=1, help="Show only the first N events."),
    ] = None,
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print blocks as plain text separated by blank lines."),
    ] = False,
) -> None:
    """
    Print the rendered event blocks for a language.

    Without `--format`, the `HISTOCAT_FORMAT_TEXT` setting is used; an unset
    or unknown value renders links as plain text.
    """
    cfg = load_settings()
    tag = language or cfg.default_language
    mode = resolve_mode(format_text if format_text is not None else cfg.format_text)

    blocks = _build_provider().list_events(tag, mode=mode)
    if limit is not None:
        blocks = blocks[:limit]

    if raw:
        typer.echo("\n\n".join(blocks))
        return

    if not blocks:
        console.print(f"[yellow]No events for language '{escape(tag)}'.[/yellow]")
        return

    console.rule(f"[bold]{tag}[/bold] · {mode.value}")
    for i, block in enumerate(blocks, start=1):
        console.print(Panel(Text(block), title=f"#{i}", title_align="left", border_style="cyan"))


@app.command()  # type: ignore[misc]
def languages() -> None:
    """List supported language tags and how many events each one serves."""
    catalog = _build_provider().catalog
    table = Table(title="Supported languages")
    table.add_column("Tag", style="cyan")
    table.add_column("Dataset")
    table.add_column("Events", justify="right")
    for tag in catalog.languages():
        ds = catalog.dataset(tag)
        if ds is not None:
            table.add_row(tag, ds.language, str(len(ds.events)))
    console.print(table)


@app.command()  # type: ignore[misc]
def info() -> None:
    """Show module metadata."""
    meta = _build_provider().info
    console.print(
        Panel.fit(
            f"[bold cyan]{meta.title}[/bold cyan]\n"
            f"{meta.description}\n\n"
            f"Version: {meta.version}\n"
            f"Author: {meta.author}\n"
            f"Support: [link={meta.support_url}]{meta.support_url}[/link]\n"
            f"Latest version: {meta.latest_version_url}",
            border_style="cyan",
        )
    )


@app.command()  # type: ignore[misc]
def check(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a catalog dataset JSON file.",
        ),
    ],
) -> None:
    """Validate a dataset file against the catalog schema."""
    result = check_dataset(file)
    if result.is_err():
        console.print(f"[bold red]❌ Invalid dataset:[/bold red] {escape(result.unwrap_err())}")
        raise typer.Exit(code=1)

    ds = result.unwrap()
    console.print(
        f"[bold green]✅ Valid[/bold green] {ds.language} "
        f"({', '.join(ds.tags)}): {len(ds.events)} events"
    )


if __name__ == "__main__":
    app()
