# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from habitlog.repository.entry import get_entry_repository
from habitlog.service.seed import generate_seed_entries
from habitlog.terminal.custom_typer import AliasedTyperGroup
from habitlog.time import now_local

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def default_export_path() -> Path:
    return Path(f"personal_dashboard_export_{now_local().format('YYYY-MM-DD')}.json")


@app.command("export, ex")
def export(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="write to a file instead of stdout"),
    ] = None,
    to_file: Annotated[
        bool,
        typer.Option("--file", "-f", help="write to a dated file in the cwd"),
    ] = False,
) -> None:
    """Export all entries as pretty-printed JSON."""
    text = get_entry_repository().export_data()

    if output is None and to_file:
        output = default_export_path()
    if output is None:
        typer.echo(text)
        return

    output.write_text(text, encoding="utf-8")
    typer.echo(f"Exported to {output}")


@app.command("import, im", no_args_is_help=True)
def import_(path: Path) -> None:
    """Replace all entries with the contents of an exported JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Could not read {path}: {e}")
        raise typer.Exit(1)

    if not get_entry_repository().import_data(text):
        typer.echo("Import failed, expected a JSON object with an 'entries' array.")
        raise typer.Exit(1)
    typer.echo(f"Imported {path}")


@app.command("reset")
def reset(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete every entry."""
    if not yes:
        typer.confirm("Delete all entries?", abort=True)
    get_entry_repository().reset()
    typer.echo("All entries deleted")


@app.command("seed")
def seed(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Replace all entries with 30 days of demo data."""
    if not yes:
        typer.confirm("Replace all entries with demo data?", abort=True)
    entries = generate_seed_entries()
    get_entry_repository().replace_entries(entries)
    typer.echo(f"Loaded {len(entries)} demo entries")
