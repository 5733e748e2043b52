# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitlog.query.collation import get_collation_key
from habitlog.repository.configuration import CONFIGURATION_REPO
from habitlog.repository.entry import get_entry_repository
from habitlog.service.entry import (
    EntryValidationError,
    build_entry_update,
    create_entry,
    parse_tags,
    parse_value,
    validate_date,
)
from habitlog.service.search import EntryQuery, all_tags, query_entries
from habitlog.terminal.custom_typer import AliasedTyperGroup
from habitlog.time import datetime_from_str
from habitlog.view.entry import entries_view, single_entry_view, tags_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _join_tags(tags: Optional[list[str]]) -> Optional[list[str]]:
    # Each --tag may itself be a comma separated list
    if tags is None:
        return None
    return parse_tags(",".join(tags))


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-tg", help="repeatable, or comma separated"),
    ] = None,
    value: Annotated[
        Optional[str],
        typer.Option("--value", "-v", help="integer score, anything else is 0"),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", help="ISO-8601 date/time, default now"),
    ] = None,
) -> None:
    """Record a new entry."""
    try:
        entry_date = datetime_from_str(validate_date(date)) if date else None
        entry = create_entry(
            title,
            note=note,
            tags=_join_tags(tags),
            value=parse_value(value),
            date=entry_date,
        )
    except EntryValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    get_entry_repository().save_new_entry(entry)
    single_entry_view(entry)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-tg", help="replaces all tags"),
    ] = None,
    value: Annotated[Optional[str], typer.Option("--value", "-v")] = None,
    date: Annotated[Optional[str], typer.Option("--date", "-dt")] = None,
    remove_note: Annotated[bool, typer.Option("--remove-note", "-rn")] = False,
    remove_tags: Annotated[bool, typer.Option("--remove-tags", "-rtgs")] = False,
) -> None:
    """Change fields of an entry; fields not given keep their values."""
    try:
        updated = build_entry_update(
            title=title,
            note=note,
            tags=[] if remove_tags else _join_tags(tags),
            value=parse_value(value) if value is not None else None,
            date=date,
            remove_note=remove_note,
        )
    except EntryValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    repository = get_entry_repository()
    repository.modify_entry(id, updated)

    matches = [entry for entry in repository.get_all_entries() if entry["id"] == id]
    if len(matches) == 0:
        typer.echo(f"No entry with id {id}")
        return
    single_entry_view(matches[0])


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """Delete an entry."""
    get_entry_repository().delete_entry(id)
    typer.echo(f"Deleted {id}")


@app.command("list, ls")
def list_entries(
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="matches title or note, any case"),
    ] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", "-tg")] = None,
    days: Annotated[
        Optional[int],
        typer.Option("--days", "-dy", help="only the last N days, e.g. 7, 30, 90"),
    ] = None,
    sort: Annotated[
        Optional[str],
        typer.Option(
            "--sort",
            "-so",
            help="date-desc, date-asc, value-desc, value-asc, title-asc, title-desc",
        ),
    ] = None,
) -> None:
    """List entries, filtered and sorted."""
    config = CONFIGURATION_REPO.get_config()

    query: EntryQuery = {
        "search": search,
        "tag": tag,
        "within_days": days,
        "sort": sort if sort is not None else config["default_sort"],
    }
    entries = query_entries(
        get_entry_repository().get_all_entries(),
        query,
        collation_key=get_collation_key(config["collation_locale"]),
    )
    entries_view(entries)


@app.command("tags, tg")
def tags() -> None:
    """List every tag in use."""
    tags_view(all_tags(get_entry_repository().get_all_entries()))
