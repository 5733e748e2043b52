# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from habitlog.model.entry import Entry
from habitlog.time import datetime_str_to_display_local_datetime_str
from habitlog.view.header import header

ENTRY_COLUMNS = ("id", "date", "title", "value", "tags", "note")


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a comma-separated string without brackets or quotes."""
    if tags is None or len(tags) == 0:
        return ""
    return ", ".join(tags)


def build_entries_table(
    entries: list[Entry],
    columns: Sequence[str] = ENTRY_COLUMNS,
) -> Table:
    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        if column == "id":
            entries_table.add_column(column, style="dim", no_wrap=True)
        elif column == "value":
            entries_table.add_column(column, justify="right")
        else:
            entries_table.add_column(column)

    for entry in entries:
        row = []
        for column in columns:
            column_value = ""
            if column == "date":
                column_value = datetime_str_to_display_local_datetime_str(
                    entry["date"]
                )
            elif column == "tags":
                column_value = format_tags(entry["tags"])
            elif column == "note":
                column_value = entry.get("note") or ""
            elif column in entry:
                column_value = str(entry[column])  # type: ignore[literal-required]
            row.append(escape(column_value))
        entries_table.add_row(*row)

    return entries_table


def entries_view(entries: list[Entry], sub_header: str = "entries") -> None:
    header(sub_header)

    console = Console()
    if len(entries) == 0:
        console.print("  [grey50]no entries[/grey50]")
        return
    console.print(build_entries_table(entries))


def single_entry_view(entry: Entry) -> None:
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry["id"])
    entry_table.add_row("title", escape(entry["title"]))
    entry_table.add_row("note", escape(entry.get("note") or ""))
    entry_table.add_row("tags", escape(format_tags(entry["tags"])))
    entry_table.add_row(
        "date", datetime_str_to_display_local_datetime_str(entry["date"])
    )
    entry_table.add_row("value", str(entry["value"]))

    console = Console()
    console.print(entry_table)


def tags_view(tags: list[str]) -> None:
    header("tags")

    tags_table = Table(box=box.SIMPLE)
    tags_table.add_column("tag")
    for tag in tags:
        tags_table.add_row(escape(tag))

    console = Console()
    console.print(tags_table)
