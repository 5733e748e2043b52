# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from habitlog.model.entity_id import generate_entity_id
from habitlog.model.entry import Entry, EntryUpdate
from habitlog.time import datetime_to_iso_str, is_valid_datetime_str, now_utc

_LEADING_INT_P = re.compile(r"^\s*([+-]?\d+)")


class EntryValidationError(Exception):
    """Raised when input for a new or modified entry is rejected."""

    pass


def validate_title(title: Optional[str]) -> str:
    if title is None or title.strip() == "":
        raise EntryValidationError("A title is required.")
    return title


def validate_date(date: str) -> str:
    if not is_valid_datetime_str(date):
        raise EntryValidationError(f"Not a valid date/time: {date!r}")
    return date


def parse_tags(tags: Optional[str]) -> list[str]:
    """Split comma separated tag input, dropping blanks but keeping duplicates."""
    if tags is None:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def parse_value(value: Optional[str]) -> int:
    """Leading integer of the input, or 0 when there is none."""
    if value is None:
        return 0
    match = _LEADING_INT_P.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def create_entry(
    title: str,
    note: Optional[str] = None,
    tags: Optional[list[str]] = None,
    value: int | float = 0,
    date: Optional[pendulum.DateTime] = None,
) -> Entry:
    """Validate input and build a new entry with a fresh id, dated now by default."""
    if date is None:
        date = now_utc()
    entry: Entry = {
        "id": generate_entity_id(),
        "title": validate_title(title),
        "tags": list(tags) if tags is not None else [],
        "date": datetime_to_iso_str(date),
        "value": value,
    }
    if note:
        entry["note"] = note
    return entry


def build_entry_update(
    title: Optional[str] = None,
    note: Optional[str] = None,
    tags: Optional[list[str]] = None,
    value: Optional[int | float] = None,
    date: Optional[str] = None,
    remove_note: bool = False,
) -> EntryUpdate:
    updated: EntryUpdate = {}
    if title is not None:
        updated["title"] = validate_title(title)
    if note is not None:
        updated["note"] = note if note != "" else None
    if tags is not None:
        updated["tags"] = list(tags)
    if value is not None:
        updated["value"] = value
    if date is not None:
        updated["date"] = validate_date(date)

    if remove_note:
        updated["note"] = None

    return updated
