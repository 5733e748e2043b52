# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict, Union

from habitlog.model.entity_id import EntityId

Number = Union[int, float]


class Entry(TypedDict):
    id: EntityId
    title: str
    note: NotRequired[Optional[str]]  # Omitted from storage when None
    tags: list[str]
    date: str  # ISO-8601 instant, e.g. "2025-06-15T10:00:00.000Z"
    value: Number


class EntryUpdate(TypedDict, total=False):
    """Partial entry; keys present here replace the stored values."""

    title: str
    note: Optional[str]
    tags: list[str]
    date: str
    value: Number


class EntriesRecord(TypedDict):
    entries: list[Entry]
