# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional, TypedDict

import pendulum

from habitlog.model.entry import Entry
from habitlog.time import datetime_from_str, resolve_now


class EntryFilter(TypedDict, total=False):
    search: Optional[str]  # Case-insensitive substring of title or note
    tag: Optional[str]  # Exact tag membership
    within_days: Optional[int]  # Entries dated at or after now - N days


def generate_filter(
    entry_filter: EntryFilter, now: Optional[pendulum.DateTime] = None
) -> "Predicate":
    """Build one AND predicate from whichever criteria are set."""
    filter_obj = And()

    search = entry_filter.get("search")
    if search:
        filter_obj.add_predicate(Search(search))

    tag = entry_filter.get("tag")
    if tag is not None:
        filter_obj.add_predicate(Tag(tag))

    within_days = entry_filter.get("within_days")
    if within_days is not None:
        filter_obj.add_predicate(Recent(within_days, now))

    return filter_obj


class Predicate(ABC):
    @abstractmethod
    def include(self, entry: Entry) -> bool: ...

    def filter(self, entries: list[Entry]) -> list[Entry]:
        return [entry for entry in entries if self.include(entry)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, entry: Entry) -> bool:
        return all(predicate.include(entry) for predicate in self.predicates)


class Search(Predicate):
    def __init__(self, query: str) -> None:
        self.query = query.lower()

    def include(self, entry: Entry) -> bool:
        if self.query in entry["title"].lower():
            return True
        note = entry.get("note")
        return note is not None and self.query in note.lower()


class Tag(Predicate):
    def __init__(self, tag: str) -> None:
        self.tag = tag

    def include(self, entry: Entry) -> bool:
        return self.tag in entry["tags"]


class Recent(Predicate):
    def __init__(self, days: int, now: Optional[pendulum.DateTime] = None) -> None:
        self.start = resolve_now(now).subtract(days=days)

    def include(self, entry: Entry) -> bool:
        return datetime_from_str(entry["date"]) >= self.start
