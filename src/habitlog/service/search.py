# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from habitlog.model.entry import Entry
from habitlog.query.collation import CollationKey
from habitlog.query.filter import EntryFilter, generate_filter
from habitlog.query.sort import sort_entries


class EntryQuery(EntryFilter, total=False):
    sort: Optional[str]


def query_entries(
    entries: list[Entry],
    query: EntryQuery,
    now: Optional[pendulum.DateTime] = None,
    collation_key: Optional[CollationKey] = None,
) -> list[Entry]:
    """Filter a snapshot with every active criterion, then sort the survivors."""
    filtered = generate_filter(query, now).filter(entries)
    return sort_entries(filtered, query.get("sort"), collation_key)


def all_tags(entries: list[Entry]) -> list[str]:
    """Distinct tags in the order they first appear."""
    tags: dict[str, None] = {}
    for entry in entries:
        for tag in entry["tags"]:
            tags.setdefault(tag, None)
    return list(tags)
