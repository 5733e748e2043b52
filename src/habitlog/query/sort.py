# SPDX-License-Identifier: MIT

from copy import deepcopy
from enum import StrEnum
from typing import Optional

from habitlog.model.entry import Entry
from habitlog.query.collation import CollationKey, get_collation_key
from habitlog.time import datetime_from_str


class SortOption(StrEnum):
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    VALUE_DESC = "value-desc"
    VALUE_ASC = "value-asc"
    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"


DEFAULT_SORT_OPTION = SortOption.DATE_DESC


def resolve_sort_option(option: Optional[str]) -> SortOption:
    """Unrecognized or missing options fall back to date-desc."""
    try:
        return SortOption(option)
    except ValueError:
        return DEFAULT_SORT_OPTION


def sort_entries(
    entries: list[Entry],
    option: Optional[str] = None,
    collation_key: Optional[CollationKey] = None,
) -> list[Entry]:
    sorted_entries = deepcopy(entries)

    match resolve_sort_option(option):
        case SortOption.DATE_ASC:
            sorted_entries.sort(key=lambda entry: datetime_from_str(entry["date"]))
        case SortOption.VALUE_DESC:
            sorted_entries.sort(key=lambda entry: entry["value"], reverse=True)
        case SortOption.VALUE_ASC:
            sorted_entries.sort(key=lambda entry: entry["value"])
        case SortOption.TITLE_ASC | SortOption.TITLE_DESC as title_option:
            key = collation_key if collation_key is not None else get_collation_key()
            sorted_entries.sort(
                key=lambda entry: key(entry["title"]),
                reverse=title_option == SortOption.TITLE_DESC,
            )
        case _:
            sorted_entries.sort(
                key=lambda entry: datetime_from_str(entry["date"]), reverse=True
            )

    return sorted_entries
