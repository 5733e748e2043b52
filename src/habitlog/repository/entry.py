# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Optional, cast

from habitlog import configuration
from habitlog.model.entity_id import EntityId
from habitlog.model.entry import EntriesRecord, Entry, EntryUpdate
from habitlog.repository.backend import FileBackend, KeyValueBackend

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    entries: list[Entry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_entries_record(text: str) -> LoadResult:
    """Parse ``{"entries": [...]}`` text, reporting failure instead of raising."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return LoadResult(error=f"invalid JSON: {e}")

    if not isinstance(data, dict):
        return LoadResult(error="top-level value is not an object")
    if "entries" not in data:
        return LoadResult(error="missing 'entries' field")
    if not isinstance(data["entries"], list):
        return LoadResult(error="'entries' is not an array")
    if not all(isinstance(entry, dict) for entry in data["entries"]):
        return LoadResult(error="'entries' contains a non-object item")

    return LoadResult(entries=cast(list[Entry], data["entries"]))


class EntryRepository:
    def __init__(
        self, backend: KeyValueBackend, key: str = configuration.STORAGE_KEY
    ) -> None:
        self.backend = backend
        self.key = key

    def __load_data(self) -> LoadResult:
        raw = self.backend.get(self.key)
        if raw is None:
            return LoadResult()
        return parse_entries_record(raw)

    def __save_data(self, entries: list[Entry]) -> None:
        self.backend.set(
            self.key, json.dumps(self.__to_record(entries), ensure_ascii=False)
        )

    def __to_record(self, entries: list[Entry]) -> EntriesRecord:
        serializable_entries = []
        for entry in entries:
            serializable_entry = cast(dict[str, Any], dict(entry))
            if "note" in serializable_entry and serializable_entry["note"] is None:
                del serializable_entry["note"]
            serializable_entries.append(cast(Entry, serializable_entry))
        return {"entries": serializable_entries}

    def get_all_entries(self) -> list[Entry]:
        result = self.__load_data()
        if not result.ok:
            logger.warning(
                "stored record %r is unreadable, treating as empty: %s",
                self.key,
                result.error,
            )
            return []
        return result.entries

    def save_new_entry(self, entry: Entry) -> EntityId:
        entries = self.get_all_entries()
        entries.append(deepcopy(entry))
        self.__save_data(entries)
        return entry["id"]

    def modify_entry(self, id: EntityId, updated: EntryUpdate) -> None:
        entries = self.get_all_entries()
        for index, entry in enumerate(entries):
            if entry["id"] == id:
                entries[index] = cast(Entry, {**entry, **deepcopy(updated)})
                self.__save_data(entries)
                return

    def delete_entry(self, id: EntityId) -> None:
        entries = self.get_all_entries()
        remaining = [entry for entry in entries if entry["id"] != id]
        if len(remaining) != len(entries):
            self.__save_data(remaining)

    def export_data(self) -> str:
        return json.dumps(
            self.__to_record(self.get_all_entries()), indent=2, ensure_ascii=False
        )

    def import_data(self, text: str) -> bool:
        result = parse_entries_record(text)
        if not result.ok:
            logger.warning("import rejected: %s", result.error)
            return False
        self.__save_data(result.entries)
        return True

    def replace_entries(self, entries: list[Entry]) -> None:
        self.__save_data(deepcopy(entries))

    def reset(self) -> None:
        self.backend.delete(self.key)

    def is_empty(self) -> bool:
        return len(self.get_all_entries()) == 0


_entry_repo: Optional[EntryRepository] = None


def get_entry_repository() -> EntryRepository:
    """The process-wide repository backed by files in the configured data path."""
    global _entry_repo
    if _entry_repo is None:
        _entry_repo = EntryRepository(FileBackend(configuration.DATA_PATH))
    return _entry_repo


def set_entry_repository(repository: Optional[EntryRepository]) -> None:
    global _entry_repo
    _entry_repo = repository
