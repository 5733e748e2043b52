from typing import Optional, Union

import pendulum
import pytest

from habitlog.model.entry import Entry
from habitlog.repository.backend import MemoryBackend
from habitlog.repository.entry import EntryRepository
from habitlog.time import datetime_to_iso_str


def make_entry(
    id: str,
    date: Union[str, pendulum.DateTime],
    title: str = "読書",
    value: Union[int, float] = 10,
    tags: Optional[list[str]] = None,
    note: Optional[str] = None,
) -> Entry:
    if isinstance(date, pendulum.DateTime):
        date = datetime_to_iso_str(date)
    entry: Entry = {
        "id": id,
        "title": title,
        "tags": tags if tags is not None else [],
        "date": date,
        "value": value,
    }
    if note is not None:
        entry["note"] = note
    return entry


@pytest.fixture
def now() -> pendulum.DateTime:
    # Midday keeps every +/- day offset on the intended local calendar day
    return pendulum.datetime(2025, 6, 17, 12, 0, 0, tz="local")


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def repository(backend: MemoryBackend) -> EntryRepository:
    return EntryRepository(backend)


@pytest.fixture
def scenario_entries() -> list[Entry]:
    return [
        make_entry("1", "2025-06-15T10:00:00.000Z", "プログラミング学習", 50),
        make_entry("2", "2025-06-17T08:00:00.000Z", "朝のランニング", 30),
        make_entry("3", "2025-06-13T12:00:00.000Z", "読書", 80),
        make_entry("4", "2025-06-16T09:00:00.000Z", "英語学習", 10),
    ]
