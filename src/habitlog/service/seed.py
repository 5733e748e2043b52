# SPDX-License-Identifier: MIT

import logging
import random
from typing import Optional

import pendulum

from habitlog.model.entity_id import generate_entity_id
from habitlog.model.entry import Entry
from habitlog.repository.entry import EntryRepository
from habitlog.time import datetime_to_iso_str, resolve_now

logger = logging.getLogger(__name__)

SEED_DAYS = 30
MIN_ENTRIES_PER_DAY = 1
MAX_ENTRIES_PER_DAY = 3
MIN_VALUE = 1
MAX_VALUE = 100

SEED_TITLES = [
    "朝のランニング",
    "読書",
    "プログラミング学習",
    "瞑想",
    "英語学習",
    "筋トレ",
    "日記を書く",
]
SEED_TAGS = ["運動", "学習", "健康", "習慣", "趣味"]
SEED_NOTE = "今日も頑張った！"


def generate_seed_entries(
    now: Optional[pendulum.DateTime] = None,
    rng: Optional[random.Random] = None,
) -> list[Entry]:
    """
    Build demo entries covering each of the last SEED_DAYS calendar days.

    Day 0 is today. Every day gets 1-3 entries, each with a random title,
    one random tag, a value in 1-100 and a note about half of the time.
    Dates keep the time of day of ``now``.
    """
    now = resolve_now(now)
    if rng is None:
        rng = random.Random()

    entries: list[Entry] = []
    for day_offset in range(SEED_DAYS):
        date = now.subtract(days=day_offset)
        for index in range(rng.randint(MIN_ENTRIES_PER_DAY, MAX_ENTRIES_PER_DAY)):
            entry: Entry = {
                "id": f"{generate_entity_id(now, rng)}-{day_offset}-{index}",
                "title": rng.choice(SEED_TITLES),
                "tags": [rng.choice(SEED_TAGS)],
                "date": datetime_to_iso_str(date),
                "value": rng.randint(MIN_VALUE, MAX_VALUE),
            }
            if rng.random() > 0.5:
                entry["note"] = SEED_NOTE
            entries.append(entry)
    return entries


def seed_if_empty(
    repository: EntryRepository,
    now: Optional[pendulum.DateTime] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Fill an empty store with demo entries. Returns True if it seeded."""
    if not repository.is_empty():
        return False
    entries = generate_seed_entries(now, rng)
    repository.replace_entries(entries)
    logger.info("seeded empty store with %d demo entries", len(entries))
    return True
