# SPDX-License-Identifier: MIT

import random
import uuid
from typing import Optional

import pendulum

from habitlog.time import datetime_to_timestamp_ms, now_utc

type EntityId = str

_SUFFIX_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_SUFFIX_LENGTH = 9


def generate_entity_id(
    now: Optional[pendulum.DateTime] = None,
    rng: Optional[random.Random] = None,
) -> EntityId:
    """Mint ``<epoch milliseconds>-<random suffix>``."""
    if now is None:
        now = now_utc()
    if rng is None:
        suffix = uuid.uuid4().hex[:_SUFFIX_LENGTH]
    else:
        suffix = "".join(rng.choices(_SUFFIX_ALPHABET, k=_SUFFIX_LENGTH))
    return f"{datetime_to_timestamp_ms(now)}-{suffix}"
