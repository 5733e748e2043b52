# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def resolve_now(now: Optional[pendulum.DateTime]) -> pendulum.DateTime:
    """Return ``now`` in the local timezone, defaulting to the current instant."""
    if now is None:
        return now_local()
    return now.in_tz("local")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    """Serialize to the ISO-8601 form stored in entries (UTC, millisecond precision)."""
    return datetime.in_tz("UTC").format("YYYY-MM-DD[T]HH:mm:ss.SSS[Z]")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def is_valid_datetime_str(datetime: object) -> bool:
    if not isinstance(datetime, str):
        return False
    try:
        return isinstance(pendulum.parse(datetime), pendulum.DateTime)
    except ValueError:
        return False


def local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    """The calendar day an instant falls on in the local timezone."""
    return datetime.in_tz("local").date()


def datetime_to_timestamp_ms(datetime: pendulum.DateTime) -> int:
    return int(datetime.timestamp() * 1000)


def date_to_chart_label(date: pendulum.Date) -> str:
    return date.format("M/D")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def datetime_str_to_display_local_datetime_str(datetime: str) -> str:
    return datetime_to_display_local_datetime_str(datetime_from_str(datetime))
