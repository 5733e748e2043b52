# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum

from habitlog.model.chart import ChartPoint, DashboardSummary
from habitlog.model.entry import Entry, Number
from habitlog.query.sort import SortOption, sort_entries
from habitlog.time import (
    date_to_chart_label,
    datetime_from_str,
    local_date,
    resolve_now,
)

WEEK_DAYS = 7
DEFAULT_WEEKLY_GOAL = 7
RECENT_ENTRY_LIMIT = 5


def this_week_count(
    entries: list[Entry], now: Optional[pendulum.DateTime] = None
) -> int:
    """Entries dated at or after exactly seven days before ``now``."""
    week_start = resolve_now(now).subtract(days=WEEK_DAYS)
    return sum(
        1 for entry in entries if datetime_from_str(entry["date"]) >= week_start
    )


def consecutive_days(
    entries: list[Entry], now: Optional[pendulum.DateTime] = None
) -> int:
    """
    Length of the run of calendar days, ending today, that each have an entry.

    Returns 0 when today has no entry.
    """
    covered_days = {
        local_date(datetime_from_str(entry["date"])) for entry in entries
    }

    count = 0
    check_day = resolve_now(now).date()
    while check_day in covered_days:
        count += 1
        check_day = check_day.subtract(days=1)
    return count


def goal_rate(week_count: int, weekly_goal: int = DEFAULT_WEEKLY_GOAL) -> int:
    """Percentage of the weekly goal reached, rounded half up and capped at 100."""
    if weekly_goal <= 0:
        return 100
    return min(100, math.floor(week_count / weekly_goal * 100 + 0.5))


def chart_data(
    entries: list[Entry],
    period_days: int,
    now: Optional[pendulum.DateTime] = None,
) -> list[ChartPoint]:
    """
    Per-day entry count and value sum for the last ``period_days`` calendar days.

    Points run oldest to newest with today last; days without entries are
    zero-filled.
    """
    today = resolve_now(now).date()

    counts: dict[pendulum.Date, int] = {}
    sums: dict[pendulum.Date, Number] = {}
    for entry in entries:
        day = local_date(datetime_from_str(entry["date"]))
        counts[day] = counts.get(day, 0) + 1
        sums[day] = sums.get(day, 0) + entry["value"]

    data: list[ChartPoint] = []
    for offset in range(period_days - 1, -1, -1):
        day = today.subtract(days=offset)
        data.append(
            {
                "day": day,
                "label": date_to_chart_label(day),
                "count": counts.get(day, 0),
                "value": sums.get(day, 0),
            }
        )
    return data


def recent_entries(
    entries: list[Entry], limit: int = RECENT_ENTRY_LIMIT
) -> list[Entry]:
    return sort_entries(entries, SortOption.DATE_DESC)[:limit]


def get_dashboard_summary(
    entries: list[Entry],
    period_days: int = WEEK_DAYS,
    now: Optional[pendulum.DateTime] = None,
    weekly_goal: int = DEFAULT_WEEKLY_GOAL,
) -> DashboardSummary:
    now = resolve_now(now)
    week_count = this_week_count(entries, now)
    return {
        "this_week_count": week_count,
        "consecutive_days": consecutive_days(entries, now),
        "goal_rate": goal_rate(week_count, weekly_goal),
        "chart_data": chart_data(entries, period_days, now),
        "recent_entries": recent_entries(entries),
    }
