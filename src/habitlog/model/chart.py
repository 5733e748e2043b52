# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from habitlog.model.entry import Entry, Number


class ChartPoint(TypedDict):
    day: pendulum.Date
    label: str  # "M/D"
    count: int
    value: Number  # Sum of entry values for the day


class DashboardSummary(TypedDict):
    this_week_count: int
    consecutive_days: int
    goal_rate: int
    chart_data: list[ChartPoint]
    recent_entries: list[Entry]
