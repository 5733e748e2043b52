# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from habitlog.model.chart import ChartPoint, DashboardSummary
from habitlog.view.entry import build_entries_table
from habitlog.view.header import header

BAR_WIDTH = 30


def _bar(count: int, max_count: int) -> str:
    if max_count == 0 or count == 0:
        return ""
    return "█" * max(1, round(count / max_count * BAR_WIDTH))


def build_chart_table(chart_data: list[ChartPoint]) -> Table:
    chart_table = Table(box=box.SIMPLE)
    chart_table.add_column("date")
    chart_table.add_column("count", justify="right")
    chart_table.add_column("value", justify="right")
    chart_table.add_column("")

    max_count = max((point["count"] for point in chart_data), default=0)
    for point in chart_data:
        chart_table.add_row(
            point["label"],
            str(point["count"]),
            str(point["value"]),
            f"[cyan]{_bar(point['count'], max_count)}[/cyan]",
        )
    return chart_table


def dashboard_view(summary: DashboardSummary) -> None:
    header("dashboard")

    console = Console()

    stats_table = Table(box=box.SIMPLE, show_header=False)
    stats_table.add_column("stat", style="cyan")
    stats_table.add_column("value", style="magenta", justify="right")
    stats_table.add_row("entries this week", str(summary["this_week_count"]))
    stats_table.add_row("day streak", str(summary["consecutive_days"]))
    stats_table.add_row("goal rate", f"{summary['goal_rate']}%")
    console.print(stats_table)

    console.print(build_chart_table(summary["chart_data"]))

    if len(summary["recent_entries"]) > 0:
        console.print(" [sandy_brown]recent[/sandy_brown]")
        console.print(
            build_entries_table(
                summary["recent_entries"], columns=("date", "title", "value", "tags")
            )
        )
