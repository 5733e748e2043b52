# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitlog.repository.configuration import CONFIGURATION_REPO
from habitlog.repository.entry import get_entry_repository
from habitlog.service.analytics import get_dashboard_summary
from habitlog.service.seed import seed_if_empty
from habitlog.view.dashboard import dashboard_view


def dashboard(
    period: Annotated[
        Optional[int],
        typer.Option("--period", "-p", help="chart window in days, e.g. 7 or 30"),
    ] = None,
) -> None:
    """Show weekly count, streak, goal rate, daily chart and recent entries."""
    config = CONFIGURATION_REPO.get_config()
    repository = get_entry_repository()

    if config["seed_when_empty"]:
        seed_if_empty(repository)

    period_days = period if period is not None else config["chart_period_days"]
    if period_days < 1:
        raise typer.BadParameter("period must be at least 1 day")

    summary = get_dashboard_summary(
        repository.get_all_entries(),
        period_days=period_days,
        weekly_goal=config["weekly_goal"],
    )
    dashboard_view(summary)
