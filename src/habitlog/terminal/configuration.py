# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitlog.query.sort import SortOption
from habitlog.repository.configuration import CONFIGURATION_REPO
from habitlog.terminal.custom_typer import AliasedTyperGroup
from habitlog.view.configuration import configuration_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    configuration_view(CONFIGURATION_REPO.get_config())


@app.command("set, s", no_args_is_help=True)
def set_(
    collation_locale: Annotated[
        Optional[str],
        typer.Option(
            "--collation-locale",
            help="title ordering locale, or 'codepoint' for raw ordering",
        ),
    ] = None,
    weekly_goal: Annotated[
        Optional[int], typer.Option("--weekly-goal", min=1)
    ] = None,
    chart_period_days: Annotated[
        Optional[int], typer.Option("--chart-period-days", min=1)
    ] = None,
    default_sort: Annotated[Optional[str], typer.Option("--default-sort")] = None,
    seed_when_empty: Annotated[
        Optional[bool], typer.Option("--seed-when-empty/--no-seed-when-empty")
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
) -> None:
    """Update configuration settings."""
    if default_sort is not None and default_sort not in list(SortOption):
        typer.echo(
            f"Invalid sort: {default_sort}. "
            f"Valid options: {', '.join(option.value for option in SortOption)}"
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        collation_locale=collation_locale,
        weekly_goal=weekly_goal,
        chart_period_days=chart_period_days,
        default_sort=default_sort,
        seed_when_empty=seed_when_empty,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )
    configuration_view(CONFIGURATION_REPO.get_config())
