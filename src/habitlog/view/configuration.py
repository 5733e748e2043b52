# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from habitlog import configuration


def configuration_view(config: configuration.Configuration) -> None:
    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("collation_locale", config["collation_locale"])
    table.add_row("weekly_goal", str(config["weekly_goal"]))
    table.add_row("chart_period_days", str(config["chart_period_days"]))
    table.add_row("default_sort", config["default_sort"])
    table.add_row(
        "seed_when_empty",
        "✓ Enabled" if config["seed_when_empty"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)
