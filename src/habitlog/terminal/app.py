# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from habitlog.terminal import configuration, data, entry
from habitlog.terminal.custom_typer import OrderedAliasedTyperGroup
from habitlog.terminal.dashboard import dashboard
from habitlog.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="habitlog - dated, tagged, scored activity log with a dashboard",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e")
app.command(name="dashboard, d")(dashboard)
app.add_typer(data.app, name="data, da")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    habitlog - dated, tagged, scored activity log with a dashboard

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
