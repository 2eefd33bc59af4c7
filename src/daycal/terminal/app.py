# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from daycal.initialize import initialize
from daycal.repository.configuration import ConfigurationError
from daycal.terminal import agenda, configuration
from daycal.terminal.custom_typer import AliasedTyperGroup
from daycal.terminal.parse import parse_date
from daycal.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="daycal - A day's Google Calendar agenda in the CLI",
    invoke_without_command=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="auth, au")(agenda.auth)


@app.callback()
def main_callback(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="Date to fetch events (format: YYYY-MM-DD), defaults to today",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress the date header above the agenda",
        ),
    ] = False,
) -> None:
    """
    daycal - A day's Google Calendar agenda in the CLI

    Without a command, prints the agenda for --date.
    """
    try:
        initialize()
    except ConfigurationError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if no_header:
        view_state.set_show_header(False)

    if ctx.invoked_subcommand is None:
        agenda.show_agenda(date)


def run() -> None:
    app()
