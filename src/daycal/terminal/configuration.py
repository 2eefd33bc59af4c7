# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from daycal import configuration
from daycal.repository.configuration import CONFIGURATION_REPO, ConfigurationError
from daycal.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(
    config: configuration.Configuration, title: Optional[str] = None
) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("calendar_id", config["calendar_id"])
    table.add_row("language", config["language"])
    table.add_row(
        "timezone",
        config["timezone"] if config["timezone"] is not None else "local",
    )
    table.add_row(
        "credentials_path", str(configuration.resolve_credentials_path(config))
    )
    table.add_row("token_path", str(configuration.resolve_token_path(config)))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "colorize",
        "✓ Enabled" if config["colorize"] else "✗ Disabled",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    calendar_id: Annotated[
        Optional[str],
        typer.Option("--calendar-id", help="Calendar to read events from"),
    ] = None,
    language: Annotated[
        Optional[str],
        typer.Option("--language", help="Output language: ja or en"),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option(
            "--timezone",
            help="IANA time zone for the agenda day, e.g. Asia/Tokyo",
        ),
    ] = None,
    remove_timezone: Annotated[
        bool,
        typer.Option(
            "--remove-timezone",
            help="Reset time zone to None (use the system time zone)",
        ),
    ] = False,
    credentials_path: Annotated[
        Optional[str],
        typer.Option(
            "--credentials-path",
            help="OAuth client secret file (None = credentials.json in the config directory)",
        ),
    ] = None,
    remove_credentials_path: Annotated[
        bool,
        typer.Option(
            "--remove-credentials-path",
            help="Reset credentials path to None",
        ),
    ] = False,
    token_path: Annotated[
        Optional[str],
        typer.Option(
            "--token-path",
            help="Cached OAuth token file (None = token.json in the config directory)",
        ),
    ] = None,
    remove_token_path: Annotated[
        bool,
        typer.Option(
            "--remove-token-path",
            help="Reset token path to None",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show/hide the date header above the agenda",
        ),
    ] = None,
    colorize: Annotated[
        Optional[bool],
        typer.Option(
            "--colorize/--no-colorize",
            help="Color agenda lines with their calendar color",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """

    try:
        CONFIGURATION_REPO.update_config(
            calendar_id=calendar_id,
            language=language,
            timezone=timezone,
            remove_timezone=remove_timezone,
            credentials_path=credentials_path,
            remove_credentials_path=remove_credentials_path,
            token_path=token_path,
            remove_token_path=remove_token_path,
            show_header=show_header,
            colorize=colorize,
        )
    except ConfigurationError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    # Display updated configuration
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
