# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer
from rich.console import Console

from daycal.configuration import (
    Configuration,
    resolve_credentials_path,
    resolve_timezone,
    resolve_token_path,
)
from daycal.repository.configuration import CONFIGURATION_REPO
from daycal.repository.token import TokenRepository
from daycal.service.agenda import build_agenda
from daycal.service.window import compute_window
from daycal.source.errors import CalendarSourceError
from daycal.source.event_source import EventSource
from daycal.source.google import GoogleCalendarSource, get_credentials
from daycal.time import datetime_to_iso_str, today_in_tz
from daycal.view.agenda import render_agenda


def build_event_source(config: Configuration, console: Console) -> EventSource:
    credentials = get_credentials(
        resolve_credentials_path(config),
        TokenRepository(resolve_token_path(config)),
        console,
    )
    return GoogleCalendarSource.from_credentials(credentials)


def show_agenda(target_date: Optional[pendulum.Date]) -> None:
    """Fetch and print the agenda for target_date (today when None)."""
    config = CONFIGURATION_REPO.get_config()
    tz = resolve_timezone(config)
    error_console = Console(stderr=True)

    if target_date is None:
        target_date = today_in_tz(tz)
    window = compute_window(target_date, tz=tz)

    try:
        source = build_event_source(config, error_console)
        events = source.list_events(
            config["calendar_id"],
            datetime_to_iso_str(window["query_start"]),
            datetime_to_iso_str(window["query_end"]),
        )
    except CalendarSourceError as e:
        error_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    lines = build_agenda(events, window, config["language"])
    console = Console(highlight=False, soft_wrap=True)
    render_agenda(console, window, lines, config["language"])


def auth() -> None:
    """Authorize access to Google Calendar and cache the token."""
    config = CONFIGURATION_REPO.get_config()
    error_console = Console(stderr=True)

    try:
        get_credentials(
            resolve_credentials_path(config),
            TokenRepository(resolve_token_path(config)),
            error_console,
        )
    except CalendarSourceError as e:
        error_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    Console().print("[green]Authorization complete.[/green]")
