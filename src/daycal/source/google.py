# SPDX-License-Identifier: MIT

"""
Google Calendar event source.

Handles the OAuth token lifecycle (cached token, refresh, browser
authorization) and lists events through the Calendar v3 API.
"""

from pathlib import Path
from typing import Any, Optional

import httplib2
from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from oauthlib.oauth2.rfc6749.errors import OAuth2Error
from rich.console import Console

from daycal.model.event import CalendarEvent
from daycal.repository.token import SCOPES, TokenRepository
from daycal.source.errors import AuthenticationError, CredentialsError, RetrievalError


def run_authorization_flow(credentials_path: Path) -> Credentials:
    """Ask the user to authorize access in the browser and return the new token."""
    try:
        flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), SCOPES)
    except OSError as e:
        raise CredentialsError(
            f"Unable to read client secret file {credentials_path}: {e}"
        ) from e
    except ValueError as e:
        raise CredentialsError(
            f"Unable to parse client secret file {credentials_path}: {e}"
        ) from e

    try:
        return flow.run_local_server(port=0)
    except (OAuth2Error, ValueError, OSError) as e:
        raise AuthenticationError(f"Unable to retrieve token from web: {e}") from e


def get_credentials(
    credentials_path: Path,
    token_repository: TokenRepository,
    console: Optional[Console] = None,
) -> Credentials:
    """
    Return usable credentials, authorizing only when needed.

    A cached token is used as is while valid and refreshed once expired. When
    there is no cached token, or it cannot be refreshed, the browser flow runs
    and the new token is saved.
    """
    console = console if console is not None else Console(stderr=True)

    credentials = token_repository.load()
    if credentials is not None and credentials.valid:
        return credentials

    refreshed = False
    if credentials is not None and credentials.expired and credentials.refresh_token:
        try:
            credentials.refresh(Request())
            refreshed = True
        except RefreshError as e:
            console.print(
                "[yellow]Cached token could not be refreshed, reauthorizing: "
                f"{e}[/yellow]"
            )
        except TransportError as e:
            raise AuthenticationError(f"Unable to refresh token: {e}") from e

    if not refreshed:
        credentials = run_authorization_flow(credentials_path)

    console.print(f"Saving credential file to: {token_repository.token_path}")
    try:
        token_repository.save(credentials)
    except OSError as e:
        raise AuthenticationError(f"Unable to cache oauth token: {e}") from e
    return credentials


def event_from_api_item(item: dict[str, Any]) -> CalendarEvent:
    start = item.get("start") or {}
    end = item.get("end") or {}
    return {
        "summary": item.get("summary") or "",
        "start": {"date_time": start.get("dateTime"), "date": start.get("date")},
        "end": {"date_time": end.get("dateTime"), "date": end.get("date")},
        "color_id": item.get("colorId"),
    }


class GoogleCalendarSource:
    def __init__(self, service: Any) -> None:
        self.service = service

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "GoogleCalendarSource":
        service = build(
            "calendar", "v3", credentials=credentials, cache_discovery=False
        )
        return cls(service)

    def list_events(
        self, calendar_id: str, time_min: str, time_max: str
    ) -> list[CalendarEvent]:
        events: list[CalendarEvent] = []
        page_token: Optional[str] = None

        while True:
            params: dict[str, Any] = {
                "calendarId": calendar_id,
                "timeMin": time_min,
                "timeMax": time_max,
                "showDeleted": False,
                "singleEvents": True,
                "orderBy": "startTime",
            }
            if page_token is not None:
                params["pageToken"] = page_token

            try:
                response = self.service.events().list(**params).execute()
            except HttpError as e:
                raise RetrievalError(f"Unable to retrieve events: {e}") from e
            except (RefreshError, TransportError, httplib2.HttpLib2Error, OSError) as e:
                raise RetrievalError(f"Unable to retrieve events: {e}") from e

            for item in response.get("items", []):
                events.append(event_from_api_item(item))

            page_token = response.get("nextPageToken")
            if page_token is None:
                return events
