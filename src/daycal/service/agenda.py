# SPDX-License-Identifier: MIT

"""
Agenda selection and formatting for a single day.

Decides which events returned for a display window belong to the target
day and renders one line per event:

    【{color}】{summary} (HH:mm-HH:mm)
    【{color}】{summary} (終日)
"""

from typing import Iterable

import pendulum

from daycal.color import get_color_name, get_color_style
from daycal.label import all_day_label, no_events_line
from daycal.model.agenda import AgendaLine
from daycal.model.event import CalendarEvent, EventTime
from daycal.model.window import DisplayWindow
from daycal.time import (
    TimezoneLike,
    datetime_or_epoch,
    datetime_to_clock_str,
    datetime_to_date_str,
)


def effective_datetime(event_time: EventTime, tz: TimezoneLike) -> pendulum.DateTime:
    return datetime_or_epoch(event_time["date_time"], event_time["date"], tz=tz)


def _window_timezone(window: DisplayWindow) -> TimezoneLike:
    return window["query_start"].timezone or "UTC"


def is_all_day(event: CalendarEvent) -> bool:
    return not event["start"]["date_time"]


def is_event_on_day(event: CalendarEvent, window: DisplayWindow) -> bool:
    """
    Check whether an event belongs to the window's target day.

    An event qualifies when it ends on the target date, or when it starts
    before the end of the window and ends after the start of the target day.
    """
    tz = _window_timezone(window)
    event_start = effective_datetime(event["start"], tz)
    event_end = effective_datetime(event["end"], tz)

    if datetime_to_date_str(event_end) == window["target_date_label"]:
        return True

    target_day_start = window["query_start"].add(days=1)
    return event_start < window["query_end"] and event_end > target_day_start


def format_event_line(
    event: CalendarEvent, window: DisplayWindow, language: str = "ja"
) -> AgendaLine:
    color_name = get_color_name(event["color_id"], language)

    if is_all_day(event):
        text = f"【{color_name}】{event['summary']} ({all_day_label(language)})"
    else:
        tz = _window_timezone(window)
        start_display = datetime_to_clock_str(effective_datetime(event["start"], tz))
        end_display = datetime_to_clock_str(effective_datetime(event["end"], tz))
        text = f"【{color_name}】{event['summary']} ({start_display}-{end_display})"

    return {"text": text, "style": get_color_style(event["color_id"])}


def build_agenda(
    events: Iterable[CalendarEvent], window: DisplayWindow, language: str = "ja"
) -> list[AgendaLine]:
    """
    Build the display lines for the window's target day.

    Events keep the order given by the source. When nothing qualifies a
    single "no events" line is returned instead of an empty list.
    """
    lines = [
        format_event_line(event, window, language)
        for event in events
        if is_event_on_day(event, window)
    ]

    if len(lines) == 0:
        return [
            {
                "text": no_events_line(window["target_date_label"], language),
                "style": None,
            }
        ]

    return lines
