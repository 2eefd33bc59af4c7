# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class EventTime(TypedDict):
    date_time: Optional[str]
    date: Optional[str]


class CalendarEvent(TypedDict):
    summary: str
    start: EventTime
    end: EventTime
    color_id: Optional[str]
