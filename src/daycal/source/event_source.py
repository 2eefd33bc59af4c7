# SPDX-License-Identifier: MIT

from typing import Protocol

from daycal.model.event import CalendarEvent


class EventSource(Protocol):
    def list_events(
        self, calendar_id: str, time_min: str, time_max: str
    ) -> list[CalendarEvent]:
        """Return single (expanded) events in [time_min, time_max), ordered by start."""
        ...
