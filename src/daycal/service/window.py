# SPDX-License-Identifier: MIT

import pendulum

from daycal.model.window import DisplayWindow
from daycal.time import date_to_str


def compute_window(target_date: pendulum.Date, tz: str = "local") -> DisplayWindow:
    """
    Query range for a day's agenda.

    Starts at midnight of the previous day so events that begin the evening
    before and run past midnight are returned by the calendar. Ends at
    23:59:59 of the target day rather than the following midnight.
    """
    day_start = pendulum.datetime(
        target_date.year, target_date.month, target_date.day, tz=tz
    )
    return {
        "query_start": day_start.subtract(days=1),
        "query_end": day_start.set(hour=23, minute=59, second=59),
        "target_date_label": date_to_str(target_date),
    }
