# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DisplayWindow(TypedDict):
    query_start: pendulum.DateTime
    query_end: pendulum.DateTime
    target_date_label: str
