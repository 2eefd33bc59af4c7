# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class AgendaLine(TypedDict):
    text: str
    style: Optional[str]
