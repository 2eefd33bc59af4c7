# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from daycal.time import date_from_str


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    # Match YYYY-MM-DD format only
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}", date_param):
        raise typer.BadParameter(
            f"Invalid date format. Please use YYYY-MM-DD format, got '{date_param}'"
        )

    try:
        return date_from_str(date_param)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{date_param}': {e}")
