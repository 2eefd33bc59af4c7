# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.text import Text

from daycal.label import header_line
from daycal.model.agenda import AgendaLine
from daycal.model.window import DisplayWindow
from daycal.view.state import get_colorize, get_show_header


def render_agenda(
    console: Console,
    window: DisplayWindow,
    lines: list[AgendaLine],
    language: str = "ja",
) -> None:
    """Print the header line followed by one line per agenda entry.

    Lines are printed as plain text so summaries containing square brackets
    are never read as markup.
    """
    if get_show_header():
        console.print(Text(header_line(window["target_date_label"], language)))

    colorize = get_colorize()
    for line in lines:
        style = line["style"] if colorize and line["style"] is not None else ""
        console.print(Text(line["text"], style=style))
