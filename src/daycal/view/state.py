"""Global application state using context variables for thread-safe state management."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling the agenda header line
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for coloring agenda lines by their calendar color
# Default is True (colorize)
_colorize_var: ContextVar[bool] = ContextVar("colorize", default=True)


def set_show_header(value: bool) -> None:
    """Set whether the header line should be displayed above the agenda.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Get whether the header line should be displayed above the agenda.

    Returns:
        True if headers should be shown, False otherwise
    """
    return _show_header_var.get()


def set_colorize(value: bool) -> None:
    _colorize_var.set(value)


def get_colorize() -> bool:
    return _colorize_var.get()
