# SPDX-License-Identifier: MIT


class CalendarSourceError(Exception):
    """Base class for failures talking to the calendar service."""


class CredentialsError(CalendarSourceError):
    """The OAuth client secret file is missing or unparsable."""


class AuthenticationError(CalendarSourceError):
    """The authorization exchange or token refresh failed."""


class RetrievalError(CalendarSourceError):
    """Listing events failed after authenticating."""
