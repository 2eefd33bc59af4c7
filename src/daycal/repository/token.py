# SPDX-License-Identifier: MIT

import json
import os
from pathlib import Path
from typing import Optional

from google.oauth2.credentials import Credentials

CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"
SCOPES = [CALENDAR_READONLY_SCOPE]


class TokenRepository:
    """
    Local cache of the user's OAuth token.

    The file holds the authorized-user JSON produced by google-auth and is
    written with owner-only permissions.
    """

    def __init__(self, token_path: Path) -> None:
        self.token_path = token_path

    def load(self) -> Optional[Credentials]:
        """Return the cached credentials, or None when there is no usable file."""
        if not self.token_path.is_file():
            return None
        try:
            info = json.loads(self.token_path.read_text())
            return Credentials.from_authorized_user_info(info, SCOPES)
        except (OSError, ValueError):
            return None

    def save(self, credentials: Credentials) -> None:
        self.token_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.token_path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as token_file:
            token_file.write(credentials.to_json())
