# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "daycal"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

DEFAULT_CREDENTIALS_FILE_NAME = "credentials.json"
DEFAULT_TOKEN_FILE_NAME = "token.json"

SUPPORTED_LANGUAGES = ("ja", "en")


class Configuration(TypedDict):
    calendar_id: str
    language: str
    timezone: Optional[str]
    credentials_path: Optional[str]
    token_path: Optional[str]
    show_header: bool
    colorize: bool


def get_default_configuration() -> Configuration:
    return {
        "calendar_id": "primary",
        "language": "ja",
        "timezone": None,
        "credentials_path": None,
        "token_path": None,
        "show_header": True,
        "colorize": True,
    }


def resolve_credentials_path(config: Configuration) -> Path:
    """Client secret file downloaded from the Google Cloud console."""
    if config["credentials_path"] is not None:
        return Path(config["credentials_path"]).expanduser()
    return CONFIG_PATH / DEFAULT_CREDENTIALS_FILE_NAME


def resolve_token_path(config: Configuration) -> Path:
    """Cached OAuth token, written after the first authorization."""
    if config["token_path"] is not None:
        return Path(config["token_path"]).expanduser()
    return CONFIG_PATH / DEFAULT_TOKEN_FILE_NAME


def resolve_timezone(config: Configuration) -> str:
    if config["timezone"] is None:
        return "local"
    return config["timezone"]
