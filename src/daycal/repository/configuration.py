# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daycal import configuration


class ConfigurationError(Exception):
    pass


def _validate_language(language: str) -> None:
    if language not in configuration.SUPPORTED_LANGUAGES:
        raise ConfigurationError(
            f"Unsupported language '{language}', "
            f"expected one of: {', '.join(configuration.SUPPORTED_LANGUAGES)}"
        )


def _validate_timezone(timezone: str) -> None:
    try:
        pendulum.timezone(timezone)
    except (ValueError, KeyError) as e:
        raise ConfigurationError(f"Unknown time zone '{timezone}'") from e


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ConfigurationError(
                f"Unable to load configuration from {configuration.APP_CONFIG_PATH}"
            )
        return self._config

    def __load_data(self) -> None:
        try:
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise ConfigurationError(
                f"Unable to parse config file {configuration.APP_CONFIG_PATH}: {e}"
            ) from e

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(
                f"Config file {configuration.APP_CONFIG_PATH} must contain a mapping"
            )

        # Fill settings added after the file was written
        loaded = configuration.get_default_configuration()
        loaded.update(raw_config)  # type: ignore[typeddict-item]

        _validate_language(loaded["language"])
        if loaded["timezone"] is not None:
            _validate_timezone(loaded["timezone"])

        self._config = loaded

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        calendar_id: Optional[str] = None,
        language: Optional[str] = None,
        timezone: Optional[str] = None,
        remove_timezone: bool = False,
        credentials_path: Optional[str] = None,
        remove_credentials_path: bool = False,
        token_path: Optional[str] = None,
        remove_token_path: bool = False,
        show_header: Optional[bool] = None,
        colorize: Optional[bool] = None,
    ) -> None:
        if language is not None:
            _validate_language(language)
        if timezone is not None:
            _validate_timezone(timezone)

        self.is_dirty = True

        if calendar_id is not None:
            self.config["calendar_id"] = calendar_id
        if language is not None:
            self.config["language"] = language
        if timezone is not None:
            self.config["timezone"] = timezone
        if remove_timezone:
            self.config["timezone"] = None
        if credentials_path is not None:
            self.config["credentials_path"] = credentials_path
        if remove_credentials_path:
            self.config["credentials_path"] = None
        if token_path is not None:
            self.config["token_path"] = token_path
        if remove_token_path:
            self.config["token_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if colorize is not None:
            self.config["colorize"] = colorize


CONFIGURATION_REPO = ConfigurationRepository()
