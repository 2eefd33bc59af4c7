# SPDX-License-Identifier: MIT

from types import MappingProxyType
from typing import Mapping

ALL_DAY_LABELS: Mapping[str, str] = MappingProxyType({"ja": "終日", "en": "all day"})

HEADER_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {"ja": "{date}の予定:", "en": "Events for {date}:"}
)

NO_EVENTS_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {"ja": "{date}の予定はありません。", "en": "No events for {date}."}
)


def all_day_label(language: str = "ja") -> str:
    return ALL_DAY_LABELS[language]


def header_line(date_label: str, language: str = "ja") -> str:
    return HEADER_TEMPLATES[language].format(date=date_label)


def no_events_line(date_label: str, language: str = "ja") -> str:
    return NO_EVENTS_TEMPLATES[language].format(date=date_label)
