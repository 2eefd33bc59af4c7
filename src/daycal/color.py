# SPDX-License-Identifier: MIT

from types import MappingProxyType
from typing import Mapping, Optional

# Google Calendar event color ids and their display names
COLOR_NAMES_JA: Mapping[str, str] = MappingProxyType(
    {
        "1": "薄紫",
        "2": "緑",
        "3": "紫",
        "4": "赤",
        "5": "黄",
        "6": "オレンジ",
        "7": "水色",
        "8": "グレー",
        "9": "青紫",
        "10": "緑",
        "11": "赤",
    }
)

COLOR_NAMES_EN: Mapping[str, str] = MappingProxyType(
    {
        "1": "Lavender",
        "2": "Sage",
        "3": "Grape",
        "4": "Flamingo",
        "5": "Banana",
        "6": "Tangerine",
        "7": "Peacock",
        "8": "Graphite",
        "9": "Blueberry",
        "10": "Basil",
        "11": "Tomato",
    }
)

COLOR_CATALOGS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {"ja": COLOR_NAMES_JA, "en": COLOR_NAMES_EN}
)

DEFAULT_COLOR_NAMES: Mapping[str, str] = MappingProxyType(
    {"ja": "デフォルト", "en": "Default"}
)

# Rich styles matching the calendar's own palette
COLOR_STYLES: Mapping[str, str] = MappingProxyType(
    {
        "1": "#7986cb",
        "2": "#33b679",
        "3": "#8e24aa",
        "4": "#e67c73",
        "5": "#f6bf26",
        "6": "#f4511e",
        "7": "#039be5",
        "8": "#616161",
        "9": "#3f51b5",
        "10": "#0b8043",
        "11": "#d50000",
    }
)


def get_color_name(color_id: Optional[str], language: str = "ja") -> str:
    """Return the display name for a color id, or the default label.

    Empty, absent and unrecognized ids all map to the default label.
    """
    if color_id:
        name = COLOR_CATALOGS[language].get(color_id)
        if name is not None:
            return name
    return DEFAULT_COLOR_NAMES[language]


def get_color_style(color_id: Optional[str]) -> Optional[str]:
    if not color_id:
        return None
    return COLOR_STYLES.get(color_id)
