"""
Pytest configuration and shared fixtures.
"""

from typing import Callable, Optional

import pendulum
import pytest

from daycal import configuration
from daycal.model.event import CalendarEvent
from daycal.model.window import DisplayWindow
from daycal.repository.configuration import CONFIGURATION_REPO
from daycal.service.window import compute_window
from daycal.view import state as view_state


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config directory at a temporary path with a fresh repository."""
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    yield tmp_path
    view_state.set_show_header(True)
    view_state.set_colorize(True)


@pytest.fixture
def tokyo_config(config_dir):
    """Config file fixing the agenda time zone to Asia/Tokyo."""
    (config_dir / "config.yaml").write_text(
        "calendar_id: primary\nlanguage: ja\ntimezone: Asia/Tokyo\n"
    )
    return config_dir


@pytest.fixture
def tokyo_window() -> DisplayWindow:
    """Display window for 2024-03-10 in Asia/Tokyo."""
    return compute_window(pendulum.date(2024, 3, 10), tz="Asia/Tokyo")


@pytest.fixture
def make_timed_event() -> Callable[..., CalendarEvent]:
    def _make(
        summary: str, start: str, end: str, color_id: Optional[str] = None
    ) -> CalendarEvent:
        return {
            "summary": summary,
            "start": {"date_time": start, "date": None},
            "end": {"date_time": end, "date": None},
            "color_id": color_id,
        }

    return _make


@pytest.fixture
def make_all_day_event() -> Callable[..., CalendarEvent]:
    def _make(
        summary: str, start: str, end: str, color_id: Optional[str] = None
    ) -> CalendarEvent:
        return {
            "summary": summary,
            "start": {"date_time": None, "date": start},
            "end": {"date_time": None, "date": end},
            "color_id": color_id,
        }

    return _make
