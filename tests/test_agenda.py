import pendulum
import pytest

from daycal.service.agenda import build_agenda, is_event_on_day
from daycal.service.window import compute_window


def texts(lines):
    return [line["text"] for line in lines]


def test_timed_event_is_rendered_with_color_and_clock_times(
    tokyo_window, make_timed_event
):
    events = [
        make_timed_event(
            "Standup",
            "2024-03-10T09:00:00+09:00",
            "2024-03-10T09:30:00+09:00",
            color_id="5",
        )
    ]

    assert texts(build_agenda(events, tokyo_window)) == ["【黄】Standup (09:00-09:30)"]


def test_all_day_event_is_rendered_without_times(tokyo_window, make_all_day_event):
    events = [make_all_day_event("Trip", "2024-03-10", "2024-03-11")]

    assert texts(build_agenda(events, tokyo_window)) == ["【デフォルト】Trip (終日)"]


def test_all_day_event_on_target_date_is_always_included(make_all_day_event):
    event = make_all_day_event("Holiday", "2024-03-10", "2024-03-11")

    for tz in ("Asia/Tokyo", "UTC", "America/Los_Angeles"):
        window = compute_window(pendulum.date(2024, 3, 10), tz=tz)
        assert is_event_on_day(event, window)


def test_all_day_event_is_matched_by_its_exclusive_end_date(tokyo_window, make_all_day_event):
    event = make_all_day_event("Yesterday", "2024-03-09", "2024-03-10")

    # Ends on the target date label, so it is kept
    assert is_event_on_day(event, tokyo_window)

    earlier = make_all_day_event("Two days ago", "2024-03-08", "2024-03-09")
    assert not is_event_on_day(earlier, tokyo_window)


def test_overnight_event_is_included_on_the_day_it_ends(make_timed_event):
    event = make_timed_event(
        "Night shift", "2024-03-09T22:00:00+09:00", "2024-03-10T01:00:00+09:00"
    )

    target_day = compute_window(pendulum.date(2024, 3, 10), tz="Asia/Tokyo")
    two_days_before = compute_window(pendulum.date(2024, 3, 8), tz="Asia/Tokyo")

    assert is_event_on_day(event, target_day)
    assert not is_event_on_day(event, two_days_before)
    assert texts(build_agenda([event], target_day)) == [
        "【デフォルト】Night shift (22:00-01:00)"
    ]


def test_event_spanning_from_previous_day_into_next_day_is_included(
    tokyo_window, make_timed_event
):
    event = make_timed_event(
        "Conference", "2024-03-09T20:00:00+09:00", "2024-03-11T10:00:00+09:00"
    )

    assert is_event_on_day(event, tokyo_window)


@pytest.mark.parametrize(
    "start, end",
    [
        ("2024-03-08T10:00:00+09:00", "2024-03-08T11:00:00+09:00"),
        ("2024-03-09T10:00:00+09:00", "2024-03-09T11:00:00+09:00"),
        ("2024-03-11T09:00:00+09:00", "2024-03-11T10:00:00+09:00"),
    ],
)
def test_events_outside_target_day_are_excluded(
    tokyo_window, make_timed_event, start, end
):
    assert not is_event_on_day(make_timed_event("Other day", start, end), tokyo_window)


def test_times_are_shown_in_the_event_offset(tokyo_window, make_timed_event):
    event = make_timed_event(
        "Call with London", "2024-03-10T01:00:00Z", "2024-03-10T02:00:00Z"
    )

    assert texts(build_agenda([event], tokyo_window)) == [
        "【デフォルト】Call with London (01:00-02:00)"
    ]


def test_no_qualifying_events_yields_a_single_no_events_line(
    tokyo_window, make_timed_event
):
    events = [
        make_timed_event(
            "Old", "2024-03-01T10:00:00+09:00", "2024-03-01T11:00:00+09:00"
        )
    ]

    assert texts(build_agenda(events, tokyo_window)) == ["2024-03-10の予定はありません。"]
    assert texts(build_agenda([], tokyo_window)) == ["2024-03-10の予定はありません。"]


def test_source_order_is_preserved(tokyo_window, make_timed_event, make_all_day_event):
    events = [
        make_timed_event(
            "Late", "2024-03-10T18:00:00+09:00", "2024-03-10T19:00:00+09:00"
        ),
        make_all_day_event("Trip", "2024-03-10", "2024-03-11", color_id="7"),
        make_timed_event(
            "Early", "2024-03-10T08:00:00+09:00", "2024-03-10T08:15:00+09:00"
        ),
    ]

    assert texts(build_agenda(events, tokyo_window)) == [
        "【デフォルト】Late (18:00-19:00)",
        "【水色】Trip (終日)",
        "【デフォルト】Early (08:00-08:15)",
    ]


def test_unknown_color_id_uses_default_label(tokyo_window, make_timed_event):
    event = make_timed_event(
        "Review",
        "2024-03-10T13:00:00+09:00",
        "2024-03-10T14:00:00+09:00",
        color_id="42",
    )

    [line] = build_agenda([event], tokyo_window)
    assert line["text"] == "【デフォルト】Review (13:00-14:00)"
    assert line["style"] is None


def test_line_style_follows_color_id(tokyo_window, make_timed_event):
    event = make_timed_event(
        "Standup",
        "2024-03-10T09:00:00+09:00",
        "2024-03-10T09:30:00+09:00",
        color_id="5",
    )

    [line] = build_agenda([event], tokyo_window)
    assert line["style"] == "#f6bf26"


def test_english_labels(tokyo_window, make_timed_event, make_all_day_event):
    events = [
        make_timed_event(
            "Standup",
            "2024-03-10T09:00:00+09:00",
            "2024-03-10T09:30:00+09:00",
            color_id="5",
        ),
        make_all_day_event("Trip", "2024-03-10", "2024-03-11"),
    ]

    assert texts(build_agenda(events, tokyo_window, language="en")) == [
        "【Banana】Standup (09:00-09:30)",
        "【Default】Trip (all day)",
    ]
    assert texts(build_agenda([], tokyo_window, language="en")) == [
        "No events for 2024-03-10."
    ]


def test_malformed_start_falls_back_to_epoch(tokyo_window, make_timed_event):
    event = make_timed_event("Broken", "not-a-date", "2024-03-10T10:00:00+09:00")

    # Still ends on the target date, so it is listed with an epoch start time
    assert texts(build_agenda([event], tokyo_window)) == [
        "【デフォルト】Broken (00:00-10:00)"
    ]


def test_fully_malformed_event_is_silently_excluded(tokyo_window, make_timed_event):
    event = make_timed_event("Broken", "garbage", "also garbage")

    assert not is_event_on_day(event, tokyo_window)
    assert texts(build_agenda([event], tokyo_window)) == [
        "2024-03-10の予定はありません。"
    ]


def test_event_without_bounds_is_excluded(tokyo_window):
    event = {
        "summary": "Empty",
        "start": {"date_time": None, "date": None},
        "end": {"date_time": None, "date": None},
        "color_id": None,
    }

    assert not is_event_on_day(event, tokyo_window)
