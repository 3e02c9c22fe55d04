from datetime import datetime

from agenda_timeline.core import event_duration_minutes


def test_all_day_event_is_zero(make_event):
    assert event_duration_minutes(make_event("2026-02-12", "2026-02-13", all_day=True)) == 0


def test_multi_day_all_day_event_is_zero(make_event):
    assert event_duration_minutes(make_event("2026-02-12", "2026-02-15", all_day=True)) == 0


def test_one_hour_event(make_event):
    event = make_event("2026-02-12T10:00:00-05:00", "2026-02-12T11:00:00-05:00")
    assert event_duration_minutes(event) == 60


def test_half_hour_event(make_event):
    event = make_event("2026-02-12T14:00:00-05:00", "2026-02-12T14:30:00-05:00")
    assert event_duration_minutes(event) == 30


def test_short_event_in_utc(make_event):
    event = make_event("2026-02-12T09:00:00+00:00", "2026-02-12T09:15:00+00:00")
    assert event_duration_minutes(event) == 15


def test_event_spanning_midnight(make_event):
    event = make_event("2026-02-12T23:00:00-05:00", "2026-02-13T01:00:00-05:00")
    assert event_duration_minutes(event) == 120


def test_zulu_suffix(make_event):
    event = make_event("2026-02-12T10:00:00Z", "2026-02-12T11:30:00Z")
    assert event_duration_minutes(event) == 90


def test_mixed_offsets_measure_elapsed_time(make_event):
    event = make_event("2026-02-12T15:00:00+00:00", "2026-02-12T11:00:00-05:00")
    assert event_duration_minutes(event) == 60


def test_zero_length_event(make_event):
    event = make_event("2026-02-12T10:00:00-05:00", "2026-02-12T10:00:00-05:00")
    assert event_duration_minutes(event) == 0


def test_reversed_event_is_non_negative(make_event):
    event = make_event("2026-02-12T11:00:00-05:00", "2026-02-12T10:00:00-05:00")
    assert event_duration_minutes(event) == 60


def test_eight_hour_event(make_event):
    event = make_event("2026-02-12T09:00:00-05:00", "2026-02-12T17:00:00-05:00")
    assert event_duration_minutes(event) == 480


def test_datetime_values_are_accepted(make_event, eastern):
    event = make_event(datetime(2026, 2, 12, 9, tzinfo=eastern), datetime(2026, 2, 12, 9, 45, tzinfo=eastern))
    assert event_duration_minutes(event) == 45
