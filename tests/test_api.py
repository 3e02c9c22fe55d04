import pytest

from agenda_timeline.api import call_tool, get_tools, register_tool
from agenda_timeline.api.registry import REGISTRY

RECORDS = [
    {"id": "long", "title": "Long", "start": "2026-02-12T10:00:00-05:00", "end": "2026-02-12T17:00:00-05:00"},
    {"id": "early", "title": "Early", "start": "2026-02-12T11:00:00-05:00", "end": "2026-02-12T12:00:00-05:00"},
    {"id": "late", "title": "Late", "start": "2026-02-12T15:00:00-05:00", "end": "2026-02-12T16:00:00-05:00"},
]


def test_timeline_tools_are_registered():
    names = {tool.name for tool in get_tools("timeline")}
    assert names == {"event_duration", "timeline_bounds", "timeline_layout", "day_view", "agenda_events"}


def test_tool_schema():
    tool = REGISTRY["day_view"].as_tool()
    params = tool["function"]["parameters"]
    assert tool["function"]["name"] == "day_view"
    assert params["required"] == ["events"]
    assert params["properties"]["events"] == {"type": "array"}
    assert params["properties"]["px_per_hour"] == {"type": "integer"}
    assert params["properties"]["timezone"] == {"type": "string"}


def test_event_duration_tool():
    assert call_tool("event_duration", event=RECORDS[0]) == {"minutes": 420}
    all_day = {"start": "2026-02-12", "end": "2026-02-14", "allDay": True}
    assert call_tool("event_duration", event=all_day) == {"minutes": 0}


def test_timeline_layout_tool():
    result = call_tool("timeline_layout", events=RECORDS)
    assert [(item["event"]["id"], item["column"], item["totalColumns"]) for item in result] == [
        ("long", 0, 2),
        ("early", 1, 2),
        ("late", 1, 2),
    ]
    assert result[0]["event"]["allDay"] is False


def test_timeline_bounds_tool_default():
    assert call_tool("timeline_bounds", events=[]) == {"startHour": 8, "endHour": 18}


def test_timeline_bounds_tool_uses_host_zone(host_eastern):
    assert call_tool("timeline_bounds", events=RECORDS) == {"startHour": 10, "endHour": 17}


def test_day_view_tool(host_eastern):
    view = call_tool("day_view", events=RECORDS, px_per_hour=60)
    assert view["bounds"] == {"startHour": 10, "endHour": 17}
    assert view["pxPerHour"] == 60
    assert view["heightPx"] == 420
    assert [block["topPx"] for block in view["blocks"]] == [0, 60, 300]
    assert [block["widthFraction"] for block in view["blocks"]] == [0.5, 0.5, 0.5]


def test_settings_default_bounds(monkeypatch):
    monkeypatch.setenv("AGENDA_DEFAULT_START_HOUR", "6")
    monkeypatch.setenv("AGENDA_DEFAULT_END_HOUR", "20")
    assert call_tool("timeline_bounds", events=[]) == {"startHour": 6, "endHour": 20}


def test_unknown_tool():
    with pytest.raises(KeyError):
        call_tool("nope")


def test_duplicate_registration_is_rejected():
    with pytest.raises(ValueError):
        register_tool("timeline_layout", description="dup", category="timeline")(lambda: None)


def test_agenda_events_tool():
    records = RECORDS[::-1] + [{"id": "holiday", "start": "2026-02-12", "end": "2026-02-13", "allDay": True}]
    result = call_tool("agenda_events", events=records)
    assert [item["id"] for item in result] == ["holiday", "long", "early", "late"]
    assert result[0]["allDay"] is True
    assert result[1]["calendarColor"] == "#4285f4"
