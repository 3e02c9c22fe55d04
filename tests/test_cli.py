import json

import pytest

from agenda_timeline import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)


@pytest.fixture
def events_file(tmp_path):
    path = tmp_path / "events.json"
    payload = [
        {"id": "h", "title": "Holiday", "start": "2026-02-12", "end": "2026-02-13", "allDay": True},
        {"id": "a", "title": "A", "start": "2026-02-12T10:00:00-05:00", "end": "2026-02-12T11:00:00-05:00"},
        {"id": "b", "title": "B", "start": "2026-02-12T10:00:00-05:00", "end": "2026-02-12T11:30:00-05:00"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_layout_command(host_eastern, events_file, capsys):
    assert cli.main(["layout", str(events_file)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["bounds"] == {"startHour": 10, "endHour": 12}
    assert [event["id"] for event in output["allDay"]] == ["h"]
    assert [(block["column"], block["totalColumns"]) for block in output["blocks"]] == [(0, 2), (1, 2)]
    assert output["blocks"][1]["heightPx"] == 60


def test_bounds_command(host_eastern, events_file, capsys):
    assert cli.main(["bounds", str(events_file)]) == 0
    assert json.loads(capsys.readouterr().out) == {"startHour": 10, "endHour": 12}


def test_tools_command(capsys):
    assert cli.main(["tools"]) == 0
    names = [tool["function"]["name"] for tool in json.loads(capsys.readouterr().out)]
    assert "timeline_layout" in names


def test_bad_input_exits_with_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"start": "yesterday-ish", "end": "later"}]), encoding="utf-8")
    assert cli.main(["bounds", str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_malformed_timezone_exits_with_error(events_file, capsys):
    assert cli.main(["bounds", str(events_file), "--timezone", "../x"]) == 2
    assert "error:" in capsys.readouterr().err
