import json

import pytest

from kon.instrumentation import DebugFrame, Instrumentor, InstrumentorMeasure
from kon.strings import ShortString


def fake_clock(*values):
    return iter(values).__next__


def test_empty_trace_is_valid_json(tmp_path):
    path = tmp_path / "trace.json"
    inst = Instrumentor(clock=fake_clock(0))
    inst.open_file(path)
    inst.close_file()
    text = path.read_text()
    assert text.startswith('{"otherData": {},"traceEvents":[')
    assert json.loads(text) == {"otherData": {}, "traceEvents": []}


def test_measure_writes_event(tmp_path):
    path = tmp_path / "trace.json"
    inst = Instrumentor(clock=fake_clock(0, 10_000, 35_000))
    inst.open_file(path)
    with InstrumentorMeasure(inst, ShortString("update"), 3):
        pass
    inst.close_file()
    events = json.loads(path.read_text())["traceEvents"]
    assert len(events) == 1
    event = events[0]
    assert event["name"] == "update"
    assert event["cat"] == "function"
    assert event["ph"] == "X"
    assert event["pid"] == 0
    assert event["tid"] == 3
    assert event["dur"] == (35_000 - 10_000) // 1000
    assert event["ts"] == 10_000 // 1000


def test_multiple_frames_are_comma_separated(tmp_path):
    path = tmp_path / "trace.json"
    with Instrumentor(clock=fake_clock(0)) as inst:
        inst.open_file(path)
        for name in ["a", "b", "c"]:
            inst.write_debug_frame(DebugFrame(1, 0, 0, name))
    assert not inst.is_open
    events = json.loads(path.read_text())["traceEvents"]
    assert [e["name"] for e in events] == ["a", "b", "c"]


def test_writing_without_file_raises():
    inst = Instrumentor()
    with pytest.raises(RuntimeError):
        inst.write_debug_frame(DebugFrame(0, 0, 0, "x"))
    with pytest.raises(RuntimeError):
        inst.close_file()


def test_name_with_quote_stays_valid(tmp_path):
    path = tmp_path / "trace.json"
    inst = Instrumentor(clock=fake_clock(0))
    inst.open_file(path)
    inst.write_debug_frame(DebugFrame(0, 0, 0, 'say "hi"'))
    inst.close_file()
    events = json.loads(path.read_text())["traceEvents"]
    assert events[0]["name"] == 'say "hi"'