"""Tests for JSON persistence."""

from __future__ import annotations

import json
from datetime import date

import pytest

from brestagenda.models import Event
from brestagenda.store import EventStore


def test_round_trip(tmp_path):
    events = [
        Event(
            title="Fête de la musique",
            start=date(2026, 6, 21),
            end=date(2026, 6, 22),
            description="Partout en ville",
            category="Musique",
            link="https://www.brest.fr/evt/1.html",
        ),
        Event(title="Marché", start=date(2026, 6, 1)),
    ]
    store = EventStore(tmp_path / "events.json")
    store.save_events(events)

    assert store.load_events() == events


def test_file_format(tmp_path):
    path = tmp_path / "events.json"
    EventStore(path).save_events([Event(title="Marché", start=date(2026, 6, 1), category="Été")])

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw == [
        {
            "Title": "Marché",
            "Desc": "",
            "Category": "Été",
            "Link": "",
            "Start": "2026-06-01",
            "End": None,
        }
    ]


def test_save_overwrites(tmp_path):
    store = EventStore(tmp_path / "events.json")
    store.save_events([Event(title="a", start=date(2026, 1, 1))])
    store.save_events([Event(title="b", start=date(2026, 1, 2))])
    assert [e.title for e in store.load_events()] == ["b"]


def test_loads_timestamp_export(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps([
        {
            "Title": "Expo",
            "Desc": "",
            "Category": "",
            "Link": "https://www.brest.fr/expo.html",
            "Start": "2026-03-01T00:00:00Z",
            "End": "2026-04-30T00:00:00Z",
        },
        {
            "Title": "Concert",
            "Desc": "",
            "Category": "",
            "Link": "",
            "Start": "2026-03-05T00:00:00Z",
            "End": "0001-01-01T00:00:00Z",
        },
    ]), encoding="utf-8")

    expo, concert = EventStore(path).load_events()
    assert expo.start == date(2026, 3, 1)
    assert expo.end == date(2026, 4, 30)
    assert concert.end is None


@pytest.mark.parametrize("item", [
    {"Title": "x", "Start": "2026-03-05"},
    {"Title": "x", "Start": "2026-03-05", "End": ""},
    {"Title": "x", "Start": "2026-03-05", "End": None},
])
def test_absent_end_variants(item):
    assert Event.from_dict(item).end is None


def test_missing_start_is_rejected():
    with pytest.raises(ValueError):
        Event.from_dict({"Title": "x", "End": "2026-03-05"})


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        EventStore(tmp_path / "missing.json").load_events()


def test_non_array_is_rejected(tmp_path):
    path = tmp_path / "events.json"
    path.write_text('{"Title": "x"}', encoding="utf-8")
    with pytest.raises(ValueError, match="JSON array"):
        EventStore(path).load_events()


def test_null_text_fields_load_as_empty():
    event = Event.from_dict(
        {"Title": None, "Desc": None, "Category": None, "Link": None, "Start": "2026-03-05"}
    )
    assert (event.title, event.description, event.category, event.link) == ("", "", "", "")


@pytest.mark.parametrize("item, message", [
    ({"Title": "x", "Start": 20260101}, "Start"),
    ({"Title": "x", "Start": "2026-03-05", "End": 20260106}, "End"),
    ({"Title": 42, "Start": "2026-03-05"}, "Title"),
    ({"Title": "x", "Start": "2026-03-05", "Link": ["/a"]}, "Link"),
])
def test_wrongly_typed_values_are_rejected(item, message):
    with pytest.raises(ValueError, match=message):
        Event.from_dict(item)


@pytest.mark.parametrize("payload", [["x"], [{"Title": "x", "Start": "2026-03-05"}, 3]])
def test_non_object_entries_are_rejected(tmp_path, payload):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError, match="is not an event object"):
        EventStore(path).load_events()


def test_bad_entry_error_names_file_and_index(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps([
        {"Title": "ok", "Start": "2026-03-05"},
        {"Title": "bad", "Start": "05/03/2026"},
    ]), encoding="utf-8")
    with pytest.raises(ValueError, match=r"events\.json: entry 1"):
        EventStore(path).load_events()
