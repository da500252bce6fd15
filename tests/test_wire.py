"""Tests for advancement form encoding."""

from __future__ import annotations

from beanflow.session.wire import build_advance_form, encode_form, time_on_page


def test_encode_form_matches_encode_uri_component() -> None:
    body = encode_form({"a": "x y", "b": "é&=/?", "c": "-_.!~*'()", "d": 0})
    assert body == "a=x%20y&b=%C3%A9%26%3D%2F%3F&c=-_.!~*'()&d=0"


def test_encode_form_value_rendering() -> None:
    assert encode_form({"t": True, "f": False, "n": None}) == "t=true&f=false&n="


def test_time_on_page_is_compact_json() -> None:
    assert time_on_page(5) == '{"time":5}'


def test_build_advance_form_order_and_overrides() -> None:
    form = build_advance_form("42", "next!", "b1", {"barrier": "b2", "extra": "v", "it": 9})
    assert list(form) == ["event", "barrier", "id", "extra", "it", "more_ts"]
    assert form["barrier"] == "b2"
    assert form["it"] == 0
    assert form["more_ts"] == "ostentatious"


def test_build_advance_form_without_extra() -> None:
    form = build_advance_form("42", "close!", "abc123")
    assert encode_form(form) == "event=close!&barrier=abc123&id=42&it=0&more_ts=ostentatious"
