"""Tests for display text helpers."""

import pytest

from backend.planner.utils.formatting import bus_type_text, congestion_text, format_remaining_time


@pytest.mark.parametrize(("seconds", "expected"), [(0, "0초"), (59, "59초"), (60, "1분"), (119, "1분"), (600, "10분")])
def test_format_remaining_time(seconds: int, expected: str) -> None:
    assert format_remaining_time(seconds) == expected


def test_congestion_text() -> None:
    assert [congestion_text(level) for level in ("low", "medium", "high")] == ["여유", "보통", "혼잡"]


def test_bus_type_text() -> None:
    assert [bus_type_text(kind) for kind in ("express", "regular", "local")] == ["광역버스", "간선버스", "지선버스"]
