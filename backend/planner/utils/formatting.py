"""Display text helpers for real-time transit info."""

from typing import Literal

CONGESTION_TEXT = {
    "low": "여유",
    "medium": "보통",
    "high": "혼잡",
}

BUS_TYPE_TEXT = {
    "express": "광역버스",
    "regular": "간선버스",
    "local": "지선버스",
}


def format_remaining_time(seconds: int) -> str:
    """Seconds under a minute, whole minutes otherwise."""
    if seconds < 60:
        return f"{seconds}초"
    return f"{seconds // 60}분"


def congestion_text(congestion: Literal["low", "medium", "high"]) -> str:
    return CONGESTION_TEXT[congestion]


def bus_type_text(bus_type: Literal["express", "regular", "local"]) -> str:
    return BUS_TYPE_TEXT[bus_type]
