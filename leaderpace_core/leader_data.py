#!/usr/bin/env python3
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

_CLOCK_RE = re.compile(r"^\s*(?:(\d{1,3}):)?(\d{1,2}):(\d{2}(?:[.,]\d+)?)\s*$")


@dataclass(frozen=True)
class LeaderData:
    """Leader progress scraped from a timing page."""
    distance_km: float
    elapsed_time: Optional[timedelta] = None

    def __post_init__(self):
        if self.distance_km < 0:
            raise ValueError(f"distance_km must be >= 0, got {self.distance_km}")

    def to_dict(self) -> dict:
        return {
            "distanceKm": round(self.distance_km, 2),
            "elapsedTime": format_duration(self.elapsed_time) if self.elapsed_time is not None else None,
        }


def parse_clock(text: str) -> Optional[timedelta]:
    """Parse "H:MM:SS" or "MM:SS" into a timedelta, None when it is not a clock value."""
    if not text:
        return None
    m = _CLOCK_RE.match(text)
    if not m:
        return None
    hours = int(m.group(1)) if m.group(1) else 0
    minutes = int(m.group(2))
    seconds = float(m.group(3).replace(",", "."))
    if (m.group(1) and minutes >= 60) or seconds >= 60:
        return None
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def format_duration(value: timedelta) -> str:
    total = int(round(value.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"
