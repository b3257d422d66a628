#!/usr/bin/env python3
"""
Regex heuristics for the leader's distance on a timing page.

Rules run in fixed priority; the first rule with any candidate wins and the
largest candidate of that rule is taken (the leader is presumed to be the
furthest-progressed number on the page):

1. "<number> km"
2. "<number> m", converted to km
3. JSON-ish field: "distance" / "leaderDistance" / "leader_distance"
4. checkpoint labels such as "Km 45"
"""

import logging
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional, Pattern

from ..leader_data import LeaderData, parse_clock

logger = logging.getLogger(__name__)

KM_RE = re.compile(r"(?<![\d.,])(\d{1,3}(?:[.,]\d+)?)\s?km\b", re.IGNORECASE)
METERS_RE = re.compile(r"(?<![\d.,])(\d{1,7})\s?m\b", re.IGNORECASE)
JSON_DISTANCE_RE = re.compile(
    r"[\"'](?:distance|leaderDistance|leader_distance)[\"']\s*[:=]\s*[\"']?(\d+(?:[.,]\d+)?)",
    re.IGNORECASE,
)
CHECKPOINT_RE = re.compile(r"\bkm\s*[:.]?\s*(\d{1,3}(?:[.,]\d+)?)(?![\d])", re.IGNORECASE)
CLOCK_RE = re.compile(r"(?<![\d:])(\d{1,2}:\d{2}:\d{2})(?![\d:])")

# How far after a distance match to look for the leader's split time
TIME_WINDOW_CHARS = 400


@dataclass
class Candidate:
    rule: str
    distance_km: float
    end: int


def parse_number(raw: str) -> Optional[float]:
    """Parse "12.5", "12,5" or "1,234.5"; None when it is not a number."""
    if not raw or not raw.strip():
        return None
    raw = raw.strip()
    if "," in raw and "." not in raw:
        raw = raw.replace(",", ".")
    else:
        raw = raw.replace(",", "")
    try:
        return float(raw)
    except ValueError:
        return None


def _collect(rule: str, pattern: Pattern, content: str, divisor: float = 1.0) -> List[Candidate]:
    out = []
    for m in pattern.finditer(content):
        value = parse_number(m.group(1))
        if value is None:
            continue
        out.append(Candidate(rule, value / divisor, m.end()))
    return out


def _meters(content: str) -> List[Candidate]:
    return [c for c in _collect("meters", METERS_RE, content, divisor=1000.0) if c.distance_km >= 0.001]


RULES = (
    ("km", lambda content: _collect("km", KM_RE, content)),
    ("meters", _meters),
    ("json", lambda content: _collect("json", JSON_DISTANCE_RE, content)),
    ("checkpoint", lambda content: _collect("checkpoint", CHECKPOINT_RE, content)),
)


def find_distance_candidate(content: str, max_distance_km: Optional[float] = None) -> Optional[Candidate]:
    """Best candidate of the highest-priority rule that has one."""
    if not content or not content.strip():
        return None
    for rule, collect in RULES:
        candidates = collect(content)
        if max_distance_km is not None:
            candidates = [c for c in candidates if c.distance_km <= max_distance_km]
        if candidates:
            best = max(candidates, key=lambda c: c.distance_km)
            logger.debug(f"Heuristic '{rule}' matched {len(candidates)} candidates, best {best.distance_km} km")
            return best
    return None


def find_elapsed_after(content: str, position: int) -> Optional[timedelta]:
    m = CLOCK_RE.search(content, position, position + TIME_WINDOW_CHARS)
    return parse_clock(m.group(1)) if m else None


def parse_leader_distance(content: str, max_distance_km: Optional[float] = None) -> Optional[float]:
    candidate = find_distance_candidate(content, max_distance_km)
    return candidate.distance_km if candidate else None


def extract_with_heuristics(content: str, max_distance_km: Optional[float] = None) -> Optional[LeaderData]:
    candidate = find_distance_candidate(content, max_distance_km)
    if candidate is None:
        return None
    elapsed = find_elapsed_after(content, candidate.end)
    return LeaderData(distance_km=candidate.distance_km, elapsed_time=elapsed)
