#!/usr/bin/env python3
"""
Pace request parsing.

Inputs come from the query string, a JSON body, or a plain-text body
("race, progress[, elapsed[, speed]]", comma or whitespace separated).
Query values win over body values.
"""

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import ValidationError
from .extraction.heuristics import parse_number
from .leader_data import parse_clock

logger = logging.getLogger(__name__)

FIELD_ALIASES = {
    "racename": "race_name",
    "race": "race_name",
    "progressinkm": "progress",
    "progress": "progress",
    "km": "progress",
    "elapsedtime": "elapsed",
    "elapsed": "elapsed",
    "time": "elapsed",
    "currentspeed": "speed",
    "speed": "speed",
    "dryrun": "dry_run",
}
POSITIONAL_FIELDS = ("race_name", "progress", "elapsed", "speed")

MISSING_FIELDS_MESSAGE = (
    "Provide both race name and progress in km (query: ?raceName=..&progressInKm=.. "
    "or JSON body { \"raceName\":.., \"progressInKm\":.. })."
)


@dataclass
class PaceRequest:
    race_name: str
    progress_km: float
    elapsed_minutes: Optional[float] = None
    speed_mps: Optional[float] = None
    dry_run: bool = False


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value).strip().strip('"')
    return text or None


def _finite_number(text: Optional[str]) -> Optional[float]:
    """parse_number, with "nan" and "inf" treated as not a number."""
    value = parse_number(text)
    if value is None or not math.isfinite(value):
        return None
    return value


def _is_true(value: Optional[str]) -> bool:
    return bool(value) and value.lower() in ("true", "1", "yes")


def fields_from_mapping(values: Mapping[str, Any]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for key, value in values.items():
        field = FIELD_ALIASES.get(str(key).strip().lower())
        text = _as_text(value)
        if field and text is not None and field not in out:
            out[field] = text
    return out


def fields_from_body(body: Optional[str]) -> Dict[str, str]:
    if not body or not body.strip():
        return {}
    body = body.strip()
    if body.startswith("{"):
        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed JSON body")
            return {}
        return fields_from_mapping(data) if isinstance(data, dict) else {}

    parts = body.split(",") if "," in body else body.split()
    parts = [p.strip() for p in parts if p.strip()]
    if len(parts) < 2:
        return {}
    return dict(zip(POSITIONAL_FIELDS, parts))


def parse_elapsed_minutes(text: Optional[str]) -> Optional[float]:
    """Minutes as a number ("150.5") or a clock value ("2:30:30", "45:30")."""
    if text is None:
        return None
    if ":" in text:
        clock = parse_clock(text)
        if clock is None:
            raise ValidationError(f"Invalid elapsedTime value '{text}'. Use minutes (e.g. 150) or H:MM:SS.")
        return clock.total_seconds() / 60.0
    minutes = _finite_number(text)
    if minutes is None or minutes < 0:
        raise ValidationError(f"Invalid elapsedTime value '{text}'. Use minutes (e.g. 150) or H:MM:SS.")
    return minutes


def parse_pace_request(query: Optional[Mapping[str, Any]] = None, body: Optional[str] = None) -> PaceRequest:
    fields = fields_from_mapping(query or {})
    for key, value in fields_from_body(body).items():
        fields.setdefault(key, value)

    race_name = fields.get("race_name")
    progress_text = fields.get("progress")
    if not race_name or not progress_text:
        logger.warning(f"Race name or progress not provided. Race='{race_name}', Progress='{progress_text}'")
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    progress = _finite_number(progress_text)
    if progress is None or progress < 0:
        logger.warning(f"Failed to parse progress. Progress='{progress_text}'")
        raise ValidationError("Invalid progress value. Provide a numeric value (e.g. 42.5).")

    dry_run = _is_true(fields.get("dry_run"))
    elapsed = parse_elapsed_minutes(fields.get("elapsed"))

    speed = None
    if fields.get("speed") is not None:
        speed = _finite_number(fields["speed"])
        if speed is None or speed <= 0:
            raise ValidationError(f"Invalid currentSpeed value '{fields['speed']}'. Provide meters per second.")

    if elapsed is None and speed is None and not dry_run:
        raise ValidationError(
            "elapsedTime is required for live requests (minutes, or H:MM:SS); "
            "alternatively provide currentSpeed in m/s."
        )

    return PaceRequest(
        race_name=race_name,
        progress_km=progress,
        elapsed_minutes=elapsed,
        speed_mps=speed,
        dry_run=dry_run,
    )
