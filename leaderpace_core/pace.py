#!/usr/bin/env python3
"""
Required-pace heuristic.

Target finish = 1.5 x the leader's (actual or extrapolated) finish time. The
runner's required pace is whatever covers the remaining distance by then.
"""

import logging
import math
from datetime import timedelta
from typing import Optional

from .leader_data import format_duration

logger = logging.getLogger(__name__)

TARGET_FACTOR = 1.5
ESTIMATED_LEADER_PACE_MIN_PER_KM = 3.0
DEFAULT_PACE_MIN_PER_KM = 5.0


def _usable(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def target_finish_minutes(race_total_km: float, leader_distance_km: float,
                          leader_elapsed: Optional[timedelta]) -> float:
    if leader_elapsed is None:
        estimate = race_total_km * ESTIMATED_LEADER_PACE_MIN_PER_KM * TARGET_FACTOR
        logger.warning(f"No leader time data, using estimated target: {estimate:.1f} min")
        return estimate

    leader_minutes = leader_elapsed.total_seconds() / 60.0
    if leader_distance_km >= race_total_km:
        logger.info(f"Leader finished in {format_duration(leader_elapsed)}")
        return leader_minutes * TARGET_FACTOR

    if leader_distance_km <= 0:
        return math.inf

    leader_pace = leader_minutes / leader_distance_km
    leader_finish = race_total_km * leader_pace
    logger.info(
        f"Leader at {leader_distance_km} km in {format_duration(leader_elapsed)} "
        f"(pace: {leader_pace:.2f} min/km), estimated finish {leader_finish:.1f} min"
    )
    return leader_finish * TARGET_FACTOR


def derive_pace(race_total_km: float, leader_distance_km: float, leader_elapsed: Optional[timedelta],
                self_progress_km: float, self_elapsed_minutes: float) -> float:
    """
    Pace in min/km the runner must hold to finish within TARGET_FACTOR of the leader.

    Returns 0 once the runner is at or past the finish. Degenerate results
    (non-positive, NaN, infinite) fall back to the runner's own mean pace, or
    DEFAULT_PACE_MIN_PER_KM when that is unusable too.
    """
    remaining_km = race_total_km - self_progress_km
    if remaining_km <= 0:
        logger.warning("Already at or past finish line")
        return 0.0

    target = target_finish_minutes(race_total_km, leader_distance_km, leader_elapsed)
    time_left = max(0.0, target - self_elapsed_minutes)
    pace = time_left / remaining_km

    if not _usable(pace):
        own_pace = self_elapsed_minutes / self_progress_km if self_progress_km > 0 else None
        fallback = own_pace if _usable(own_pace) else DEFAULT_PACE_MIN_PER_KM
        logger.info(f"Required pace {pace} unusable, falling back to {fallback:.2f} min/km")
        pace = fallback

    logger.info(
        f"Progress: {self_progress_km} km / {race_total_km} km. Elapsed: {self_elapsed_minutes:.1f} min. "
        f"Required pace: {pace:.2f} min/km"
    )
    return pace


def resolve_self_elapsed_minutes(progress_km: float, elapsed_minutes: Optional[float] = None,
                                 speed_mps: Optional[float] = None) -> float:
    """Runner's elapsed time: given directly, estimated from speed (m/s), or assumed at 5:00 min/km."""
    if elapsed_minutes is not None:
        return elapsed_minutes
    if _usable(speed_mps):
        pace = 1000.0 / (speed_mps * 60.0)
        logger.info(f"Estimated elapsed time from speed {speed_mps} m/s ({pace:.2f} min/km)")
        return progress_km * pace
    logger.warning(f"No elapsed time or speed provided, assuming {DEFAULT_PACE_MIN_PER_KM:.0f}:00 min/km")
    return progress_km * DEFAULT_PACE_MIN_PER_KM
