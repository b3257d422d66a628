"""Simulated leader for dry runs: no network, deterministic for a given clock."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .leader_data import LeaderData

logger = logging.getLogger(__name__)

# The simulated race restarts on every :00 and :30
CYCLE_MINUTES = 30
SIMULATED_LEADER_PACE_MIN_PER_KM = 3.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def simulate_leader(now: Optional[datetime] = None) -> LeaderData:
    now = now or _utcnow()
    race_minutes = now.minute % CYCLE_MINUTES + now.second / 60.0
    distance_km = race_minutes / SIMULATED_LEADER_PACE_MIN_PER_KM
    logger.info(
        f"DRY RUN: {now:%H:%M:%S}, {race_minutes:.2f} min since last start, "
        f"leader at {distance_km:.2f} km"
    )
    return LeaderData(distance_km=distance_km, elapsed_time=timedelta(minutes=race_minutes))


class DryRunLeaderSource:
    """Clock-injected wrapper so tests can pin the simulated race time."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock

    def leader(self) -> LeaderData:
        return simulate_leader(self._clock())
