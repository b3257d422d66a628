"""Tests for the required-pace heuristic."""

import math
from datetime import timedelta

import pytest

from leaderpace_core.pace import (
    DEFAULT_PACE_MIN_PER_KM,
    derive_pace,
    resolve_self_elapsed_minutes,
    target_finish_minutes,
)


class TestTargetFinish:
    def test_extrapolated(self):
        # 60 km in 3 h -> 270 min finish -> 405 min target
        assert target_finish_minutes(90, 60, timedelta(minutes=180)) == pytest.approx(405)

    def test_leader_finished(self):
        assert target_finish_minutes(90, 90, timedelta(hours=4)) == pytest.approx(360)

    def test_no_leader_time(self):
        assert target_finish_minutes(90, 30, None) == pytest.approx(405)

    def test_leader_at_start(self):
        assert math.isinf(target_finish_minutes(90, 0, timedelta(minutes=1)))


class TestDerivePace:
    def test_mid_race(self):
        assert derive_pace(90, 60, timedelta(minutes=180), 30, 150) == pytest.approx(4.25)

    def test_leader_finished(self):
        assert derive_pace(90, 90, timedelta(hours=4), 45, 200) == pytest.approx(160 / 45)

    def test_runner_at_finish(self):
        assert derive_pace(90, 60, timedelta(minutes=180), 90, 400) == 0
        assert derive_pace(90, 60, timedelta(minutes=180), 95, 400) == 0

    def test_missing_leader_time_uses_estimate(self):
        assert derive_pace(90, 30, None, 30, 150) == pytest.approx(4.25)

    def test_degenerate_falls_back_to_own_pace(self):
        assert derive_pace(90, 0, timedelta(0), 30, 120) == pytest.approx(4.0)

    def test_target_passed_falls_back_to_own_pace(self):
        assert derive_pace(90, 60, timedelta(minutes=180), 30, 500) == pytest.approx(500 / 30)

    def test_default_pace_when_nothing_usable(self):
        assert derive_pace(90, 0, timedelta(minutes=10), 0, 0) == DEFAULT_PACE_MIN_PER_KM

    def test_result_is_finite_and_positive(self):
        pace = derive_pace(42, 0.01, timedelta(seconds=1), 1, 3)
        assert math.isfinite(pace)
        assert pace > 0


class TestResolveSelfElapsed:
    def test_given_minutes(self):
        assert resolve_self_elapsed_minutes(30, 150) == 150

    def test_from_speed(self):
        # 5 m/s -> 3:20 min/km
        assert resolve_self_elapsed_minutes(30, None, 5.0) == pytest.approx(100)

    def test_default_pace(self):
        assert resolve_self_elapsed_minutes(30) == pytest.approx(150)
