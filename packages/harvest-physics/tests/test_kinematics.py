"""Tests for steering, driving, bounds and turn ease."""
from __future__ import annotations

import math

import pytest
from harvest_physics import CombineBody, DriveParams, clamp_to_bounds, drive, steer, update_turn_ease


def _params(**overrides) -> DriveParams:
    base = dict(
        speed=34.0,
        reverse_factor=0.6,
        turn_rate=math.radians(120),
        ease_duration=2.0,
        ease_multiplier=0.4,
        ease_threshold=math.pi * 0.9,
        bounds=(-400.0, -400.0, 960.0, 960.0),
    )
    base.update(overrides)
    return DriveParams(**base)


class TestDriveParams:
    def test_negative_speed_raises(self) -> None:
        with pytest.raises(ValueError, match="speed"):
            _params(speed=-1.0)

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ValueError, match="bounds"):
            _params(bounds=(10.0, 0.0, 0.0, 10.0))


class TestCombineBody:
    def test_heading_normalized(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=3 * math.pi)
        assert -math.pi < body.heading <= math.pi

    def test_defaults_follow_pose(self) -> None:
        body = CombineBody(position=(1.0, 2.0), heading=0.5)
        assert body.prev_position == (1.0, 2.0)
        assert body.last_heading == 0.5
        assert not body.turn_ease.running


class TestSteer:
    def test_right_turn_increases_heading(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=0.0)
        steer(body, _params(), 1, 0.1)
        assert math.isclose(body.heading, math.radians(12))

    def test_no_steer_is_noop(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=0.3)
        steer(body, _params(), 0, 0.1)
        assert body.heading == 0.3

    def test_ease_reduces_rate(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=0.0)
        body.turn_ease.start(2.0)
        steer(body, _params(), -1, 0.1)
        assert math.isclose(body.heading, -math.radians(12) * 0.4)


class TestDrive:
    def test_forward_moves_along_heading(self) -> None:
        body = CombineBody(position=(100.0, 100.0), heading=0.0)
        assert drive(body, _params(), 1, 0.1) is True
        assert math.isclose(body.position[0], 103.4)
        assert math.isclose(body.position[1], 100.0)

    def test_reverse_is_slower(self) -> None:
        body = CombineBody(position=(100.0, 100.0), heading=0.0)
        drive(body, _params(), -1, 0.1)
        assert math.isclose(body.position[0], 100.0 - 3.4 * 0.6)

    def test_speed_multiplier(self) -> None:
        body = CombineBody(position=(100.0, 100.0), heading=math.pi / 2)
        drive(body, _params(), 1, 0.1, speed_multiplier=0.5)
        assert math.isclose(body.position[1], 101.7)

    def test_zero_throttle(self) -> None:
        body = CombineBody(position=(5.0, 5.0), heading=0.0)
        assert drive(body, _params(), 0, 0.1) is False
        assert body.position == (5.0, 5.0)

    def test_clamped_to_bounds(self) -> None:
        body = CombineBody(position=(959.0, 0.0), heading=0.0)
        drive(body, _params(), 1, 0.1)
        assert body.position[0] == 960.0

    def test_clamp_to_bounds_helper(self) -> None:
        assert clamp_to_bounds((-500.0, 2000.0), (-400.0, -400.0, 960.0, 960.0)) == (-400.0, 960.0)


class TestTurnEase:
    def test_large_jump_starts_ease(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=0.0)
        body.heading = math.pi * 0.95
        update_turn_ease(body, _params(), 0.05)
        assert body.turn_ease.running
        assert body.turn_ease.remaining == 2.0
        assert body.last_heading == body.heading

    def test_small_change_counts_down(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=0.0)
        body.turn_ease.start(2.0)
        body.heading = 0.1
        update_turn_ease(body, _params(), 0.5)
        assert math.isclose(body.turn_ease.remaining, 1.5)

    def test_wraparound_is_not_a_jump(self) -> None:
        body = CombineBody(position=(0.0, 0.0), heading=math.pi - 0.01)
        body.heading = -math.pi + 0.01
        update_turn_ease(body, _params(), 0.05)
        assert not body.turn_ease.running
