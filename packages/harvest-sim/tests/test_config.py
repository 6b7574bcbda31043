"""Tests for harvest_sim.config module."""
import math

import pytest

from harvest_sim import SimConfig


class TestSimConfigDefaults:
    def test_field_extent(self):
        cfg = SimConfig()
        assert cfg.field_width == 560.0
        assert cfg.field_height == 560.0
        assert cfg.total_tiles == 4900

    def test_ton_per_tile(self):
        assert SimConfig().ton_per_tile == pytest.approx(9e-8)

    def test_start_and_zone(self):
        cfg = SimConfig()
        assert cfg.start_position == (280.0, 680.0)
        assert cfg.swap_zone_center == (480.0, 680.0)
        assert cfg.tractor_home == (-120.0, 280.0)
        assert cfg.tractor_exit == (680.0, 280.0)

    def test_min_tractor_gap(self):
        assert SimConfig().min_tractor_gap == 132.0
        assert SimConfig(tractor_offset=30.0).min_tractor_gap == 40.0

    def test_config_is_frozen(self):
        cfg = SimConfig()
        with pytest.raises(AttributeError):
            cfg.tank_capacity = 1.0


class TestDerivedParams:
    def test_drive_params(self):
        cfg = SimConfig(world_margin=100.0)
        params = cfg.drive_params()
        assert params.turn_rate == pytest.approx(math.radians(120.0))
        assert params.bounds == (-100.0, -100.0, 660.0, 660.0)

    def test_header_spec(self):
        header = SimConfig().header_spec()
        assert header.width_tiles == 14.0
        assert header.depth_tiles == 3.5
        assert header.standoff == 32.0
        assert header.margin_tiles == 0.4

    def test_drain_rates(self):
        rates = SimConfig().drain_rates()
        assert (rates.harvesting, rates.driving, rates.idle) == (11.45, 3.3, 0.7)


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"field_width_tiles": 0},
            {"tile_size": 0.0},
            {"sim_ratio": -1.0},
            {"real_time_limit": 0.0},
            {"tank_capacity": 0.0},
            {"swap_threshold": 1.5},
            {"swap_duration_min": 0.0},
            {"tractor_cooldown_min": -1.0},
            {"swap_messages": ()},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            SimConfig(**kwargs)

    def test_zero_cooldown_allowed(self):
        assert SimConfig(tractor_cooldown_min=0.0).tractor_cooldown_min == 0.0
