"""Tests for consumption classification and the drain system."""
from __future__ import annotations

from dataclasses import dataclass

import pytest
from harvest import Clock, Engine
from harvest_resource import Consumption, DrainRates, Gauge, classify, make_drain_system

RATES = DrainRates(harvesting=11.45, driving=3.3, idle=0.7)


@dataclass
class Rig:
    battery: Gauge
    level: Consumption | None = Consumption.IDLE


def _engine(rig: Rig, ratio: float = 60.0) -> Engine:
    # ratio 60 makes one real second one simulated minute
    engine = Engine(rig, Clock(ratio=ratio, max_dt=1.0))
    engine.add_system(make_drain_system(RATES, lambda s: s.battery, lambda s: s.level))
    return engine


class TestClassify:
    def test_priority(self) -> None:
        assert classify(True, True) is Consumption.HARVESTING
        assert classify(True, False) is Consumption.HARVESTING
        assert classify(False, True) is Consumption.DRIVING
        assert classify(False, False) is Consumption.IDLE

    def test_labels(self) -> None:
        assert Consumption.HARVESTING.value == "high"
        assert Consumption.DRIVING.value == "medium"
        assert Consumption.IDLE.value == "low"


class TestDrainRates:
    def test_rate_lookup(self) -> None:
        assert RATES.rate(Consumption.HARVESTING) == 11.45
        assert RATES.rate(Consumption.DRIVING) == 3.3
        assert RATES.rate(Consumption.IDLE) == 0.7

    def test_negative_rate_raises(self) -> None:
        with pytest.raises(ValueError, match="idle rate"):
            DrainRates(harvesting=1.0, driving=1.0, idle=-0.1)


class TestDrainSystem:
    @pytest.mark.parametrize("level,expected", [
        (Consumption.HARVESTING, 210.0 - 11.45),
        (Consumption.DRIVING, 210.0 - 3.3),
        (Consumption.IDLE, 210.0 - 0.7),
    ])
    def test_drains_per_sim_minute(self, level, expected) -> None:
        rig = Rig(Gauge(capacity=210.0, current=210.0), level)
        _engine(rig).step(1.0)
        assert abs(rig.battery.current - expected) < 1e-9

    def test_none_skips_drain(self) -> None:
        rig = Rig(Gauge(capacity=210.0, current=100.0), None)
        _engine(rig).step(1.0)
        assert rig.battery.current == 100.0

    def test_never_below_zero(self) -> None:
        rig = Rig(Gauge(capacity=210.0, current=5.0), Consumption.HARVESTING)
        _engine(rig).run(3, 1.0)
        assert rig.battery.current == 0.0
