"""Tests for the Simulation facade: tick order, controls and snapshots."""
import pytest

from harvest_sim import (
    Controls,
    SimConfig,
    Simulation,
    SwapMode,
    TractorPhase,
    format_clock,
    format_minutes,
    toggle_header,
)

DT = 0.1
MIN_PER_TICK = DT * 4 / 60


def make_sim(**overrides):
    return Simulation(SimConfig(field_width_tiles=10, field_height_tiles=10, **overrides))


class TestClockMirroring:
    def test_step_advances_both_clocks(self):
        sim = make_sim()
        assert sim.step(DT)
        assert sim.state.tick == 1
        assert sim.state.real_time == pytest.approx(0.1)
        assert sim.state.sim_time == pytest.approx(0.4)

    def test_large_delta_clamped(self):
        sim = make_sim()
        sim.step(5.0)
        assert sim.state.real_time == pytest.approx(0.1)

    def test_run_counts_ticks(self):
        sim = make_sim()
        assert sim.run(7, DT) == 7
        assert sim.state.tick == 7


class TestBatteryDrain:
    def test_idle_rate(self):
        sim = make_sim()
        sim.step(DT)
        assert sim.state.battery.current == pytest.approx(210.0 - 0.7 * MIN_PER_TICK)
        assert sim.snapshot().consumption == "low"

    def test_driving_rate(self):
        sim = make_sim()
        sim.step(DT, Controls(throttle_forward=True))
        assert sim.state.battery.current == pytest.approx(210.0 - 3.3 * MIN_PER_TICK)
        assert sim.snapshot().consumption == "medium"

    def test_never_below_zero(self):
        sim = make_sim()
        sim.state.battery.current = 0.001
        sim.step(DT, Controls(throttle_forward=True))
        assert sim.state.battery.current == 0.0


class TestDriving:
    def test_forward_moves_along_heading(self):
        sim = make_sim()
        x0, y0 = sim.state.combine.position
        sim.step(DT, Controls(throttle_forward=True))
        x1, y1 = sim.state.combine.position
        assert x1 == pytest.approx(x0)
        assert y0 - y1 == pytest.approx(3.4)

    def test_reverse_is_slower(self):
        sim = make_sim()
        y0 = sim.state.combine.position[1]
        sim.step(DT, Controls(throttle_backward=True))
        assert sim.state.combine.position[1] - y0 == pytest.approx(3.4 * 0.6)

    def test_opposite_throttles_cancel(self):
        sim = make_sim()
        pos = sim.state.combine.position
        sim.step(DT, Controls(throttle_forward=True, throttle_backward=True))
        assert sim.state.combine.position == pos

    def test_slower_while_tractor_unloads(self):
        sim = make_sim()
        sim.state.tank.current = 5.0
        sim.state.tractor.fsm.force(TractorPhase.UNLOADING.value)
        y0 = sim.state.combine.position[1]
        sim.step(DT, Controls(throttle_forward=True))
        assert y0 - sim.state.combine.position[1] == pytest.approx(3.4 * 0.6)

    def test_position_clamped_to_world(self):
        sim = make_sim(world_margin=10.0)
        for _ in range(200):
            sim.step(DT, Controls(throttle_backward=True))
        assert sim.state.combine.position[1] == pytest.approx(80.0 + 10.0)


class TestHeaderToggle:
    def test_toggle_on_and_off(self):
        sim = make_sim()
        sim.step(DT, Controls(toggle_header=True))
        assert sim.state.header_engaged
        sim.step(DT, Controls(toggle_header=True))
        assert not sim.state.header_engaged
        assert [e.data["engaged"] for e in sim.events.query(type="header")] == [True, False]

    def test_rejected_when_tank_full(self):
        sim = make_sim()
        sim.state.tank.current = sim.state.tank.capacity
        assert toggle_header(sim.state) is False
        assert not sim.state.header_engaged
        assert sim.events.last("intent_rejected").data["reason"] == "tank_full"


class TestTriggerOrdering:
    def test_one_process_per_tick(self):
        sim = make_sim()
        sim.state.battery.current = 50.0
        sim.step(DT, Controls(call_tractor=True, trigger_battery_swap=True))
        assert sim.state.tractor.phase is TractorPhase.APPROACHING
        assert not sim.state.swap.active
        assert sim.events.last("intent_rejected").data["reason"] == "process_started"

    def test_swap_allowed_when_tractor_call_fails(self):
        sim = make_sim()
        sim.state.battery.current = 50.0
        sim.state.tractor.cooldown.start(1.0)
        sim.step(DT, Controls(call_tractor=True, trigger_battery_swap=True))
        assert sim.state.tractor.phase is TractorPhase.IDLE
        assert sim.state.swap.active
        assert sim.state.swap.mode is SwapMode.INLINE

    def test_triggers_not_repeated_by_run(self):
        sim = make_sim()
        sim.run(3, DT, Controls(toggle_header=True))
        assert not sim.state.header_engaged


class TestSnapshot:
    def test_initial_snapshot(self):
        sim = make_sim()
        snap = sim.snapshot()
        assert snap.running
        assert snap.coverage == 0.0
        assert snap.total_tiles == 100
        assert snap.tank == 0.0
        assert snap.battery == 210.0
        assert snap.tractor_phase == "idle"
        assert snap.swap_active is False
        assert snap.swap_message is None
        assert snap.time_until_tank_full is None

    def test_time_until_tank_full_uses_last_rate(self):
        sim = make_sim()
        toggle_header(sim.state)
        sim.state.tank.current = 4.0
        assert sim.snapshot().time_until_tank_full == pytest.approx(9.0 / 0.9)

    def test_swap_fields(self):
        sim = make_sim()
        sim.state.battery.current = 50.0
        sim.step(DT, Controls(trigger_battery_swap=True))
        snap = sim.snapshot()
        assert snap.swap_active
        assert snap.swap_mode == "inline"
        assert snap.swap_remaining == pytest.approx(2.0 - MIN_PER_TICK)
        assert snap.carrier_position is not None


class TestReset:
    def test_reset_restores_start(self):
        sim = make_sim()
        sim.state.battery.current = 50.0
        sim.step(DT, Controls(call_tractor=True, toggle_header=True))
        for _ in range(30):
            sim.step(DT, Controls(throttle_forward=True))
        sim.reset()
        state = sim.state
        assert state.tick == 0
        assert state.field.harvested_count == 0
        assert state.battery.current == 210.0
        assert state.tractor.phase is TractorPhase.IDLE
        assert state.combine.position == sim.config.start_position
        assert not state.header_engaged
        assert len(sim.events) == 0
        assert sim.running
        assert sim.step(DT)
        assert sim.state.tick == 1


class TestFormatting:
    def test_format_clock(self):
        assert format_clock(0) == "00:00"
        assert format_clock(75.9) == "01:15"
        assert format_clock(3600) == "60:00"

    def test_format_minutes(self):
        assert format_minutes(1.5) == "01:30"
