"""Per-tick systems, registered in order by ``build_systems``."""
from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_field import NO_SWEEP, sweep
from harvest_physics import drive, steer, update_turn_ease
from harvest_resource import GaugeHelper, classify, make_drain_system

from harvest_sim.battery_swap import SwapMode, carrier_system, low_battery_system, make_swap_system
from harvest_sim.snapshot import EndReason, RunSummary
from harvest_sim.state import TickFlags
from harvest_sim.tractor import TractorPhase, harvest_blocked, make_tractor_system

if TYPE_CHECKING:
    from harvest import System, TickContext

    from harvest_sim.config import SimConfig
    from harvest_sim.state import SimState


def clock_system(state: SimState, ctx: TickContext) -> None:
    """Mirror the clock into the state and clear last tick's flags."""
    state.tick = ctx.tick_number
    state.real_time = ctx.elapsed
    state.sim_time = ctx.sim_elapsed
    state.flags = TickFlags()


def motion_system(state: SimState, ctx: TickContext) -> None:
    flags = state.flags
    cfg = state.config
    flags.movement_locked = state.swap.locks_movement
    multiplier = 1.0
    if state.swap.active and state.swap.mode is SwapMode.INLINE:
        multiplier *= cfg.inline_swap_speed
    if state.tractor.phase is TractorPhase.UNLOADING:
        multiplier *= cfg.tractor_alongside_speed
    flags.speed_multiplier = multiplier


def force_header_off(state: SimState) -> None:
    state.header_engaged = False
    state.emit("header", engaged=False, forced=True)
    state.announce("Tank full. Harvesting paused, call the tractor.")


def drive_system(state: SimState, ctx: TickContext) -> None:
    """Steer, move, sweep the header over the tick's path, fill the tank."""
    flags = state.flags
    state.last_sweep = NO_SWEEP
    if flags.movement_locked:
        state.consumption = classify(False, False)
        return

    cfg = state.config
    body = state.combine
    controls = state.controls
    body.prev_position = body.position
    steer(body, state.drive, controls.steer, ctx.dt)
    flags.moving = drive(body, state.drive, controls.throttle, ctx.dt, flags.speed_multiplier)

    if state.header_engaged and not harvest_blocked(state):
        result = sweep(
            state.field,
            body.prev_position,
            body.position,
            body.heading,
            state.header_spec,
            cfg.tile_size,
            cfg.ton_per_tile,
        )
        state.last_sweep = result
        if result.harvested_samples > 0:
            flags.harvesting = True
            GaugeHelper.fill(state.tank, result.tons)
            if ctx.sim_minutes > 0:
                state.last_harvest_rate = result.tons / ctx.sim_minutes

    if state.header_engaged and harvest_blocked(state):
        force_header_off(state)

    state.consumption = classify(flags.harvesting, flags.moving)


def finish_run(state: SimState, reason: EndReason) -> RunSummary:
    state.header_engaged = False
    summary = RunSummary(
        reason=reason,
        real_time=state.real_time,
        sim_time=state.sim_time,
        coverage_percent=state.field.coverage_ratio() * 100.0,
        tractor_calls=state.counters.tractor_calls,
        unloads=state.counters.unloads,
        swaps=state.counters.swaps,
    )
    state.summary = summary
    state.emit("run_ended", reason=reason.value, coverage_percent=summary.coverage_percent)
    if reason is EndReason.FIELD_HARVESTED:
        state.announce("Field fully harvested.")
    else:
        state.announce("Time limit reached.")
    return summary


def end_system(state: SimState, ctx: TickContext) -> None:
    if state.field.complete:
        reason = EndReason.FIELD_HARVESTED
    elif ctx.elapsed >= state.config.real_time_limit:
        reason = EndReason.TIME_LIMIT
    else:
        return
    finish_run(state, reason)
    ctx.request_stop()


def turn_ease_system(state: SimState, ctx: TickContext) -> None:
    update_turn_ease(state.combine, state.drive, ctx.dt)


def build_systems(config: SimConfig) -> list[System]:
    """The tick, in execution order."""
    drain = make_drain_system(
        config.drain_rates(),
        lambda s: s.battery,
        lambda s: None if s.flags.swapping else s.consumption,
    )
    return [
        clock_system,
        make_swap_system(),
        motion_system,
        drive_system,
        drain,
        make_tractor_system(),
        carrier_system,
        low_battery_system,
        end_system,
        turn_ease_system,
    ]
