"""Battery swap process: stationary in the swap zone, or inline with a carrier."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from harvest_fsm import FSM, FSMGuards, make_fsm_system
from harvest_physics import vec
from harvest_resource import GaugeHelper
from harvest_schedule import Countdown

from harvest_sim.sides import Side

if TYPE_CHECKING:
    from harvest import TickContext

    from harvest_sim.state import SimState

OWNER = "carrier"
FULL_TOLERANCE = 0.01

INACTIVE = "inactive"
ACTIVE = "active"


class SwapMode(str, Enum):
    STATIONARY = "stationary"
    INLINE = "inline"


def _new_fsm() -> FSM:
    return FSM(state=INACTIVE, transitions={ACTIVE: [("swap_done", INACTIVE)]})


@dataclass
class BatterySwap:
    """One battery exchange at a time. ``timer`` runs in simulated minutes."""

    mode: SwapMode = SwapMode.STATIONARY
    carrier_side: Side | None = None
    fsm: FSM = field(default_factory=_new_fsm)
    timer: Countdown = field(default_factory=Countdown)

    @property
    def active(self) -> bool:
        return self.fsm.state == ACTIVE

    @property
    def locks_movement(self) -> bool:
        return self.active and self.mode is SwapMode.STATIONARY

    def stage(self, stages: int) -> int:
        """Index of the current stage out of ``stages`` equal slices."""
        if self.timer.duration <= 0:
            return 0
        stage_length = self.timer.duration / stages
        return min(stages - 1, math.floor(self.timer.elapsed / stage_length))


@dataclass(frozen=True)
class SwapRecord:
    """Snapshot taken when a swap starts."""

    id: int
    mode: SwapMode
    real_time: float
    sim_time: float
    position: vec.Vec2
    battery_percent: float
    tank_percent: float
    field_percent: float
    tractor_alongside: bool


def battery_low(state: SimState) -> bool:
    return GaugeHelper.ratio(state.battery) <= state.config.swap_threshold


def in_swap_zone(state: SimState, position: vec.Vec2 | None = None) -> bool:
    pos = position if position is not None else state.combine.position
    return vec.distance(pos, state.config.swap_zone_center) <= state.config.swap_zone_radius


def stage_message(state: SimState) -> str:
    messages = state.config.swap_messages
    return messages[state.swap.stage(len(messages))]


def carrier_anchor(state: SimState, side: Side) -> vec.Vec2:
    lateral = vec.right(state.combine.heading)
    return vec.add(state.combine.position, vec.scale(lateral, state.config.carrier_offset * side.sign))


def _start(state: SimState, mode: SwapMode) -> None:
    swap = state.swap
    swap.mode = mode
    swap.timer.start(state.config.swap_duration_min)
    swap.fsm.force(ACTIVE)
    if mode is SwapMode.INLINE:
        swap.carrier_side = state.sides.allocate(OWNER, Side.RIGHT)
        state.carrier_position = carrier_anchor(state, swap.carrier_side)
    elif state.header_engaged:
        state.header_engaged = False
        state.emit("header", engaged=False, forced=True)
    state.counters.swaps += 1
    record = SwapRecord(
        id=state.counters.swaps,
        mode=mode,
        real_time=state.real_time,
        sim_time=state.sim_time,
        position=state.combine.position,
        battery_percent=GaugeHelper.percent(state.battery),
        tank_percent=GaugeHelper.percent(state.tank),
        field_percent=state.field.coverage_ratio() * 100.0,
        tractor_alongside=state.tractor.alongside,
    )
    state.swap_log.append(record)
    state.emit("swap_started", id=record.id, mode=mode.value)
    state.announce(stage_message(state))


def trigger_battery_swap(state: SimState) -> bool:
    """Start an inline swap. Returns False if one is running or the pack is full."""
    if state.swap.active:
        return state.reject("swap_active", "Battery swap already in progress.")
    if GaugeHelper.is_full(state.battery, FULL_TOLERANCE):
        return state.reject("battery_full", "Battery already full.")
    _start(state, SwapMode.INLINE)
    return True


def check_low_battery(state: SimState) -> None:
    """Auto-start a stationary swap in the zone, or post a one-off prompt."""
    if state.swap.active or not battery_low(state):
        return
    if in_swap_zone(state):
        _start(state, SwapMode.STATIONARY)
    elif not state.low_battery_prompted:
        state.low_battery_prompted = True
        state.emit("low_battery", percent=GaugeHelper.percent(state.battery))
        state.announce("Battery low. Drive to the swap zone or request an inline swap.")


def _on_finished(state: SimState, ctx: TickContext, old: str, new: str) -> None:
    swap = state.swap
    mode = swap.mode
    GaugeHelper.refill(state.battery)
    state.low_battery_prompted = False
    state.sides.release(OWNER)
    swap.carrier_side = None
    swap.mode = SwapMode.STATIONARY
    swap.timer.clear()
    state.carrier_position = None
    state.emit("swap_finished", mode=mode.value)
    state.announce("Battery replaced. Ready to harvest.")


def make_swap_system():
    """Return the system that advances an active swap and finishes it."""
    guards = FSMGuards()
    guards.register("swap_done", lambda s: s.swap.timer.expired)
    finish = make_fsm_system(lambda s: s.swap.fsm, guards, _on_finished)

    def swap_system(state: SimState, ctx: TickContext) -> None:
        swap = state.swap
        if not swap.active:
            return
        state.flags.swapping = True
        before = swap.stage(len(state.config.swap_messages))
        swap.timer.advance(ctx.sim_minutes)
        stage = swap.stage(len(state.config.swap_messages))
        if stage != before:
            state.emit("swap_stage", stage=stage)
        finish(state, ctx)
        if swap.active:
            seconds = math.ceil(swap.timer.remaining * 60.0 / state.config.sim_ratio)
            state.status = f"{stage_message(state)} ({seconds}s)"

    return swap_system


def carrier_system(state: SimState, ctx: TickContext) -> None:
    """Keep the battery carrier beside the combine during an inline swap."""
    swap = state.swap
    if swap.active and swap.carrier_side is not None:
        state.carrier_position = carrier_anchor(state, swap.carrier_side)
    else:
        state.carrier_position = None


def low_battery_system(state: SimState, ctx: TickContext) -> None:
    check_low_battery(state)
