"""Tractor process: approach, unload alongside, leave, cool down."""
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

OWNER = "tractor"
EMPTY_TOLERANCE = 0.001
FULL_TOLERANCE = 0.001


class TractorPhase(str, Enum):
    IDLE = "idle"
    APPROACHING = "approaching"
    UNLOADING = "unloading"
    LEAVING = "leaving"


TRANSITIONS: dict[str, list[tuple[str, str]]] = {
    "approaching": [("arrived", "unloading")],
    "unloading": [("unloaded", "leaving")],
    "leaving": [("departed", "idle")],
}


def _new_fsm() -> FSM:
    return FSM(state=TractorPhase.IDLE.value, transitions={k: list(v) for k, v in TRANSITIONS.items()})


@dataclass
class Tractor:
    """Grain cart that unloads the tank. Countdowns run in simulated minutes."""

    position: vec.Vec2 = (0.0, 0.0)
    heading: float = 0.0
    target: vec.Vec2 | None = None
    trailer_fill: float = 0.0
    side: Side | None = None
    fsm: FSM = field(default_factory=_new_fsm)
    arrival: Countdown = field(default_factory=Countdown)
    leave: Countdown = field(default_factory=Countdown)
    cooldown: Countdown = field(default_factory=Countdown)

    @property
    def phase(self) -> TractorPhase:
        return TractorPhase(self.fsm.state)

    @property
    def alongside(self) -> bool:
        return self.phase in (TractorPhase.APPROACHING, TractorPhase.UNLOADING)

    def countdown(self) -> float:
        """Remaining minutes of whatever the tractor is waiting on."""
        phase = self.phase
        if phase is TractorPhase.APPROACHING:
            return self.arrival.remaining
        if phase is TractorPhase.LEAVING:
            return self.leave.remaining
        if phase is TractorPhase.IDLE:
            return self.cooldown.remaining
        return 0.0


def anchor(state: SimState, side: Side) -> vec.Vec2:
    """Point beside the combine, ``tractor_offset`` out on ``side``."""
    lateral = vec.right(state.combine.heading)
    return vec.add(state.combine.position, vec.scale(lateral, state.config.tractor_offset * side.sign))


def harvest_blocked(state: SimState) -> bool:
    """Tank full with nobody taking grain off it."""
    return (
        GaugeHelper.is_full(state.tank, FULL_TOLERANCE)
        and state.tractor.phase is not TractorPhase.UNLOADING
    )


def request_tractor(state: SimState) -> bool:
    """Call the tractor. Returns False if it is busy or cooling down."""
    tractor = state.tractor
    if tractor.phase is not TractorPhase.IDLE:
        return state.reject("tractor_busy", "Tractor already en route or unloading.")
    if tractor.cooldown.running:
        return state.reject(
            "tractor_cooldown",
            f"Tractor is cooling down ({tractor.cooldown.remaining:.1f} min).",
        )
    tractor.side = state.sides.allocate(OWNER, Side.LEFT)
    tractor.target = anchor(state, tractor.side)
    tractor.arrival.start(state.config.tractor_arrival_min)
    old = tractor.fsm.force(TractorPhase.APPROACHING.value)
    state.counters.tractor_calls += 1
    state.emit("tractor", old=old, new=TractorPhase.APPROACHING.value, side=tractor.side.value)
    state.announce("Tractor called. Keep harvesting while it approaches.")
    return True


def _approach(state: SimState, minutes: float) -> None:
    cfg = state.config
    tractor = state.tractor
    tractor.arrival.advance(minutes)
    target = anchor(state, tractor.side or Side.LEFT)
    tractor.target = target

    # Close the lateral error twice as fast as the longitudinal one.
    progress = vec.clamp(minutes / cfg.tractor_arrival_min * cfg.tractor_speed_multiplier, 0.0, 1.0)
    lateral_axis = vec.right(state.combine.heading)
    forward_axis = vec.forward(state.combine.heading)
    error = vec.sub(target, tractor.position)
    lateral = vec.dot(error, lateral_axis) * min(1.0, progress * 2)
    longitudinal = vec.dot(error, forward_axis) * progress
    tractor.position = vec.add(
        tractor.position,
        vec.add(vec.scale(lateral_axis, lateral), vec.scale(forward_axis, longitudinal)),
    )

    remaining = vec.sub(target, tractor.position)
    if tractor.arrival.progress >= 2 / 3 or vec.length(remaining) < cfg.tractor_close_distance:
        tractor.heading = vec.lerp_angle(tractor.heading, state.combine.heading, 0.5)
    else:
        travel = math.atan2(remaining[1], remaining[0])
        tractor.heading = vec.lerp_angle(tractor.heading, travel, 0.25)


def _unload(state: SimState, minutes: float) -> None:
    cfg = state.config
    tractor = state.tractor
    target = anchor(state, tractor.side or Side.LEFT)
    tractor.target = target
    tractor.position = vec.lerp(tractor.position, target, 0.4)
    tractor.heading = vec.lerp_angle(tractor.heading, state.combine.heading, 0.25)
    amount = cfg.unload_rate * cfg.unload_attached_multiplier * minutes
    removed = GaugeHelper.drain(state.tank, amount)
    tractor.trailer_fill = min(cfg.trailer_capacity, tractor.trailer_fill + removed)


def _depart(state: SimState, minutes: float) -> None:
    tractor = state.tractor
    tractor.leave.advance(minutes)
    tractor.target = state.config.tractor_exit
    tractor.position = vec.lerp(tractor.position, tractor.target, 0.1)
    tractor.heading = vec.lerp_angle(tractor.heading, 0.0, 0.1)


def keep_gap(state: SimState) -> None:
    """Push the tractor radially out to at least ``min_tractor_gap``."""
    tractor = state.tractor
    gap = state.config.min_tractor_gap
    offset = vec.sub(tractor.position, state.combine.position)
    dist = vec.length(offset)
    if dist >= gap:
        return
    if dist == 0.0:
        side = tractor.side or Side.LEFT
        direction = vec.scale(vec.right(state.combine.heading), side.sign)
    else:
        direction = vec.scale(offset, 1.0 / dist)
    tractor.position = vec.add(state.combine.position, vec.scale(direction, gap))


def make_guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register("arrived", lambda s: s.tractor.arrival.expired)
    guards.register("unloaded", lambda s: GaugeHelper.is_empty(s.tank, EMPTY_TOLERANCE))
    guards.register("departed", lambda s: s.tractor.leave.expired)
    return guards


def _on_transition(state: SimState, ctx: TickContext, old: str, new: str) -> None:
    tractor = state.tractor
    phase = TractorPhase(new)
    state.emit("tractor", old=old, new=new)
    if phase is TractorPhase.UNLOADING:
        tractor.heading = state.combine.heading
        state.announce("Tractor alongside. Unloading grain.")
    elif phase is TractorPhase.LEAVING:
        tractor.leave.start(state.config.tractor_leave_min)
        state.counters.unloads += 1
        state.announce("Unloading complete. Tractor leaving.")
    elif phase is TractorPhase.IDLE:
        tractor.cooldown.start(state.config.tractor_cooldown_min)
        tractor.trailer_fill = 0.0
        tractor.target = None
        tractor.side = None
        state.sides.release(OWNER)
        state.announce("Tractor gone. Available again after cooldown.")


def make_tractor_system():
    """Return the per-tick tractor system.

    Cooldown advances every tick. The current phase's behaviour runs, then
    at most one transition fires, then the gap to the combine is enforced.
    """
    transition = make_fsm_system(lambda s: s.tractor.fsm, make_guards(), _on_transition)
    behaviours = {
        TractorPhase.APPROACHING: _approach,
        TractorPhase.UNLOADING: _unload,
        TractorPhase.LEAVING: _depart,
    }

    def tractor_system(state: SimState, ctx: TickContext) -> None:
        minutes = ctx.sim_minutes
        state.tractor.cooldown.advance(minutes)
        behaviour = behaviours.get(state.tractor.phase)
        if behaviour is not None:
            behaviour(state, minutes)
        transition(state, ctx)
        if state.tractor.alongside:
            keep_gap(state)

    return tractor_system
