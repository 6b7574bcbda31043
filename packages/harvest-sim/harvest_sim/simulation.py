"""Simulation - wires the state, clock and systems into one steppable run."""
from __future__ import annotations

from harvest import Clock, Engine

from harvest_sim.battery_swap import trigger_battery_swap
from harvest_sim.config import SimConfig
from harvest_sim.events import EventLog
from harvest_sim.snapshot import RunSummary, SimSnapshot, make_snapshot
from harvest_sim.state import Controls, SimState
from harvest_sim.systems import build_systems
from harvest_sim.tractor import harvest_blocked, request_tractor


def toggle_header(state: SimState) -> bool:
    """Raise or lower the header. Refused during a swap or with a full tank."""
    if state.swap.active:
        return state.reject("swap_running", "Battery swap in progress.")
    if harvest_blocked(state):
        return state.reject("tank_full", "Tank full. Call the tractor before harvesting.")
    state.header_engaged = not state.header_engaged
    state.emit("header", engaged=state.header_engaged, forced=False)
    state.announce("Header engaged." if state.header_engaged else "Header raised.")
    return True


def apply_triggers(state: SimState, controls: Controls) -> None:
    """Apply one-shot intents in fixed order; at most one process starts."""
    started = False
    if controls.call_tractor:
        started = request_tractor(state)
    if controls.trigger_battery_swap:
        if started:
            state.reject("process_started", "Tractor dispatched this tick. Request the swap again.")
        else:
            trigger_battery_swap(state)
    if controls.toggle_header:
        toggle_header(state)


class Simulation:
    """One harvest run.

    Usage:
        sim = Simulation(SimConfig(field_width_tiles=10, field_height_tiles=10))
        while sim.step(1 / 60, Controls(throttle_forward=True)):
            draw(sim.snapshot())
        print(sim.summary)
    """

    def __init__(self, config: SimConfig | None = None, max_events: int = 1000) -> None:
        self._config = config if config is not None else SimConfig()
        self._state = SimState(self._config, EventLog(max_events))
        clock = Clock(
            ratio=self._config.sim_ratio,
            cutoff=self._config.real_time_limit,
            max_dt=self._config.max_dt,
        )
        self._engine = Engine(self._state, clock)
        for system in build_systems(self._config):
            self._engine.add_system(system)

    @property
    def config(self) -> SimConfig:
        return self._config

    @property
    def state(self) -> SimState:
        return self._state

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def events(self) -> EventLog:
        return self._state.events

    @property
    def running(self) -> bool:
        return not self._engine.finished

    @property
    def summary(self) -> RunSummary | None:
        return self._state.summary

    def step(self, dt: float, controls: Controls | None = None) -> bool:
        """Apply ``controls`` and advance one tick. Returns False once the run has ended."""
        if self._engine.finished:
            return False
        if controls is not None:
            self._state.controls = controls
            apply_triggers(self._state, controls)
        else:
            self._state.controls = Controls()
        return self._engine.step(dt)

    def run(self, n: int, dt: float, controls: Controls | None = None) -> int:
        """Step up to ``n`` ticks with the same held controls. Returns ticks executed."""
        held = controls or Controls()
        held = Controls(
            steer_left=held.steer_left,
            steer_right=held.steer_right,
            throttle_forward=held.throttle_forward,
            throttle_backward=held.throttle_backward,
        )
        first = self._engine.clock.tick_number
        for _ in range(n):
            if not self.step(dt, held):
                break
        return self._engine.clock.tick_number - first

    def snapshot(self) -> SimSnapshot:
        return make_snapshot(self._state, self.running)

    def reset(self) -> None:
        """Restart the run from the initial state."""
        self._engine.reset()
        self._state.reset()
