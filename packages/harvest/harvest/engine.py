"""Engine - ordered system runner, run lifecycle and stop requests."""

from typing import Any

from harvest.clock import Clock
from harvest.types import Hook, System


class Engine:
    """Runs systems in registration order against one state object.

    The engine owns the clock. Systems receive ``(state, ctx)`` and may call
    ``ctx.request_stop()``; remaining systems of that tick are skipped and
    the run ends.
    """

    def __init__(self, state: Any, clock: Clock) -> None:
        self._state = state
        self._clock = clock
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False
        self._started = False
        self._running = False

    @property
    def state(self) -> Any:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def running(self) -> bool:
        return self._running

    @property
    def finished(self) -> bool:
        return self._started and not self._running

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._running = True
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(self._state, ctx)

    def _finish(self) -> None:
        self._running = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(self._state, ctx)

    def step(self, dt: float) -> bool:
        """Run one tick of ``dt`` real seconds. Returns False once the run has ended."""
        if not self._started:
            self.start()
        if not self._running:
            return False
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._state, ctx)
            if self._stop_requested:
                break
        if self._stop_requested:
            self._finish()
        return self._running

    def run(self, n: int, dt: float) -> int:
        """Step up to ``n`` ticks of ``dt``. Returns the number of ticks executed."""
        first = self._clock.tick_number
        for _ in range(n):
            if not self.step(dt):
                break
        return self._clock.tick_number - first

    def reset(self) -> None:
        """Rewind the clock and lifecycle; the caller resets the state object."""
        self._clock.reset()
        self._stop_requested = False
        self._started = False
        self._running = False
