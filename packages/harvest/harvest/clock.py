"""Clock - real elapsed time scaled into simulated time."""

from typing import Callable

from harvest.types import TickContext


class Clock:
    def __init__(
        self,
        ratio: float,
        cutoff: float | None = None,
        max_dt: float = 0.1,
    ) -> None:
        if ratio <= 0:
            raise ValueError("ratio must be positive")
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        if cutoff is not None and cutoff <= 0:
            raise ValueError("cutoff must be positive")
        self._ratio = ratio
        self._cutoff = cutoff
        self._max_dt = max_dt
        self._tick_number = 0
        self._dt = 0.0
        self._elapsed = 0.0
        self._sim_elapsed = 0.0

    @property
    def ratio(self) -> float:
        return self._ratio

    @property
    def cutoff(self) -> float | None:
        return self._cutoff

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Real seconds since the run started."""
        return self._elapsed

    @property
    def sim_elapsed(self) -> float:
        """Simulated seconds since the run started."""
        return self._sim_elapsed

    @property
    def expired(self) -> bool:
        return self._cutoff is not None and self._elapsed >= self._cutoff

    def clamp(self, dt: float) -> float:
        return max(0.0, min(dt, self._max_dt))

    def advance(self, dt: float) -> int:
        """Advance both clocks by a (clamped) real delta. Returns the new tick number."""
        self._dt = self.clamp(dt)
        self._tick_number += 1
        self._elapsed += self._dt
        self._sim_elapsed += self._dt * self._ratio
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            sim_dt=self._dt * self._ratio,
            elapsed=self._elapsed,
            sim_elapsed=self._sim_elapsed,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._dt = 0.0
        self._elapsed = 0.0
        self._sim_elapsed = 0.0
