"""Countdown component."""
from __future__ import annotations

from dataclasses import dataclass

_EPSILON = 1e-9


@dataclass
class Countdown:
    """Duration/elapsed pair advanced by the caller in its own time unit.

    A countdown with ``duration == 0`` is idle. ``elapsed`` never exceeds
    ``duration``, so ``remaining`` never goes negative.
    """

    duration: float = 0.0
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")
        self.elapsed = max(0.0, min(self.elapsed, self.duration))

    @property
    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed)

    @property
    def progress(self) -> float:
        """Fraction in [0, 1]; an idle countdown reports 1."""
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    @property
    def running(self) -> bool:
        return self.remaining > _EPSILON

    @property
    def expired(self) -> bool:
        return not self.running

    def start(self, duration: float) -> None:
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.duration = duration
        self.elapsed = 0.0

    def advance(self, amount: float) -> bool:
        """Advance by ``amount``. Returns True on the call that makes it expire."""
        if not self.running:
            return False
        self.elapsed = min(self.duration, self.elapsed + max(0.0, amount))
        return self.expired

    def clear(self) -> None:
        self.duration = 0.0
        self.elapsed = 0.0
