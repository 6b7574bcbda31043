"""Gauge component and helper functions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Gauge:
    """Bounded accumulator (grain tank, battery pack).

    Attributes:
        capacity: Upper bound, strictly positive.
        current: Level, kept within [0, capacity] by GaugeHelper.
    """

    capacity: float
    current: float = 0.0

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {self.capacity}")
        self.current = max(0.0, min(self.current, self.capacity))


class GaugeHelper:
    """Pure functions for gauge manipulation. Every mutation clamps."""

    @staticmethod
    def fill(gauge: Gauge, amount: float) -> float:
        """Add up to the remaining headroom. Returns amount actually added."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        before = gauge.current
        gauge.current = min(gauge.capacity, gauge.current + amount)
        return gauge.current - before

    @staticmethod
    def drain(gauge: Gauge, amount: float) -> float:
        """Remove down to zero. Returns amount actually removed."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        before = gauge.current
        gauge.current = max(0.0, gauge.current - amount)
        return before - gauge.current

    @staticmethod
    def refill(gauge: Gauge) -> None:
        gauge.current = gauge.capacity

    @staticmethod
    def empty(gauge: Gauge) -> None:
        gauge.current = 0.0

    @staticmethod
    def ratio(gauge: Gauge) -> float:
        return max(0.0, min(1.0, gauge.current / gauge.capacity))

    @staticmethod
    def percent(gauge: Gauge) -> float:
        return GaugeHelper.ratio(gauge) * 100.0

    @staticmethod
    def headroom(gauge: Gauge) -> float:
        return max(0.0, gauge.capacity - gauge.current)

    @staticmethod
    def is_full(gauge: Gauge, tolerance: float = 0.0) -> bool:
        return gauge.current >= gauge.capacity - tolerance

    @staticmethod
    def is_empty(gauge: Gauge, tolerance: float = 0.0) -> bool:
        return gauge.current <= tolerance
