"""harvest-schedule - Countdown timers for the harvest engine."""
from __future__ import annotations

from harvest_schedule.countdown import Countdown

__all__ = ["Countdown"]
