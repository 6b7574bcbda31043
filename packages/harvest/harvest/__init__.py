"""harvest - Scaled-time tick engine for the harvest simulation."""

from harvest.clock import Clock
from harvest.engine import Engine
from harvest.types import Hook, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "Hook",
]
