"""harvest-field - Tile coverage grid and header sweep for the harvest engine."""
from __future__ import annotations

from harvest_field.grid import FieldGrid
from harvest_field.header import Footprint, HeaderSpec, footprint
from harvest_field.sweep import NO_SWEEP, SweepResult, candidate_range, sample_points, stamp, sweep

__all__ = [
    "FieldGrid",
    "Footprint",
    "HeaderSpec",
    "NO_SWEEP",
    "SweepResult",
    "candidate_range",
    "footprint",
    "sample_points",
    "stamp",
    "sweep",
]
