"""Harvest sweep: stamp the header footprint along a movement segment."""
from __future__ import annotations

import math
from dataclasses import dataclass

from harvest_physics import vec

from harvest_field.grid import FieldGrid
from harvest_field.header import Footprint, HeaderSpec, footprint


@dataclass(frozen=True)
class SweepResult:
    """Outcome of one sweep.

    ``harvested_samples`` counts samples that cut at least one new tile;
    ``in_crop`` is True if any sample overlapped the grid at all.
    """

    samples: int = 0
    harvested_samples: int = 0
    newly_harvested: int = 0
    tons: float = 0.0
    in_crop: bool = False


NO_SWEEP = SweepResult()


def candidate_range(fp: Footprint, grid: FieldGrid, tile_size: float) -> tuple[int, int, int, int]:
    """Bounding tile range of the footprint, one tile of slack, clipped to the grid."""
    ex, ey = fp.extent()
    cx, cy = fp.center
    min_x = max(0, math.floor((cx - ex) / tile_size) - 1)
    max_x = min(grid.width - 1, math.floor((cx + ex) / tile_size) + 1)
    min_y = max(0, math.floor((cy - ey) / tile_size) - 1)
    max_y = min(grid.height - 1, math.floor((cy + ey) / tile_size) + 1)
    return min_x, min_y, max_x, max_y


def stamp(grid: FieldGrid, fp: Footprint, tile_size: float, margin_tiles: float) -> tuple[int, bool]:
    """Mark every tile whose center lies under the footprint.

    Returns ``(newly_harvested, touched_any)``.
    """
    min_x, min_y, max_x, max_y = candidate_range(fp, grid, tile_size)
    margin = tile_size * margin_tiles
    half = tile_size / 2
    newly = 0
    touched = False
    for ty in range(min_y, max_y + 1):
        for tx in range(min_x, max_x + 1):
            if fp.contains((tx * tile_size + half, ty * tile_size + half), margin):
                touched = True
                if grid.mark_harvested(tx, ty):
                    newly += 1
    return newly, touched


def sample_points(start: vec.Vec2, end: vec.Vec2, spacing: float) -> list[vec.Vec2]:
    """``max(1, ceil(L / spacing))`` evenly spaced points, endpoint included.

    A single sample sits on the endpoint, so a zero-length segment still
    yields one point.
    """
    count = max(1, math.ceil(vec.distance(start, end) / spacing))
    if count == 1:
        return [end]
    return [vec.lerp(start, end, i / (count - 1)) for i in range(count)]


def sweep(
    grid: FieldGrid,
    start: vec.Vec2,
    end: vec.Vec2,
    heading: float,
    header: HeaderSpec,
    tile_size: float,
    ton_per_tile: float,
) -> SweepResult:
    """Stamp the header at every sample between ``start`` and ``end``."""
    points = sample_points(start, end, tile_size / 2)
    harvested_samples = 0
    newly_total = 0
    in_crop = False
    for point in points:
        newly, touched = stamp(grid, footprint(point, heading, header, tile_size), tile_size, header.margin_tiles)
        in_crop = in_crop or touched
        if newly > 0:
            harvested_samples += 1
            newly_total += newly
    return SweepResult(
        samples=len(points),
        harvested_samples=harvested_samples,
        newly_harvested=newly_total,
        tons=newly_total * ton_per_tile,
        in_crop=in_crop,
    )
