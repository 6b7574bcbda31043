"""Header geometry: the oriented cutting rectangle ahead of the vehicle."""
from __future__ import annotations

from dataclasses import dataclass

from harvest_physics import vec


@dataclass(frozen=True)
class HeaderSpec:
    """Immutable header dimensions.

    Attributes:
        width_tiles: Cutting width across the direction of travel, in tiles.
        depth_tiles: Extent along the direction of travel, in tiles.
        standoff: Gap between the vehicle position and the header's rear
            edge, in world units.
        margin_tiles: Tolerance added to both half extents when testing tile
            centers, so adjacent passes leave no seam.
    """

    width_tiles: float
    depth_tiles: float
    standoff: float
    margin_tiles: float = 0.4

    def __post_init__(self) -> None:
        if self.width_tiles <= 0 or self.depth_tiles <= 0:
            raise ValueError("header width and depth must be positive")
        if self.margin_tiles < 0:
            raise ValueError(f"margin_tiles must be >= 0, got {self.margin_tiles}")


@dataclass(frozen=True)
class Footprint:
    center: vec.Vec2
    forward: vec.Vec2
    right: vec.Vec2
    half_depth: float
    half_width: float

    def extent(self) -> vec.Vec2:
        """Half size of the axis-aligned box around the rotated rectangle."""
        fx, fy = self.forward
        rx, ry = self.right
        return (
            abs(fx) * self.half_depth + abs(rx) * self.half_width,
            abs(fy) * self.half_depth + abs(ry) * self.half_width,
        )

    def contains(self, point: vec.Vec2, margin: float = 0.0) -> bool:
        rel = vec.sub(point, self.center)
        return (
            abs(vec.dot(rel, self.forward)) <= self.half_depth + margin
            and abs(vec.dot(rel, self.right)) <= self.half_width + margin
        )


def footprint(position: vec.Vec2, heading: float, header: HeaderSpec, tile_size: float) -> Footprint:
    half_depth = header.depth_tiles * tile_size / 2
    half_width = header.width_tiles * tile_size / 2
    fwd = vec.forward(heading)
    center = vec.add(position, vec.scale(fwd, header.standoff + half_depth))
    return Footprint(center, fwd, vec.right(heading), half_depth, half_width)
