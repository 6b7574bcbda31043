"""Two-slot allocation of the combine's flanks."""
from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self) -> float:
        """Multiplier on the combine's right axis."""
        return -1.0 if self is Side.LEFT else 1.0

    @property
    def opposite(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class SideSlots:
    """Who runs alongside the combine on which side."""

    def __init__(self) -> None:
        self._holders: dict[Side, str] = {}

    def allocate(self, owner: str, preferred: Side) -> Side:
        """Give ``owner`` its preferred side, or the other one if taken.

        An owner that already holds a side keeps it. Raises ValueError when
        both sides belong to someone else.
        """
        held = self.side_of(owner)
        if held is not None:
            return held
        for side in (preferred, preferred.opposite):
            if side not in self._holders:
                self._holders[side] = owner
                return side
        raise ValueError(f"no free side for {owner!r}")

    def release(self, owner: str) -> None:
        for side in [s for s, o in self._holders.items() if o == owner]:
            del self._holders[side]

    def side_of(self, owner: str) -> Side | None:
        for side, holder in self._holders.items():
            if holder == owner:
                return side
        return None

    def holder(self, side: Side) -> str | None:
        return self._holders.get(side)

    def clear(self) -> None:
        self._holders.clear()
