"""FSM component."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FSM:
    """Finite state machine. Transition table maps states to (guard, target) pairs.

    Edges are checked in order; the first guard that holds fires. States with
    no edges only change through ``force``.
    """

    state: str
    transitions: dict[str, list[tuple[str, str]]] = field(default_factory=dict)
    previous: str | None = None

    def force(self, target: str) -> str:
        """Move to ``target`` unconditionally. Returns the state left behind."""
        old = self.state
        self.previous = old
        self.state = target
        return old
