"""Transition evaluation and the FSM system factory."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from harvest_fsm.components import FSM
from harvest_fsm.guards import FSMGuards

if TYPE_CHECKING:
    from harvest import TickContext

OnTransition = Callable[[Any, "TickContext", str, str], None]


def find_transition(fsm: FSM, guards: FSMGuards, subject: Any) -> str | None:
    """Return the target of the first firing edge out of the current state."""
    for guard_name, target in fsm.transitions.get(fsm.state, ()):
        if guards.check(guard_name, subject):
            return target
    return None


def evaluate(fsm: FSM, guards: FSMGuards, subject: Any) -> tuple[str, str] | None:
    """Fire at most one transition. Returns ``(old, new)`` if one fired."""
    target = find_transition(fsm, guards, subject)
    if target is None:
        return None
    old = fsm.force(target)
    return old, target


def make_fsm_system(
    select: Callable[[Any], FSM],
    guards: FSMGuards,
    on_transition: OnTransition | None = None,
) -> Callable[[Any, TickContext], None]:
    """Return a system that evaluates one machine per tick.

    ``select(state)`` picks the machine out of the simulation state; guards
    receive the whole state as their subject.
    """

    def fsm_system(state: Any, ctx: TickContext) -> None:
        fired = evaluate(select(state), guards, state)
        if fired is not None and on_transition is not None:
            on_transition(state, ctx, fired[0], fired[1])

    return fsm_system
