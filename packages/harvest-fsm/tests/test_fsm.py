"""Tests for FSM component, guards and make_fsm_system."""
from dataclasses import dataclass

import pytest
from harvest import Clock, Engine
from harvest_fsm import FSM, FSMGuards, evaluate, find_transition, make_fsm_system


@dataclass
class Machine:
    """Minimal simulation state carrying one FSM and a level."""
    fsm: FSM
    level: float = 0.0


def _gate() -> FSM:
    return FSM(
        state="closed",
        transitions={
            "closed": [("high", "open")],
            "open": [("low", "closed")],
        },
    )


def _guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register("high", lambda m: m.level > 5)
    guards.register("low", lambda m: m.level <= 5)
    return guards


class TestGuards:
    def test_register_and_check(self):
        guards = _guards()
        assert guards.has("high")
        assert guards.check("high", Machine(_gate(), level=6))
        assert not guards.check("high", Machine(_gate(), level=1))

    def test_unknown_guard_raises(self):
        guards = FSMGuards()
        with pytest.raises(KeyError):
            guards.check("missing", None)

    def test_names(self):
        assert sorted(_guards().names()) == ["high", "low"]


class TestEvaluate:
    def test_no_transition_when_guard_false(self):
        m = Machine(_gate(), level=1)
        assert evaluate(m.fsm, _guards(), m) is None
        assert m.fsm.state == "closed"

    def test_transition_fires(self):
        m = Machine(_gate(), level=9)
        assert evaluate(m.fsm, _guards(), m) == ("closed", "open")
        assert m.fsm.state == "open"
        assert m.fsm.previous == "closed"

    def test_first_match_wins(self):
        guards = FSMGuards()
        guards.register("yes_1", lambda m: True)
        guards.register("yes_2", lambda m: True)
        fsm = FSM(state="idle", transitions={"idle": [("yes_1", "a"), ("yes_2", "b")]})
        assert find_transition(fsm, guards, None) == "a"

    def test_state_without_edges(self):
        fsm = FSM(state="idle")
        assert find_transition(fsm, FSMGuards(), None) is None

    def test_force(self):
        fsm = _gate()
        assert fsm.force("open") == "closed"
        assert fsm.state == "open"


class TestFSMSystem:
    def test_one_transition_per_tick(self):
        m = Machine(_gate(), level=9)
        engine = Engine(m, Clock(ratio=1.0))
        transitions = []
        engine.add_system(make_fsm_system(
            lambda s: s.fsm, _guards(),
            lambda s, ctx, old, new: transitions.append((ctx.tick_number, old, new)),
        ))

        engine.step(0.05)
        m.level = 0
        engine.step(0.05)
        engine.step(0.05)

        assert transitions == [(1, "closed", "open"), (2, "open", "closed")]
        assert m.fsm.state == "closed"
