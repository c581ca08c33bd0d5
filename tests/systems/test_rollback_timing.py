import pytest

from memory_game.components.selection_state import SelectionPhase
from memory_game.events.bus import EVENT_PAIR_HIDDEN, EVENT_SELECTION_CLEARED, EVENT_TICK
from memory_game.systems.board_ops import tile_at

from tests.helpers import build_game, click


def _mismatch(delay_ms=1000):
    bus, world, selection, clock = build_game(["AB", "BA"], rollback_delay_ms=delay_ms)
    click(bus, 0, 0)
    click(bus, 0, 1)
    return bus, world, selection, clock


def test_tick_before_deadline_keeps_pair_visible():
    bus, world, selection, clock = _mismatch()
    clock.advance(0.5)
    bus.emit(EVENT_TICK, dt=0.5)
    clock.advance(0.49)
    bus.emit(EVENT_TICK, dt=0.49)
    state = selection.state
    assert state.phase == SelectionPhase.PAIR_MISMATCHED
    assert tile_at(world, 0, 0).revealed and tile_at(world, 0, 1).revealed
    assert state.hidden_count == 2


def test_tick_at_deadline_rolls_back():
    bus, world, selection, clock = _mismatch()
    hidden = []
    cleared = []
    bus.subscribe(EVENT_PAIR_HIDDEN, lambda sender, **p: hidden.append((p["first"], p["second"])))
    bus.subscribe(EVENT_SELECTION_CLEARED, lambda sender, **p: cleared.append(p["reason"]))
    clock.advance(1.0)
    bus.emit(EVENT_TICK)
    state = selection.state
    assert state.phase == SelectionPhase.IDLE
    assert state.hidden_count == 4
    assert state.reveal_deadline is None
    assert not tile_at(world, 0, 0).revealed and not tile_at(world, 0, 1).revealed
    assert hidden == [((0, 0), (0, 1))]
    assert cleared == ["rollback"]


def test_clicks_during_rollback_window_are_rejected():
    bus, world, selection, clock = _mismatch()
    clock.advance(0.3)
    click(bus, 1, 0)
    assert not tile_at(world, 1, 0).revealed
    clock.advance(0.8)
    bus.emit(EVENT_TICK)
    click(bus, 1, 0)
    assert tile_at(world, 1, 0).revealed
    assert selection.state.phase == SelectionPhase.ONE_SELECTED


def test_late_tick_still_rolls_back_once():
    bus, world, selection, clock = _mismatch()
    clock.advance(30.0)
    bus.emit(EVENT_TICK)
    bus.emit(EVENT_TICK)
    assert selection.state.hidden_count == 4
    assert selection.state.phase == SelectionPhase.IDLE


def test_zero_delay_rolls_back_on_next_tick():
    bus, world, selection, clock = _mismatch(delay_ms=0)
    assert selection.state.phase == SelectionPhase.PAIR_MISMATCHED
    bus.emit(EVENT_TICK)
    assert selection.state.phase == SelectionPhase.IDLE


def test_deadline_measured_from_second_reveal():
    bus, world, selection, clock = build_game(["AB", "BA"], rollback_delay_ms=200)
    click(bus, 0, 0)
    clock.advance(5.0)
    click(bus, 0, 1)
    assert selection.state.reveal_deadline == pytest.approx(5.2)
    clock.advance(0.1)
    assert not selection.advance()
    clock.advance(0.15)
    assert selection.advance()
