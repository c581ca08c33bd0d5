import random
from collections import defaultdict

import pytest

from memory_game.components.selection_state import SelectionPhase
from memory_game.components.tile import Tile
from memory_game.events.bus import EVENT_TICK
from memory_game.systems.board_ops import count_hidden, get_board, identity_counts, iter_tiles
from memory_game.utils.game_state import is_game_over

from tests.helpers import build_game, click


def _committed_and_pending(world, state):
    pending = {state.pending_first, state.pending_second} - {None}
    committed = sum(1 for _, _, entity, tile in iter_tiles(world) if tile.revealed and entity not in pending)
    return committed, len(pending)


@pytest.mark.parametrize("seed", range(8))
def test_random_play_preserves_invariants(seed):
    rng = random.Random(seed)
    bus, world, selection, clock = build_game(rows=4, cols=4, rollback_delay_ms=300, seed=seed)
    board = get_board(world)
    state = selection.state
    faces = identity_counts(world)

    for _ in range(600):
        before = state.hidden_count
        if rng.random() < 0.6:
            click(bus, rng.randint(-1, board.rows), rng.randint(-1, board.cols))
        else:
            clock.advance(rng.choice([0.05, 0.1, 0.3]))
            bus.emit(EVENT_TICK)

        assert state.hidden_count - before in (0, -1, 2)
        assert state.hidden_count == count_hidden(world)
        committed, pending = _committed_and_pending(world, state)
        assert state.hidden_count + committed + pending == board.rows * board.cols
        if state.pending_second is not None:
            assert state.pending_first != state.pending_second
        assert state.needs_rollback == (state.phase == SelectionPhase.PAIR_MISMATCHED)
        assert identity_counts(world) == faces


@pytest.mark.parametrize("rows, cols", [(2, 2), (2, 3), (4, 4), (6, 6)])
def test_perfect_play_finishes_the_game(rows, cols):
    bus, world, selection, clock = build_game(rows=rows, cols=cols)
    cells_by_face = defaultdict(list)
    for row, col, _, tile in iter_tiles(world):
        cells_by_face[tile.identity].append((row, col))

    for (first, second) in cells_by_face.values():
        click(bus, *first)
        click(bus, *second)
        bus.emit(EVENT_TICK)

    state = selection.state
    assert state.hidden_count == 0
    assert is_game_over(state)
    assert state.attempts == rows * cols // 2
    assert all(tile.revealed for _, tile in world.get_component(Tile))
