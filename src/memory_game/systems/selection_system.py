from __future__ import annotations

import logging
from time import monotonic
from typing import Any, Callable

from esper import World

from memory_game.components.game_state import GameMode
from memory_game.components.selection_state import SelectionPhase, SelectionState
from memory_game.components.tile import Tile
from memory_game.constants import ROLLBACK_DELAY_MS
from memory_game.errors import ConfigurationError
from memory_game.events.bus import (
    EVENT_GAME_OVER,
    EVENT_PAIR_HIDDEN,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISMATCHED,
    EVENT_SELECTION_CLEARED,
    EVENT_TICK,
    EVENT_TILE_CLICK,
    EVENT_TILE_REVEALED,
    EventBus,
)
from memory_game.systems.board_ops import get_board, get_entity_at, get_selection_state, position_of
from memory_game.utils.game_state import is_game_over, set_game_mode

logger = logging.getLogger(__name__)


class SelectionSystem:
    """Turn state machine driven by tile clicks and clock ticks.

    A turn reveals two tiles. A matching pair stays face-up and the turn is
    freed on the next tick. A mismatched pair stays visible until
    ``rollback_delay_ms`` has passed on ``clock`` and is then hidden again by
    whichever tick first observes the deadline. Ticks never block.

    Events that do not satisfy a transition's guard are dropped silently.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rollback_delay_ms: int = ROLLBACK_DELAY_MS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if rollback_delay_ms < 0:
            raise ConfigurationError("rollback_delay_ms must not be negative")
        self.world = world
        self.event_bus = event_bus
        self._rollback_delay = rollback_delay_ms / 1000.0
        self._clock = clock or monotonic
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def state(self) -> SelectionState:
        return get_selection_state(self.world)

    def on_tile_click(self, sender: Any, **payload: Any) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        self.select(row, col)

    def on_tick(self, sender: Any, **payload: Any) -> None:
        self.advance()

    def select(self, row: int, col: int) -> bool:
        """Reveal the tile at (row, col) if the turn accepts it. Returns True on a transition."""
        state = self.state
        if not state.accepts_selection():
            return False
        if not get_board(self.world).contains(row, col):
            return False
        entity = get_entity_at(self.world, row, col)
        if entity is None:
            return False
        tile = self.world.component_for_entity(entity, Tile)
        if tile.revealed:
            return False

        tile.revealed = True
        state.hidden_count -= 1
        logger.debug("revealed (%d, %d), %d hidden", row, col, state.hidden_count)
        self.event_bus.emit(EVENT_TILE_REVEALED, row=row, col=col, entity=entity)

        if state.pending_first is None:
            state.pending_first = entity
            return True

        first = self.world.component_for_entity(state.pending_first, Tile)
        first_pos = position_of(self.world, state.pending_first)
        state.pending_second = entity
        state.attempts += 1
        if first.identity == tile.identity:
            state.needs_rollback = False
            logger.debug("pair matched at %s and %s", first_pos, (row, col))
            self.event_bus.emit(EVENT_PAIR_MATCHED, first=first_pos, second=(row, col))
            if is_game_over(state):
                self._finish(state)
        else:
            state.needs_rollback = True
            state.reveal_deadline = self._clock() + self._rollback_delay
            logger.debug("mismatch at %s and %s", first_pos, (row, col))
            self.event_bus.emit(
                EVENT_PAIR_MISMATCHED,
                first=first_pos,
                second=(row, col),
                deadline=state.reveal_deadline,
            )
        return True

    def advance(self) -> bool:
        """Resolve a pending pair if it is due. Returns True on a transition."""
        state = self.state
        phase = state.phase
        if phase == SelectionPhase.PAIR_MATCHED:
            state.clear_pending()
            self.event_bus.emit(EVENT_SELECTION_CLEARED, reason="matched")
            return True
        if phase != SelectionPhase.PAIR_MISMATCHED:
            return False
        if state.reveal_deadline is not None and self._clock() < state.reveal_deadline:
            return False

        first_entity, second_entity = state.pending_first, state.pending_second
        for entity in (first_entity, second_entity):
            self.world.component_for_entity(entity, Tile).revealed = False
        state.hidden_count += 2
        state.clear_pending()
        first_pos = position_of(self.world, first_entity)
        second_pos = position_of(self.world, second_entity)
        logger.debug("hid %s and %s, %d hidden", first_pos, second_pos, state.hidden_count)
        self.event_bus.emit(EVENT_PAIR_HIDDEN, first=first_pos, second=second_pos)
        self.event_bus.emit(EVENT_SELECTION_CLEARED, reason="rollback")
        return True

    def _finish(self, state: SelectionState) -> None:
        logger.info("all pairs found after %d attempts", state.attempts)
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        self.event_bus.emit(EVENT_GAME_OVER, attempts=state.attempts)
