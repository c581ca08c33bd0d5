from __future__ import annotations

from esper import World

from memory_game.components.game_state import GameMode, GameState
from memory_game.components.selection_state import SelectionState
from memory_game.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def is_game_over(state: SelectionState) -> bool:
    return state.hidden_count == 0


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""

    previous_mode: GameMode | None = None
    state = get_game_state(world)
    if state is not None:
        previous_mode = state.mode
        if state.mode == mode:
            return
        state.mode = mode
    else:
        world.create_entity(GameState(mode=mode))
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
