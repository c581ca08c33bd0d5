import random

from esper import World

from memory_game.components.game_state import GameMode
from memory_game.components.selection_state import SelectionState
from memory_game.config import GameConfig
from memory_game.events.bus import EventBus
from memory_game.factories.board import create_board
from memory_game.utils.game_state import set_game_mode


def create_world(
    event_bus: EventBus,
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    """Build a fresh game: state resource, shuffled board and an idle turn.

    Raises ConfigurationError before anything is wired to a window when the
    config cannot produce a valid board.
    """
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())

    create_board(
        world,
        config.rows,
        config.cols,
        config.tile_identity_source,
        rng=getattr(world, "random"),
    )
    world.create_entity(SelectionState(hidden_count=config.rows * config.cols))
    set_game_mode(world, event_bus, GameMode.PLAYING)
    return world
