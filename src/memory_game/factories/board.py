from __future__ import annotations

import logging
import random
from typing import Iterable, List

from esper import World

from memory_game.components.board import Board
from memory_game.components.board_position import BoardPosition
from memory_game.components.tile import Tile, TileIdentity
from memory_game.errors import ConfigurationError

logger = logging.getLogger(__name__)


def take_distinct(source: Iterable[TileIdentity], count: int) -> List[TileIdentity]:
    """Pull the first ``count`` distinct identities, stopping as soon as there are enough."""
    picked: List[TileIdentity] = []
    seen = set()
    for identity in source:
        if identity in seen:
            continue
        seen.add(identity)
        picked.append(identity)
        if len(picked) >= count:
            break
    if len(picked) < count:
        raise ConfigurationError(
            f"need {count} distinct tile identities, identity source supplied {len(picked)}"
        )
    return picked


def shuffled_pairs(
    identities: Iterable[TileIdentity],
    pair_count: int,
    rng: random.Random | None = None,
) -> List[TileIdentity]:
    faces = take_distinct(identities, pair_count)
    deck = faces + faces
    (rng or random).shuffle(deck)
    return deck


def create_board(
    world: World,
    rows: int,
    cols: int,
    identity_source: Iterable[TileIdentity],
    *,
    rng: random.Random | None = None,
) -> int:
    """Create the board entity and one tile entity per cell, laid out row-major.

    Returns the board entity id.
    """
    if rows <= 0 or cols <= 0:
        raise ConfigurationError(f"board dimensions must be positive, got {rows}x{cols}")
    if (rows * cols) % 2:
        raise ConfigurationError(f"a {rows}x{cols} board has an odd number of tiles")
    deck = shuffled_pairs(identity_source, rows * cols // 2, rng)
    board_entity = world.create_entity(Board(rows=rows, cols=cols))
    for index, identity in enumerate(deck):
        row, col = divmod(index, cols)
        world.create_entity(BoardPosition(row=row, col=col), Tile(identity=identity))
    logger.info("created %dx%d board with %d pairs", rows, cols, len(deck) // 2)
    return board_entity
