from __future__ import annotations

from collections import Counter
from typing import List, Tuple

from esper import World

from memory_game.components.board import Board
from memory_game.components.board_position import BoardPosition
from memory_game.components.selection_state import SelectionState
from memory_game.components.tile import Tile

Position = Tuple[int, int]
TileEntry = Tuple[int, int, int, Tile]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_selection_state(world: World) -> SelectionState:
    for _, state in world.get_component(SelectionState):
        return state
    raise RuntimeError("SelectionState not found")


def get_entity_at(world: World, row: int, col: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def tile_at(world: World, row: int, col: int) -> Tile:
    board = get_board(world)
    if not board.contains(row, col):
        raise IndexError(f"cell ({row}, {col}) is outside the {board.rows}x{board.cols} board")
    entity = get_entity_at(world, row, col)
    if entity is None:
        raise IndexError(f"no tile at ({row}, {col})")
    return world.component_for_entity(entity, Tile)


def position_of(world: World, entity: int) -> Position:
    position = world.component_for_entity(entity, BoardPosition)
    return position.row, position.col


def iter_tiles(world: World) -> List[TileEntry]:
    """All tiles as ``(row, col, entity, tile)`` in row-major order."""
    entries = [
        (position.row, position.col, entity, tile)
        for entity, (position, tile) in world.get_components(BoardPosition, Tile)
    ]
    entries.sort(key=lambda entry: (entry[0], entry[1]))
    return entries


def identity_counts(world: World) -> Counter:
    return Counter(tile.identity for _, _, _, tile in iter_tiles(world))


def count_hidden(world: World) -> int:
    return sum(1 for _, _, _, tile in iter_tiles(world) if not tile.revealed)
