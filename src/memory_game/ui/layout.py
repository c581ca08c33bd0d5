from __future__ import annotations

from dataclasses import dataclass

from memory_game.components.board import Board
from memory_game.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HUD_HEIGHT,
)


@dataclass(frozen=True, slots=True)
class CellRef:
    on_board: bool
    row: int = -1
    col: int = -1


OFF_BOARD = CellRef(on_board=False)


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) for a board centred horizontally.

    Shared by rendering and input mapping so clicks land on the drawn tiles.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def resolve_click(
    x: float,
    y: float,
    tile_width: float,
    tile_height: float,
    board: Board,
    *,
    left: float = 0.0,
    bottom: float = 0.0,
) -> CellRef:
    """Map a window point to a board cell.

    Window y grows upward while row 0 is the top row, so rows are counted down
    from the board's top edge.
    """
    if tile_width <= 0 or tile_height <= 0:
        return OFF_BOARD
    dx = x - left
    dy = (bottom + board.rows * tile_height) - y
    if dx < 0 or dy < 0:
        return OFF_BOARD
    col = int(dx // tile_width)
    row = int(dy // tile_height)
    if not board.contains(row, col):
        return OFF_BOARD
    return CellRef(on_board=True, row=row, col=col)


def cell_center(row: int, col: int, rows: int, tile_size: float, left: float, bottom: float):
    """Centre of a cell in window coordinates (inverse of resolve_click)."""
    cx = left + col * tile_size + tile_size / 2
    cy = bottom + (rows - 1 - row) * tile_size + tile_size / 2
    return cx, cy
