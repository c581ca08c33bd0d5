from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from esper import World

from memory_game.components.game_state import GameMode
from memory_game.components.tile import TileIdentity
from memory_game.systems.board_ops import get_board, get_selection_state, iter_tiles
from memory_game.ui.layout import cell_center


@dataclass(frozen=True, slots=True)
class TileView:
    """Read-only snapshot of one tile for drawing."""

    row: int
    col: int
    identity: TileIdentity
    revealed: bool
    pending: bool
    center_x: float
    center_y: float


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    rows: int
    cols: int
    tile_size: int
    board_left: float
    board_bottom: float
    hidden_count: int
    attempts: int
    game_over: bool
    pairs_found: int = 0
    tiles: List[TileView] = field(default_factory=list)

    @property
    def board_width(self) -> float:
        return self.tile_size * self.cols

    @property
    def board_height(self) -> float:
        return self.tile_size * self.rows

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_height


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    tile_size: int,
    board_left: float,
    board_bottom: float,
    *,
    mode: GameMode | None = None,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    board = get_board(world)
    state = get_selection_state(world)
    pending = {state.pending_first, state.pending_second} - {None}
    committed = 2 if state.pending_second is not None and not state.needs_rollback else 0
    tiles: List[TileView] = []
    for row, col, entity, tile in iter_tiles(world):
        cx, cy = cell_center(row, col, board.rows, tile_size, board_left, board_bottom)
        tiles.append(
            TileView(
                row=row,
                col=col,
                identity=tile.identity,
                revealed=tile.revealed,
                pending=entity in pending,
                center_x=cx,
                center_y=cy,
            )
        )
        if tile.revealed and entity not in pending:
            committed += 1
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        rows=board.rows,
        cols=board.cols,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        hidden_count=state.hidden_count,
        attempts=state.attempts,
        game_over=mode == GameMode.GAME_OVER,
        pairs_found=committed // 2,
        tiles=tiles,
    )
