from __future__ import annotations

from typing import TYPE_CHECKING

from memory_game.components.tile import Glyph, Picture
from memory_game.constants import (
    GLYPH_COLOR,
    HIDDEN_TILE_COLOR,
    PENDING_OUTLINE_COLOR,
    REVEALED_TILE_COLOR,
)

if TYPE_CHECKING:
    from memory_game.rendering.context import RenderContext, TileView
    from memory_game.rendering.sprite_cache import SpriteCache


class BoardRenderer:
    """Draws hidden tiles as a uniform placeholder and revealed tiles by face."""

    def __init__(self, sprite_cache: "SpriteCache", padding: int = 4):
        self._sprites = sprite_cache
        self._padding = padding

    def render(self, arcade, ctx: RenderContext) -> None:
        draw_size = max(ctx.tile_size - self._padding, 4)
        for view in ctx.tiles:
            left = view.center_x - draw_size / 2
            bottom = view.center_y - draw_size / 2
            if not view.revealed:
                arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, HIDDEN_TILE_COLOR)
                continue
            arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, REVEALED_TILE_COLOR)
            self._draw_face(arcade, view, draw_size)
            if view.pending:
                arcade.draw_lbwh_rectangle_outline(
                    left, bottom, draw_size, draw_size, PENDING_OUTLINE_COLOR, border_width=3
                )

    def _draw_face(self, arcade, view: TileView, draw_size: float) -> None:
        identity = view.identity
        if isinstance(identity, Glyph):
            arcade.draw_text(
                identity.value,
                view.center_x,
                view.center_y,
                GLYPH_COLOR,
                int(draw_size * 0.5),
                anchor_x="center",
                anchor_y="center",
            )
        elif isinstance(identity, Picture):
            texture = self._sprites.get_picture_texture(arcade, identity.path)
            if texture is None:
                # Fall back to the file stem so the pair is still recognisable.
                arcade.draw_text(
                    identity.path.rsplit("/", 1)[-1].rsplit(".", 1)[0],
                    view.center_x,
                    view.center_y,
                    GLYPH_COLOR,
                    int(draw_size * 0.15),
                    anchor_x="center",
                    anchor_y="center",
                )
                return
            inset = draw_size * 0.9
            arcade.draw_texture_rect(texture, arcade.XYWH(view.center_x, view.center_y, inset, inset))
