from esper import World

from memory_game.constants import HUD_HEIGHT, HUD_TEXT_COLOR, TILE_PADDING
from memory_game.events.bus import EventBus, EVENT_GAME_OVER
from memory_game.rendering.board_renderer import BoardRenderer
from memory_game.rendering.context import RenderContext, build_render_context
from memory_game.rendering.sprite_cache import SpriteCache
from memory_game.systems.board_ops import get_board
from memory_game.ui.layout import compute_board_geometry
from memory_game.utils.game_state import get_game_state


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.sprite_cache = SpriteCache()
        self._board_renderer = BoardRenderer(self.sprite_cache, padding=TILE_PADDING)
        self._last_window_size = (self.window.width, self.window.height)
        self._geometry = self._compute_geometry()
        self._render_ctx: RenderContext | None = None
        self.final_attempts: int | None = None

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._geometry = self._compute_geometry()

    def on_game_over(self, sender, **kwargs):
        self.final_attempts = kwargs.get('attempts')

    def _compute_geometry(self):
        board = get_board(self.world)
        return compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)

    def build_context(self) -> RenderContext:
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)
        tile_size, board_left, board_bottom = self._geometry
        state = get_game_state(self.world)
        self._render_ctx = build_render_context(
            self.world,
            self.window.width,
            self.window.height,
            tile_size,
            board_left,
            board_bottom,
            mode=state.mode if state else None,
        )
        return self._render_ctx

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        ctx = self.build_context()
        try:
            arcade.get_window()
        except RuntimeError:
            return
        self._board_renderer.render(arcade, ctx)
        self._draw_hud(arcade, ctx)

    def _draw_hud(self, arcade, ctx: RenderContext):
        total_pairs = ctx.rows * ctx.cols // 2
        hud_y = ctx.board_top + HUD_HEIGHT / 2
        if ctx.game_over:
            attempts = self.final_attempts if self.final_attempts is not None else ctx.attempts
            label = f"All {total_pairs} pairs found in {attempts} attempts"
        else:
            label = f"Pairs {ctx.pairs_found}/{total_pairs}    Attempts {ctx.attempts}"
        arcade.draw_text(
            label,
            ctx.window_width / 2,
            hud_y,
            HUD_TEXT_COLOR,
            18,
            anchor_x="center",
            anchor_y="center",
        )
