from esper import World

from memory_game.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from memory_game.systems.board_ops import get_board
from memory_game.ui.layout import compute_board_geometry, resolve_click

# arcade.MOUSE_BUTTON_LEFT
LEFT_BUTTON = 1


class InputSystem:
    """Turns left clicks over the board into tile_click events."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', LEFT_BUTTON)
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        board = get_board(self.world)
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols
        )
        cell = resolve_click(x, y, tile_size, tile_size, board, left=start_x, bottom=start_y)
        if not cell.on_board:
            return
        self.event_bus.emit(EVENT_TILE_CLICK, row=cell.row, col=cell.col)
