"""Entry point for the Memory tile-matching game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
import os

from arcade import Window, run, set_background_color, color
from memory_game.config import GameConfig, config_from_env
from memory_game.constants import TICK_INTERVAL, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from memory_game.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TICK
from memory_game.systems.input import InputSystem
from memory_game.systems.render import RenderSystem
from memory_game.systems.selection_system import SelectionSystem
from memory_game.utils.log import setup_logging
from memory_game.world import create_world

logger = logging.getLogger(__name__)


class MemoryWindow(Window):
    def __init__(self, config: GameConfig | None = None):
        config = config or GameConfig()
        # Build the board before opening a window so bad options fail fast.
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, config)
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(TICK_INTERVAL)

        self.selection_system = SelectionSystem(
            self.world,
            self.event_bus,
            rollback_delay_ms=config.rollback_delay_ms,
        )
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        # Arcade may fire a resize before the render system exists.
        if hasattr(self, 'render_system'):
            self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    setup_logging(os.environ.get("MEMORY_GAME_LOG_LEVEL", "INFO"))
    # Bad options raise ConfigurationError here, before the loop starts.
    window = MemoryWindow(config_from_env())
    logger.info("window ready, %dx%d", window.width, window.height)
    run()

if __name__ == "__main__":
    main()
