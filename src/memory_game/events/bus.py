from blinker import Signal
from typing import Dict

class EventBus:
    """Named blinker signals; handlers receive ``(sender, **payload)``."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that nobody else holds still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# SELECTION & PAIRS
# ============================================================================
EVENT_TILE_REVEALED = "tile_revealed"          # payload: row, col, entity
EVENT_PAIR_MATCHED = "pair_matched"            # payload: first=(r,c), second=(r,c)
EVENT_PAIR_MISMATCHED = "pair_mismatched"      # payload: first=(r,c), second=(r,c), deadline=float
EVENT_PAIR_HIDDEN = "pair_hidden"              # payload: first=(r,c), second=(r,c)
EVENT_SELECTION_CLEARED = "selection_cleared"  # payload: reason=str


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                  # payload: attempts=int
