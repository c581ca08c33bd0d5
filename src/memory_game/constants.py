GRID_ROWS = 4
GRID_COLS = 4
# How long a mismatched pair stays face-up before it is hidden again.
ROLLBACK_DELAY_MS = 1000
TICK_INTERVAL = 1 / 60

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Memory"

DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

BOTTOM_MARGIN = 20
# Reserved strip above the board for the attempts / pairs readout.
HUD_HEIGHT = 48
TILE_PADDING = 6

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.90

HIDDEN_TILE_COLOR = (52, 73, 94)
REVEALED_TILE_COLOR = (236, 240, 241)
PENDING_OUTLINE_COLOR = (241, 196, 15)
GLYPH_COLOR = (20, 30, 40)
HUD_TEXT_COLOR = (220, 220, 220)
