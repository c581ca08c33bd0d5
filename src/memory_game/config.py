from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import Iterator, Mapping, Sequence

from memory_game.components.tile import Glyph, Picture, TileIdentity
from memory_game.constants import DEFAULT_ALPHABET, GRID_COLS, GRID_ROWS, ROLLBACK_DELAY_MS
from memory_game.errors import ConfigurationError


def glyph_identities(alphabet: str = DEFAULT_ALPHABET) -> Iterator[Glyph]:
    for char in alphabet:
        yield Glyph(char)


def picture_identities(directory: str | Path) -> list[Picture]:
    """One Picture per ``*.png`` in ``directory``, ordered by file name."""
    root = Path(directory)
    if not root.is_dir():
        raise ConfigurationError(f"picture directory not found: {root}")
    return [Picture(str(path)) for path in sorted(root.glob("*.png"))]


@dataclass
class GameConfig:
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    tile_identity_source: Sequence[TileIdentity] = field(
        default_factory=lambda: tuple(glyph_identities())
    )
    rollback_delay_ms: int = ROLLBACK_DELAY_MS

    def __post_init__(self) -> None:
        # Kept as a finite sequence so one config can build any number of boards.
        if not isinstance(self.tile_identity_source, Sequence):
            self.tile_identity_source = tuple(self.tile_identity_source)
        if self.rows <= 0 or self.cols <= 0:
            raise ConfigurationError(f"board dimensions must be positive, got {self.rows}x{self.cols}")
        if (self.rows * self.cols) % 2:
            raise ConfigurationError(f"a {self.rows}x{self.cols} board has an odd number of tiles")
        if self.rollback_delay_ms < 0:
            raise ConfigurationError("rollback_delay_ms must not be negative")

    @property
    def pair_count(self) -> int:
        return self.rows * self.cols // 2


PICTURES_ENV = "MEMORY_GAME_PICTURES"


def config_from_env(environ: Mapping[str, str] | None = None) -> GameConfig:
    """Default config, switched to picture tiles when ``MEMORY_GAME_PICTURES`` names a directory."""
    environ = os.environ if environ is None else environ
    directory = environ.get(PICTURES_ENV)
    if not directory:
        return GameConfig()
    return GameConfig(tile_identity_source=picture_identities(directory))
