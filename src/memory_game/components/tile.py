from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Glyph:
    """Text face; rendered as the character itself."""
    value: str


@dataclass(frozen=True, slots=True)
class Picture:
    """Image face referenced by file path; decoded only by the renderer."""
    path: str


TileIdentity = Union[Glyph, Picture]


@dataclass(slots=True)
class Tile:
    """Per-tile face and visibility.

    ``identity`` is shared by exactly two tiles on the board and never changes.
    ``revealed`` is flipped only by the SelectionSystem.
    """
    identity: TileIdentity
    revealed: bool = False
