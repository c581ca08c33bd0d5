from __future__ import annotations

import random
from typing import Sequence

from esper import World

from memory_game.components.tile import Glyph, Tile
from memory_game.config import GameConfig
from memory_game.events.bus import EVENT_TILE_CLICK, EventBus
from memory_game.systems.board_ops import get_entity_at
from memory_game.systems.selection_system import SelectionSystem
from memory_game.world import create_world


class FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def arrange_faces(world: World, layout: Sequence[str]) -> None:
    """Overwrite the shuffled faces row by row, e.g. ``["AB", "BA"]``."""
    for row, faces in enumerate(layout):
        for col, face in enumerate(faces):
            entity = get_entity_at(world, row, col)
            assert entity is not None, f"no tile at ({row}, {col})"
            world.component_for_entity(entity, Tile).identity = Glyph(face)


def build_game(
    layout: Sequence[str] | None = None,
    *,
    rows: int = 2,
    cols: int = 2,
    rollback_delay_ms: int = 1000,
    seed: int = 7,
):
    """World + bus + SelectionSystem on a fake clock, optionally with a fixed layout."""
    if layout is not None:
        rows, cols = len(layout), len(layout[0])
    bus = EventBus()
    config = GameConfig(rows=rows, cols=cols, rollback_delay_ms=rollback_delay_ms)
    world = create_world(bus, config, rng=random.Random(seed))
    if layout is not None:
        arrange_faces(world, layout)
    clock = FakeClock()
    selection = SelectionSystem(world, bus, rollback_delay_ms=rollback_delay_ms, clock=clock)
    return bus, world, selection, clock


def click(bus: EventBus, row: int, col: int) -> None:
    bus.emit(EVENT_TILE_CLICK, row=row, col=col)
