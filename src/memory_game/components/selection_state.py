from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class SelectionPhase(Enum):
    IDLE = auto()
    ONE_SELECTED = auto()
    PAIR_MATCHED = auto()
    PAIR_MISMATCHED = auto()


@dataclass(slots=True)
class SelectionState:
    """Memory of the current turn.

    Pending slots hold tile entity ids, never copies of the tiles. The phase is
    derived from the slots so it cannot drift out of sync with them.
    """

    hidden_count: int
    pending_first: Optional[int] = None
    pending_second: Optional[int] = None
    needs_rollback: bool = False
    reveal_deadline: Optional[float] = None
    attempts: int = 0

    @property
    def phase(self) -> SelectionPhase:
        if self.pending_first is None:
            return SelectionPhase.IDLE
        if self.pending_second is None:
            return SelectionPhase.ONE_SELECTED
        if self.needs_rollback:
            return SelectionPhase.PAIR_MISMATCHED
        return SelectionPhase.PAIR_MATCHED

    def accepts_selection(self) -> bool:
        return self.phase in (SelectionPhase.IDLE, SelectionPhase.ONE_SELECTED)

    def clear_pending(self) -> None:
        self.pending_first = None
        self.pending_second = None
        self.needs_rollback = False
        self.reveal_deadline = None
