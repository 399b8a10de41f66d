"""Session state for one flashcard presenter"""

from dataclasses import dataclass
from enum import Enum


class PresenterState(str, Enum):
    """Lifecycle of a presenter session"""

    IDLE = "idle"
    ACTIVE = "active"


@dataclass
class SessionState:
    """Currently displayed entry; not persisted across sessions"""

    current_index: int | None = None

    @property
    def has_current(self) -> bool:
        return self.current_index is not None

    def reset(self) -> None:
        self.current_index = None
