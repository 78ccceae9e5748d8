"""
Notifications fired by the game at the point of each mutation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class EventType(str, Enum):
    STATUS_CHANGED = "status_changed"
    STATE_CHANGED = "state_changed"
    CAT_MOVED = "cat_moved"
    CELL_CHANGED = "cell_changed"


@dataclass
class GameEvent:
    type: EventType
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "details": self.details}


Listener = Callable[[GameEvent], None]
