"""
Game state machine. Owns the grid, the cat and the PLAYING/WIN/LOSE state.

Turn order for a click:
  1. Reject clicks off the grid, on walls or on the cat.
  2. Wall the clicked cell.
  3. Player wins if the cat can no longer reach the edge.
  4. Otherwise the cat steps; it concedes (player wins) if it cannot.
  5. Player loses if the cat now stands on the edge.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from trapcat import messages
from trapcat.cat import Cat
from trapcat.config import GameConfig
from trapcat.events import EventType, GameEvent, Listener
from trapcat.grid import HexGrid

logger = logging.getLogger("trapcat.game")


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

class GameState(str, Enum):
    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"


class RejectReason(str, Enum):
    GAME_OVER = "game_over"
    OUT_OF_BOUNDS = "out_of_bounds"
    ALREADY_WALL = "already_wall"
    CAT_POSITION = "cat_position"


@dataclass
class ClickResult:
    accepted: bool
    state: GameState
    reason: RejectReason | None = None


# ---------------------------------------------------------------------------
# Game
# ---------------------------------------------------------------------------

class Game:
    """All state for a single board. Clicks and resets are processed synchronously."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.grid = HexGrid(self.config.width, self.config.height)
        self.cat = Cat(self.grid, self.config.start_position)
        self.state = GameState.PLAYING
        self.status = messages.START
        self.turn = 0
        self.last_reject: RejectReason | None = None
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, etype: EventType, **details: object) -> None:
        event = GameEvent(type=etype, details=details)
        for listener in list(self._listeners):
            listener(event)

    def _set_status(self, message: str) -> None:
        self.status = message
        self._emit(EventType.STATUS_CHANGED, message=message)

    def _set_state(self, state: GameState, message: str | None = None) -> None:
        if state != self.state:
            logger.info("state %s -> %s after %d turns", self.state.value, state.value, self.turn)
            self.state = state
            self._emit(EventType.STATE_CHANGED, state=state.value)
        if message is not None:
            self._set_status(message)

    def _reject(self, reason: RejectReason, message: str) -> bool:
        logger.debug("click rejected: %s", reason.value)
        self.last_reject = reason
        self._set_status(message)
        return False

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------

    def player_click(self, i: int, j: int) -> bool:
        """
        Wall cell (i, j) and let the cat answer.

        Returns True when the click was taken and the turn played out, False
        when it was rejected, when it trapped the cat outright, or when it
        arrived after the game had ended (which starts a new game).
        """
        self.last_reject = None
        if self.state != GameState.PLAYING:
            self._set_status(messages.GAME_OVER)
            self.reset()
            self.last_reject = RejectReason.GAME_OVER
            return False

        cell = self.grid.get_cell(i, j)
        if cell is None:
            return self._reject(RejectReason.OUT_OF_BOUNDS, messages.NO_SUCH_CELL.format(i=i, j=j))
        if cell.is_wall:
            return self._reject(RejectReason.ALREADY_WALL, messages.ALREADY_WALL)
        if self.cat.position == (i, j):
            return self._reject(RejectReason.CAT_POSITION, messages.CAT_CELL)

        self.turn += 1
        self.grid.set_wall(i, j)
        self._emit(EventType.CELL_CHANGED, i=i, j=j, is_wall=True)

        if self.cat.is_caught():
            self._set_state(GameState.WIN, messages.WIN)
            return False

        self._set_status(messages.CLICKED.format(i=i, j=j))
        if not self.cat.step():
            self._set_state(GameState.WIN, messages.CAT_GIVES_UP)
            return True

        self._emit(EventType.CAT_MOVED, position=self.cat.position)
        self.check_escape()
        return True

    def check_escape(self) -> bool:
        """Player loses once the cat stands on the edge of the board."""
        if self.state == GameState.PLAYING and self.cat.is_on_edge():
            self._set_state(GameState.LOSE, messages.LOSE)
            return True
        return False

    def reset(self) -> None:
        """Clear every wall, put the cat back and start playing again."""
        cleared = self.grid.walls()
        self.grid.clear()
        for i, j in cleared:
            self._emit(EventType.CELL_CHANGED, i=i, j=j, is_wall=False)

        if self.cat.position != self.cat.start:
            self.cat.reset()
            self._emit(EventType.CAT_MOVED, position=self.cat.position)

        self.turn = 0
        self._set_state(GameState.PLAYING, messages.START)

    # ------------------------------------------------------------------
    # Presentation-layer entry points
    # ------------------------------------------------------------------

    def on_player_click(self, i: int, j: int) -> ClickResult:
        accepted = self.player_click(i, j)
        return ClickResult(accepted=accepted, state=self.state, reason=self.last_reject)

    def on_reset(self) -> None:
        self.reset()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "status": self.status,
            "turn": self.turn,
            "grid": self.grid.to_dict(),
            "cat": self.cat.to_dict(),
        }
