"""
JSON transcript logging. One file per game in data/games/.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from trapcat.game import ClickResult, Game


# ---------------------------------------------------------------------------
# Game logger
# ---------------------------------------------------------------------------

class GameLogger:
    """Accumulates a full game transcript and writes it to JSON."""

    def __init__(self) -> None:
        self.config_snapshot: dict = {}
        self.turns: list[dict] = []
        self.result: dict = {}
        self.start_time: str = datetime.now(timezone.utc).isoformat()

    def set_config(self, config_dict: dict) -> None:
        self.config_snapshot = config_dict

    def log_click(
        self,
        click: tuple[int, int],
        result: ClickResult,
        cat_position: tuple[int, int],
    ) -> None:
        """Log a single click and where it left the cat."""
        self.turns.append({
            "click": list(click),
            "accepted": result.accepted,
            "reason": result.reason.value if result.reason is not None else None,
            "cat_position": list(cat_position),
            "state": result.state.value,
        })

    def set_result(self, game: Game) -> None:
        self.result = {
            "state": game.state.value,
            "total_turns": game.turn,
            "walls": game.grid.wall_count,
            "cat_position": list(game.cat.position),
        }

    def to_dict(self) -> dict:
        return {
            "start_time": self.start_time,
            "config": self.config_snapshot,
            "turns": self.turns,
            "result": self.result,
        }

    def save(self, path: Path | str | None = None) -> Path:
        """Write transcript to JSON. Returns the file path."""
        if path is None:
            data_dir = Path(__file__).resolve().parent.parent / "data" / "games"
            data_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            path = data_dir / f"game_{timestamp}.json"

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

        return path
