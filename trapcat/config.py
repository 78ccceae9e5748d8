"""
Configuration models. Loaded from config.yaml, validated via Pydantic.
Nothing is hardcoded anywhere else.
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator, model_validator


class GameConfig(BaseModel):
    width: int = 11
    height: int = 11
    cell_radius: float = 20.0     # pixels, presentation layer only
    cat_start: tuple[int, int] | None = None

    @field_validator("width", "height")
    @classmethod
    def at_least_three(cls, v: int) -> int:
        if v < 3:
            raise ValueError(f"grid dimensions must be at least 3, got {v}")
        return v

    @field_validator("cell_radius")
    @classmethod
    def radius_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"cell_radius must be positive, got {v}")
        return v

    @model_validator(mode="after")
    def start_in_interior(self) -> GameConfig:
        """The cat has to start off the boundary, otherwise it has already escaped."""
        if self.cat_start is None:
            return self
        i, j = self.cat_start
        if not (0 < i < self.width - 1 and 0 < j < self.height - 1):
            raise ValueError(
                f"cat_start {self.cat_start} must be an interior cell of a "
                f"{self.width}x{self.height} grid"
            )
        return self

    @property
    def start_position(self) -> tuple[int, int]:
        if self.cat_start is not None:
            return self.cat_start
        return (self.width // 2, self.height // 2)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def load_game_config(path: Path | str | None = None) -> GameConfig:
    """Load and validate GameConfig from a YAML file."""
    if path is None:
        path = _PROJECT_ROOT / "config.yaml"
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return GameConfig(**raw)
