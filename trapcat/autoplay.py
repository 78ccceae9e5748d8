"""
Simulated players. Drives a Game end-to-end without a presentation layer:
  - "random": click any legal cell
  - "block": wall the cell the cat is about to step onto
"""
from __future__ import annotations

import logging
import random
from typing import Protocol

from trapcat.config import GameConfig, load_game_config
from trapcat.game import Game, GameState
from trapcat.grid import Position
from trapcat.logger import GameLogger

logger = logging.getLogger("trapcat.autoplay")

# ---------------------------------------------------------------------------
# Click provider protocol
# ---------------------------------------------------------------------------

class ClickProvider(Protocol):
    def __call__(self, game: Game) -> Position: ...


def _legal_clicks(game: Game) -> list[Position]:
    return [
        (i, j)
        for i in range(game.grid.width)
        for j in range(game.grid.height)
        if game.grid.is_open((i, j)) and (i, j) != game.cat.position
    ]


def random_click_provider(game: Game) -> Position:
    """Uniformly random legal cell."""
    return random.choice(_legal_clicks(game))


def blocking_click_provider(game: Game) -> Position:
    """Wall the cat's next step. Falls back to a random cell if it has none."""
    target = game.cat.choose_move()
    if target is None:
        return random_click_provider(game)
    return target


CLICK_PROVIDERS: dict[str, ClickProvider] = {
    "random": random_click_provider,
    "block": blocking_click_provider,
}


# ---------------------------------------------------------------------------
# Game loop
# ---------------------------------------------------------------------------

def run_game(
    config: GameConfig | None = None,
    click_provider: ClickProvider | None = None,
    verbose: bool = True,
    max_turns: int | None = None,
    game_logger: GameLogger | None = None,
) -> Game:
    """Play clicks until the game ends. Every accepted click adds a wall, so it always does."""
    if config is None:
        config = load_game_config()
    if click_provider is None:
        click_provider = random_click_provider
    if max_turns is None:
        max_turns = config.width * config.height

    game = Game(config)
    if game_logger is not None:
        game_logger.set_config(config.model_dump(mode="json"))

    if verbose:
        print(f"=== TRAPCAT: {config.width}x{config.height} grid, cat at {game.cat.position} ===")
        print(game.grid.render_ascii(game.cat.position))
        print()

    while game.state == GameState.PLAYING and game.turn < max_turns:
        click = click_provider(game)
        result = game.on_player_click(*click)
        if game_logger is not None:
            game_logger.log_click(click, result, game.cat.position)
        if not result.accepted and result.reason is not None:
            logger.warning("provider chose rejected cell %s: %s", click, result.reason.value)
            break
        if verbose:
            print(f"--- Turn {game.turn}: wall at {click}, cat at {game.cat.position} ---")
            print(game.grid.render_ascii(game.cat.position))
            print()

    if game_logger is not None:
        game_logger.set_result(game)

    if verbose:
        print(f"=== {game.status} ({game.state.value}, {game.turn} turns) ===")

    return game
