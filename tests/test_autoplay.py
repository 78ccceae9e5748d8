"""Tests for simulated players, the game runner and the JSON transcript."""
import json
import random

from trapcat.autoplay import (
    CLICK_PROVIDERS,
    blocking_click_provider,
    random_click_provider,
    run_game,
)
from trapcat.config import GameConfig
from trapcat.game import Game, GameState
from trapcat.logger import GameLogger


# ---------------------------------------------------------------------------
# Click providers
# ---------------------------------------------------------------------------

class TestProviders:
    def test_random_picks_legal_cell(self):
        random.seed(3)
        game = Game(GameConfig(width=5, height=5))
        game.grid.set_wall(0, 0)
        for _ in range(50):
            pos = random_click_provider(game)
            assert game.grid.is_open(pos)
            assert pos != game.cat.position

    def test_blocking_targets_next_step(self):
        game = Game(GameConfig(width=7, height=7))
        assert blocking_click_provider(game) == game.cat.choose_move()

    def test_registry(self):
        assert set(CLICK_PROVIDERS) == {"random", "block"}


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class TestRunGame:
    def test_random_game_finishes(self):
        random.seed(7)
        game = run_game(GameConfig(width=7, height=7), random_click_provider, verbose=False)
        assert game.state in (GameState.WIN, GameState.LOSE)
        assert game.grid.wall_count == game.turn

    def test_blocking_game_finishes(self):
        random.seed(7)
        game = run_game(GameConfig(), blocking_click_provider, verbose=False)
        assert game.state in (GameState.WIN, GameState.LOSE)

    def test_max_turns(self):
        game = run_game(
            GameConfig(width=9, height=9),
            lambda g: (0, 0) if g.turn == 0 else (8, 8),
            verbose=False,
            max_turns=2,
        )
        assert game.turn == 2

    def test_stops_on_rejected_click(self):
        game = run_game(GameConfig(width=9, height=9), lambda g: (20, 20), verbose=False)
        assert game.turn == 0
        assert game.state == GameState.PLAYING

    def test_verbose_prints_board(self, capsys):
        random.seed(1)
        run_game(GameConfig(width=5, height=5), random_click_provider, verbose=True)
        out = capsys.readouterr().out
        assert "TRAPCAT: 5x5" in out
        assert "C" in out


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------

class TestGameLogger:
    def test_records_every_click(self):
        random.seed(11)
        game_logger = GameLogger()
        game = run_game(
            GameConfig(width=7, height=7),
            random_click_provider,
            verbose=False,
            game_logger=game_logger,
        )
        assert len(game_logger.turns) == game.turn
        assert game_logger.config_snapshot["width"] == 7
        assert game_logger.result["state"] == game.state.value
        assert game_logger.turns[-1]["state"] == game.state.value

    def test_save(self, tmp_path):
        game_logger = GameLogger()
        run_game(
            GameConfig(width=5, height=5),
            blocking_click_provider,
            verbose=False,
            game_logger=game_logger,
        )
        path = game_logger.save(tmp_path / "games" / "g.json")
        data = json.loads(path.read_text())
        assert set(data) == {"start_time", "config", "turns", "result"}
        assert data["config"]["cat_start"] is None
        assert data["result"]["state"] in ("win", "lose")
        assert len(data["turns"][0]["click"]) == 2
