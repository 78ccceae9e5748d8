"""
Status-bar text shown to the player.
"""
from __future__ import annotations

START = "Click the dots to trap the cat"
GAME_OVER = "The game is over, starting a new one"
NO_SUCH_CELL = "There is no cell at ({i}, {j})"
ALREADY_WALL = "That cell is already a wall"
CAT_CELL = "The cat is standing there"
CLICKED = "You clicked ({i}, {j})"
WIN = "The cat has nowhere to go, you win"
CAT_GIVES_UP = "The cat gives up, you win!"
LOSE = "The cat reached the edge of the board, you lose"
