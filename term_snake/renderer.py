"""
renderer.py — Terminal rendering for term_snake.

Turns the game state into one text frame and writes it to the
terminal.  Rendering never mutates the game.
"""

import sys

from term_snake.constants import (
    CLEAR_SCREEN, EMPTY_CHAR, FOOD_CHAR, GAME_OVER_LINES, SNAKE_CHAR,
    STATUS_LINE, WALL_CHAR,
)
from term_snake.entities import Game


def _board_rows(game: Game) -> list:
    """Return the board as a list of strings, one per row."""
    w, h = game.width, game.height
    board = []
    for y in range(h):
        row = []
        for x in range(w):
            on_border = y == 0 or y == h - 1 or x == 0 or x == w - 1
            row.append(WALL_CHAR if on_border else EMPTY_CHAR)
        board.append(row)

    # Snake is drawn last so it wins any overlap with the food.
    board[game.food.y][game.food.x] = FOOD_CHAR
    for x, y in game.snake.body:
        board[y][x] = SNAKE_CHAR

    return ["".join(row) for row in board]


def build_frame(game: Game) -> str:
    """Return the full frame text, screen-clear sequence included."""
    lines = [STATUS_LINE.format(score=game.score)]
    lines.extend(_board_rows(game))
    if game.game_over:
        lines.extend(line.format(score=game.score) for line in GAME_OVER_LINES)
    return CLEAR_SCREEN + "\n".join(lines) + "\n"


def render(game: Game, out=None):
    """Write the current frame to *out* (stdout by default)."""
    if out is None:
        out = sys.stdout
    out.write(build_frame(game))
    out.flush()
