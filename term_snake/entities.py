"""
entities.py — Game state classes for term_snake.
"""

import random
from typing import NamedTuple, Optional

from term_snake.constants import BOARD_HEIGHT, BOARD_WIDTH


class Point(NamedTuple):
    """An (x, y) board coordinate.  Also used as a direction vector."""

    x: int
    y: int

    def shifted(self, delta: "Point") -> "Point":
        return Point(self.x + delta.x, self.y + delta.y)

    def reversed(self) -> "Point":
        return Point(-self.x, -self.y)


class Snake:
    """
    The player's snake.

    Attributes
    ----------
    body      : list  – [Point, ...] ordered **head → tail**.
                        body[0] is always the HEAD.
    direction : Point – unit vector applied on the next tick.
    """

    def __init__(self, body: list, direction: Point):
        self.body      = [Point(*p) for p in body]
        self.direction = Point(*direction)

    @property
    def head(self) -> Point:
        """The frontmost segment."""
        return self.body[0]

    def __len__(self):
        return len(self.body)


class Game:
    """
    Everything one run of the game needs to know.

    The instance is created once per process, reset in place by
    ``engine.init_game`` on restart, and only ever mutated from the
    main loop thread.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT,
                 rng: Optional[random.Random] = None):
        self.width     = width
        self.height    = height
        self.snake     = Snake([(width // 2, height // 2)], (1, 0))
        self.food      = Point(0, 0)
        self.score     = 0
        self.game_over = False
        self.quit      = False
        self.rng       = rng or random.Random()

    def __repr__(self):
        return (
            f"<Game {self.width}x{self.height} score={self.score} "
            f"len={len(self.snake)} over={self.game_over} quit={self.quit}>"
        )
