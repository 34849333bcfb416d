"""
engine.py — Core game logic for term_snake.

Initialization, food placement, the per-tick update and the
translation of input commands into state changes.  No I/O or
rendering happens here.
"""

import logging
import random
from typing import Optional

from term_snake.constants import (
    BOARD_HEIGHT, BOARD_WIDTH, CMD_QUIT, CMD_RESTART, DIR_DELTA,
    START_BODY, START_DIRECTION,
)
from term_snake.entities import Game, Point, Snake

logger = logging.getLogger(__name__)


def new_game(rng: Optional[random.Random] = None) -> Game:
    """Create a Game and put it in its starting configuration."""
    game = Game(rng=rng)
    init_game(game)
    return game


def init_game(game: Game) -> None:
    """
    Reset *game* in place: fixed board, three-segment snake heading
    right, zero score, flags cleared and fresh food.
    """
    game.width     = BOARD_WIDTH
    game.height    = BOARD_HEIGHT
    game.snake     = Snake(START_BODY, START_DIRECTION)
    game.score     = 0
    game.game_over = False
    game.quit      = False
    spawn_food(game)
    logger.debug("game initialised, food at %s", game.food)


def spawn_food(game: Game) -> None:
    """Place food on a random interior cell the snake does not occupy."""
    occupied = set(game.snake.body)
    while True:
        candidate = Point(
            game.rng.randint(1, game.width - 2),
            game.rng.randint(1, game.height - 2),
        )
        if candidate not in occupied:
            game.food = candidate
            return


def _hits_wall(game: Game, p: Point) -> bool:
    return (p.x <= 0 or p.x >= game.width - 1 or
            p.y <= 0 or p.y >= game.height - 1)


def update(game: Game) -> None:
    """
    Advance *game* by one tick.

    The self-collision test runs against the body *before* the tail is
    dropped, so the cell the tail is about to leave still counts as
    occupied.
    """
    if game.game_over or game.quit:
        return

    snake = game.snake
    new_head = snake.head.shifted(snake.direction)

    if _hits_wall(game, new_head):
        logger.debug("wall collision at %s, score %d", new_head, game.score)
        game.game_over = True
        return

    if new_head in snake.body:
        logger.debug("self collision at %s, score %d", new_head, game.score)
        game.game_over = True
        return

    snake.body.insert(0, new_head)

    if new_head == game.food:
        game.score += 1
        spawn_food(game)
    else:
        snake.body.pop()


def change_direction(game: Game, direction) -> None:
    """
    Point the snake in *direction* unless that would turn it straight
    back on itself.  Reversals are silently ignored.
    """
    direction = Point(*direction)
    snake = game.snake
    if direction == snake.direction.reversed():
        return
    snake.direction = direction


def apply_command(game: Game, command: str) -> None:
    """Apply one command produced by the input thread."""
    if command in DIR_DELTA:
        change_direction(game, DIR_DELTA[command])
    elif command == CMD_QUIT:
        game.quit = True
    elif command == CMD_RESTART:
        if game.game_over:
            logger.info("restarting after game over, score was %d", game.score)
            init_game(game)
    else:
        logger.debug("ignoring unknown command %r", command)
