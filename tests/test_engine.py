"""
Tests for term_snake.engine - initialization, movement, collisions
and command handling.
"""

import random

import pytest

from term_snake.constants import BOARD_HEIGHT, BOARD_WIDTH, START_BODY
from term_snake.engine import (
    apply_command, change_direction, init_game, new_game, spawn_food, update,
)
from term_snake.entities import Game, Point, Snake

RIGHT = Point(1, 0)
LEFT = Point(-1, 0)
UP = Point(0, -1)
DOWN = Point(0, 1)


class FixedRng:
    """Stand-in for random.Random that replays a list of integers."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def game():
    """A fresh game with food parked far from the snake."""
    g = new_game(rng=random.Random(1234))
    g.food = Point(30, 3)
    return g


class TestInitGame:
    """Tests for init_game / new_game."""

    def test_initial_configuration(self, game):
        """New game has the fixed board, three-segment snake and zero score."""
        assert (game.width, game.height) == (BOARD_WIDTH, BOARD_HEIGHT)
        assert game.snake.body == [Point(10, 10), Point(9, 10), Point(8, 10)]
        assert game.snake.direction == RIGHT
        assert game.score == 0
        assert game.game_over is False
        assert game.quit is False

    def test_food_spawned_off_snake(self):
        """init_game places food somewhere the snake is not."""
        g = new_game(rng=random.Random(7))
        assert g.food not in g.snake.body
        assert 1 <= g.food.x <= g.width - 2
        assert 1 <= g.food.y <= g.height - 2

    def test_init_is_repeatable(self, game):
        """Calling init_game again resets everything in place."""
        game.score = 12
        game.game_over = True
        game.quit = True
        game.snake = Snake([(5, 5)], UP)
        init_game(game)
        assert game.score == 0
        assert game.game_over is False
        assert game.quit is False
        assert game.snake.body == [Point(*p) for p in START_BODY]


class TestSpawnFood:
    """Tests for spawn_food."""

    def test_retries_until_cell_is_free(self):
        """Samples that land on the body are rejected."""
        g = Game(rng=FixedRng([10, 10, 9, 10, 4, 7]))
        g.snake = Snake(START_BODY, RIGHT)
        spawn_food(g)
        assert g.food == Point(4, 7)

    def test_never_on_body(self):
        """Food never overlaps a long snake."""
        g = Game(rng=random.Random(99))
        g.snake = Snake([(x, 1) for x in range(38, 0, -1)], LEFT)
        for _ in range(200):
            spawn_food(g)
            assert g.food not in g.snake.body

    def test_stays_inside_border(self):
        """Food is only placed on interior cells."""
        g = Game(rng=random.Random(5))
        g.snake = Snake(START_BODY, RIGHT)
        for _ in range(500):
            spawn_food(g)
            assert 0 < g.food.x < g.width - 1
            assert 0 < g.food.y < g.height - 1


class TestUpdate:
    """Tests for update."""

    def test_simple_move(self, game):
        """One tick to the right shifts the whole body."""
        update(game)
        assert game.snake.body == [Point(11, 10), Point(10, 10), Point(9, 10)]
        assert game.game_over is False
        assert game.score == 0

    def test_eating_grows_and_scores(self, game):
        """Landing on food adds one segment and one point."""
        game.food = Point(11, 10)
        update(game)
        assert len(game.snake) == 4
        assert game.snake.body[-1] == Point(8, 10)
        assert game.score == 1
        assert game.food not in game.snake.body

    def test_length_constant_without_food(self, game):
        """Several plain moves keep the length."""
        for _ in range(5):
            update(game)
        assert len(game.snake) == 3
        assert game.snake.head == Point(15, 10)

    @pytest.mark.parametrize("head,direction", [
        ((1, 5), LEFT),
        ((38, 5), RIGHT),
        ((5, 1), UP),
        ((5, 18), DOWN),
    ])
    def test_border_collision(self, game, head, direction):
        """Moving onto the border ends the game without moving."""
        body = [Point(*head)]
        game.snake = Snake(body, direction)
        update(game)
        assert game.game_over is True
        assert game.snake.body == body

    def test_self_collision(self, game):
        """Turning into the body ends the game and leaves the body alone."""
        body = [(10, 10), (11, 10), (11, 11), (10, 11), (9, 11)]
        game.snake = Snake(body, DOWN)
        update(game)
        assert game.game_over is True
        assert game.snake.body == [Point(*p) for p in body]

    def test_vacating_tail_still_blocks(self, game):
        """Chasing your own tail into the cell it is leaving is a collision."""
        body = [(10, 10), (11, 10), (11, 11), (10, 11)]
        game.snake = Snake(body, DOWN)
        update(game)
        assert game.game_over is True
        assert game.snake.body == [Point(*p) for p in body]

    def test_noop_when_quit(self, game):
        """After quitting, update changes nothing."""
        game.quit = True
        before = (list(game.snake.body), game.food, game.score)
        update(game)
        assert (game.snake.body, game.food, game.score) == before
        assert game.game_over is False

    def test_noop_when_game_over(self, game):
        """After a game over, update changes nothing."""
        game.game_over = True
        before = list(game.snake.body)
        update(game)
        assert game.snake.body == before


class TestDirection:
    """Tests for change_direction and apply_command."""

    def test_reverse_is_ignored(self, game):
        """Asking for the opposite direction keeps the current one."""
        change_direction(game, LEFT)
        assert game.snake.direction == RIGHT

    def test_turn_is_accepted(self, game):
        """A perpendicular turn replaces the direction."""
        change_direction(game, UP)
        assert game.snake.direction == UP

    def test_two_quick_turns_can_fold_back(self, game):
        """Up then left within one tick is accepted and runs into the neck."""
        change_direction(game, UP)
        change_direction(game, LEFT)
        assert game.snake.direction == LEFT
        update(game)
        assert game.game_over is True
        assert game.snake.body == [Point(10, 10), Point(9, 10), Point(8, 10)]

    def test_reverse_after_turn_is_ignored(self, game):
        """Once heading up, asking for down is a reversal and is dropped."""
        change_direction(game, UP)
        change_direction(game, DOWN)
        assert game.snake.direction == UP

    def test_last_command_wins(self, game):
        """The final accepted command before a tick is the one used."""
        apply_command(game, "up")
        apply_command(game, "right")
        update(game)
        assert game.snake.head == Point(11, 10)

    def test_quit_command(self, game):
        """'quit' raises the quit flag."""
        apply_command(game, "quit")
        assert game.quit is True

    def test_restart_only_after_game_over(self, game):
        """'restart' is ignored while the game is still running."""
        update(game)
        apply_command(game, "restart")
        assert game.snake.head == Point(11, 10)

    def test_restart_after_game_over(self, game):
        """'restart' after a game over resets score, flags and snake."""
        game.score = 4
        game.game_over = True
        game.snake = Snake([(1, 1)], UP)
        apply_command(game, "restart")
        assert game.score == 0
        assert game.game_over is False
        assert game.snake.body == [Point(*p) for p in START_BODY]
        assert game.snake.direction == RIGHT

    def test_unknown_command_ignored(self, game):
        """Unknown commands do nothing."""
        apply_command(game, "jump")
        assert game.snake.direction == RIGHT
        assert game.quit is False
