import curses
import random
from unittest.mock import patch

import pytest

from snakegame.board import (
    MAX_SNAKE_LENGTH,
    Direction,
    Game,
    Point,
    obstacle_placements,
    score_gain,
)


def make_game(level=0, seed=7, height=20, width=40):
    game = Game(height, width, level, random.Random(seed))
    return game


class FakeWindow:
    def __init__(self):
        self.cells = {}
        self.refreshed = 0

    def erase(self):
        self.cells.clear()

    def addstr(self, y, x, text, attr=0):
        self.cells[(y, x)] = text

    def refresh(self):
        self.refreshed += 1


@pytest.mark.parametrize("level,expected", [(0, 0), (1, 10), (2, 20)])
def test_obstacle_placements(level, expected):
    assert obstacle_placements(level) == expected


@pytest.mark.parametrize("level,expected", [(0, 10), (1, 20), (2, 30)])
def test_score_gain(level, expected):
    assert score_gain(level) == expected


def test_initial_snake_is_straight_line_facing_right():
    game = make_game()
    assert len(game.snake) == 5
    assert game.head == Point(game.width // 2, game.height // 2)
    for front, back in zip(game.snake, game.snake[1:]):
        assert back == Point(front.x - 1, front.y)
    assert game.direction is Direction.RIGHT
    assert game.score == 0
    assert game.game_over is False


@pytest.mark.parametrize("level", [0, 1, 2])
def test_obstacles_inside_board_and_not_on_food(level):
    game = make_game(level)
    assert len(game.obstacles) == obstacle_placements(level)
    for cell in game.obstacles + [game.food]:
        assert 1 <= cell.x <= game.width - 2
        assert 1 <= cell.y <= game.height - 2
    assert game.food not in game.obstacles


def test_too_small_board_rejected():
    with pytest.raises(ValueError):
        Game(2, 40, 0, random.Random(1))


def test_turn_ignores_reversal():
    game = make_game()
    game.turn(Direction.LEFT)
    assert game.direction is Direction.RIGHT
    game.turn(Direction.UP)
    assert game.direction is Direction.UP
    game.turn(Direction.DOWN)
    assert game.direction is Direction.UP


def test_handle_key_maps_arrows():
    game = make_game()
    game.handle_key(curses.KEY_DOWN)
    assert game.direction is Direction.DOWN
    game.handle_key(ord("q"))
    assert game.direction is Direction.DOWN
    game.handle_key(curses.KEY_UP)
    assert game.direction is Direction.DOWN


def test_update_moves_one_step():
    game = make_game()
    game.obstacles = []
    game.food = Point(1, 1)
    before = list(game.snake)
    game.update()
    assert game.head == Point(before[0].x + 1, before[0].y)
    assert game.snake[1:] == before[:-1]
    assert game.game_over is False


def test_eating_food_grows_and_scores():
    game = make_game(level=1)
    game.obstacles = []
    game.food = Point(game.head.x + 1, game.head.y)
    game.update()
    assert len(game.snake) == 6
    assert game.score == score_gain(1)
    assert 1 <= game.food.x <= game.width - 2
    assert 1 <= game.food.y <= game.height - 2


def test_wall_collision_ends_game():
    game = make_game()
    game.obstacles = []
    game.food = Point(1, 1)
    steps = 0
    while not game.game_over:
        game.update()
        steps += 1
        assert steps < game.width
    assert game.head.x == game.width - 2


def test_obstacle_collision_ends_game():
    game = make_game()
    game.food = Point(1, 1)
    ahead = Point(game.head.x + 1, game.head.y)
    game.obstacles = [ahead]
    before = list(game.snake)
    game.update()
    assert game.game_over is True
    assert game.snake == before


def test_self_collision_ends_game():
    game = make_game()
    game.obstacles = []
    game.food = Point(1, 1)
    game.snake = [Point(10, 10), Point(11, 10), Point(11, 11), Point(10, 11), Point(9, 11)]
    game.direction = Direction.DOWN
    game.update()
    assert game.game_over is True


def test_length_capped():
    game = Game(5, 200, 0, random.Random(3))
    game.obstacles = []
    game.snake = [Point(150 - i, 2) for i in range(MAX_SNAKE_LENGTH)]
    game.food = Point(151, 2)
    game.update()
    assert len(game.snake) == MAX_SNAKE_LENGTH
    assert game.score == score_gain(0)


def test_draw_places_everything():
    game = make_game(level=1)
    window = FakeWindow()
    with patch("curses.color_pair", return_value=0):
        game.draw(window, "@", "*")
    assert window.cells[(0, 0)] == "#"
    assert window.cells[(game.height - 1, game.width - 1)] == "#"
    assert window.cells[(game.head.y, game.head.x)] == "@"
    assert window.cells[(game.food.y, game.food.x)] == "*"
    for cell in game.obstacles:
        if cell != game.food and cell not in game.snake:
            assert window.cells[(cell.y, cell.x)] == "X"
    assert window.cells[(game.height, 0)] == "Score: 0"
    assert window.refreshed == 1