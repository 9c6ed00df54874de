"""Snake board state: the snake, the food, obstacles and collision rules."""

from __future__ import annotations

import curses
import random
from dataclasses import dataclass
from enum import Enum

MAX_SNAKE_LENGTH = 100
INITIAL_LENGTH = 5
OBSTACLE_CHAR = "X"
BODY_CHAR = "o"
BORDER_CHAR = "#"


@dataclass(frozen=True)
class Point:
    """A cell on the board."""

    x: int
    y: int


class Direction(Enum):
    """Movement direction as a (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


_KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}


def obstacle_placements(obstacle_level: int) -> int:
    """Number of obstacles placed for an obstacle level."""
    return {1: 10, 2: 20}.get(obstacle_level, 0)


def score_gain(obstacle_level: int) -> int:
    """Points earned per fruit for an obstacle level."""
    return {0: 10, 1: 20}.get(obstacle_level, 30)


def _color(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _put(window, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


class Game:
    """A game of snake on a bordered board of the given size."""

    def __init__(self, height: int, width: int, obstacle_level: int = 0,
                 rng: random.Random | None = None) -> None:
        if height < 3 or width < 3:
            raise ValueError("board must be at least 3x3")
        self.height = height
        self.width = width
        self.obstacle_level = obstacle_level
        self.rng = rng if rng is not None else random.Random()
        self.direction = Direction.RIGHT
        self.score = 0
        self.game_over = False
        self.snake = [Point(width // 2 - i, height // 2) for i in range(INITIAL_LENGTH)]
        self.food = self._random_cell()
        self.obstacles = self._generate_obstacles()

    @property
    def head(self) -> Point:
        return self.snake[0]

    def _random_cell(self) -> Point:
        return Point(self.rng.randrange(self.width - 2) + 1,
                     self.rng.randrange(self.height - 2) + 1)

    def _generate_obstacles(self) -> list[Point]:
        obstacles = []
        for _ in range(obstacle_placements(self.obstacle_level)):
            cell = self._random_cell()
            while cell == self.food:
                cell = self._random_cell()
            obstacles.append(cell)
        return obstacles

    def turn(self, direction: Direction) -> None:
        """Change direction unless it would reverse the snake onto itself."""
        if direction is not self.direction.opposite:
            self.direction = direction

    def handle_key(self, key: int) -> None:
        """Turn according to an arrow key; other keys are ignored."""
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.turn(direction)

    def _collides(self, cell: Point) -> bool:
        if not (0 < cell.x < self.width - 1 and 0 < cell.y < self.height - 1):
            return True
        return cell in self.snake or cell in self.obstacles

    def update(self) -> None:
        """Advance the snake one step, eating food or ending the game."""
        new_head = Point(self.head.x + self.direction.dx, self.head.y + self.direction.dy)
        if self._collides(new_head):
            self.game_over = True
            return
        tail = self.snake[-1]
        self.snake = [new_head, *self.snake[:-1]]
        if new_head == self.food:
            if len(self.snake) < MAX_SNAKE_LENGTH:
                self.snake.append(tail)
            self.food = self._random_cell()
            self.score += score_gain(self.obstacle_level)

    def draw(self, window, head_char: str, fruit_char: str) -> None:
        """Render the board, the snake, the food and the score onto a window."""
        window.erase()
        for x in range(self.width):
            _put(window, 0, x, BORDER_CHAR)
            _put(window, self.height - 1, x, BORDER_CHAR)
        for y in range(self.height):
            _put(window, y, 0, BORDER_CHAR)
            _put(window, y, self.width - 1, BORDER_CHAR)
        for cell in self.obstacles:
            _put(window, cell.y, cell.x, OBSTACLE_CHAR)
        snake_attr = _color(1)
        for index, cell in enumerate(self.snake):
            _put(window, cell.y, cell.x, head_char if index == 0 else BODY_CHAR, snake_attr)
        _put(window, self.food.y, self.food.x, fruit_char, _color(2))
        _put(window, self.height, 0, f"Score: {self.score}")
        window.refresh()