"""Start menu for choosing speed, symbols, colours and obstacles."""

from __future__ import annotations

import curses
from dataclasses import dataclass

ENTER_KEY = 10
ESCAPE_KEY = 27

_SPEED_LABELS = ("Slow", "Normal", "Fast")
_SPEED_DELAYS = (0.15, 0.1, 0.06)
_HEAD_SYMBOLS = ("@", "%", "O")
_FRUIT_SYMBOLS = ("*", "+", "X")
_COLOR_NAMES = ("Green/Magenta", "Red/Yellow", "Cyan/Blue")
_SNAKE_COLORS = (curses.COLOR_GREEN, curses.COLOR_RED, curses.COLOR_CYAN)
_FRUIT_COLORS = (curses.COLOR_MAGENTA, curses.COLOR_YELLOW, curses.COLOR_BLUE)
_OBSTACLE_LABELS = ("None", "Few", "Many")

_OPTIONS = (
    ("<-- Speed: {} -->", _SPEED_LABELS),
    ("<-- Head:  {} -->", _HEAD_SYMBOLS),
    ("<-- Fruit: {} -->", _FRUIT_SYMBOLS),
    ("<-- Color Theme: {} -->", _COLOR_NAMES),
    ("<-- Obstacles: {} -->", _OBSTACLE_LABELS),
)


@dataclass(frozen=True)
class Settings:
    """Choices made in the menu."""

    delay: float = 0.1
    head_char: str = "@"
    fruit_char: str = "*"
    obstacle_level: int = 0
    snake_color: int = curses.COLOR_GREEN
    fruit_color: int = curses.COLOR_MAGENTA


class Menu:
    """Menu state: the highlighted option and the choice for each option."""

    def __init__(self) -> None:
        self.option = 0
        self.choices = [1, 0, 0, 0, 0]

    def handle_key(self, key: int) -> bool | None:
        """Apply a key: True to start, False to quit, None to keep going."""
        count = len(_OPTIONS)
        if key == curses.KEY_UP:
            self.option = (self.option - 1) % count
        elif key == curses.KEY_DOWN:
            self.option = (self.option + 1) % count
        elif key in (curses.KEY_LEFT, curses.KEY_RIGHT):
            step = -1 if key == curses.KEY_LEFT else 1
            values = _OPTIONS[self.option][1]
            self.choices[self.option] = (self.choices[self.option] + step) % len(values)
        elif key == ENTER_KEY:
            return True
        elif key == ESCAPE_KEY:
            return False
        return None

    def settings(self) -> Settings:
        speed, head, fruit, color, obstacles = self.choices
        return Settings(
            delay=_SPEED_DELAYS[speed],
            head_char=_HEAD_SYMBOLS[head],
            fruit_char=_FRUIT_SYMBOLS[fruit],
            obstacle_level=obstacles,
            snake_color=_SNAKE_COLORS[color],
            fruit_color=_FRUIT_COLORS[color],
        )

    def render_lines(self) -> list[tuple[int, int, str, bool]]:
        """Screen lines as (row, column, text, highlighted)."""
        lines = [(3, 13, "--- Snake Game ---", False)]
        for index, ((template, values), choice) in enumerate(zip(_OPTIONS, self.choices)):
            lines.append((6 + index * 2, 10, template.format(values[choice]), index == self.option))
        lines += [
            (17, 12, "Move with the arrow keys", False),
            (18, 12, "Press Enter to Start", False),
            (19, 12, "Press ESC to Quit", False),
        ]
        return lines


def run_menu(stdscr) -> Settings | None:
    """Show the menu until the player starts (settings) or quits (None)."""
    curses.noecho()
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.start_color()
    menu = Menu()
    while True:
        stdscr.clear()
        for row, col, text, highlighted in menu.render_lines():
            try:
                stdscr.addstr(row, col, text, curses.A_REVERSE if highlighted else 0)
            except curses.error:
                pass
        stdscr.refresh()
        result = menu.handle_key(stdscr.getch())
        if result is True:
            settings = menu.settings()
            curses.init_pair(1, settings.snake_color, curses.COLOR_BLACK)
            curses.init_pair(2, settings.fruit_color, curses.COLOR_BLACK)
            return settings
        if result is False:
            return None