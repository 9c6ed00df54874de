"""Entry point: menu, game loop, name prompt and leaderboard."""

from __future__ import annotations

import argparse
import curses
import time

from snakegame.board import Game
from snakegame.leaderboard import MAX_NAME_LENGTH, Leaderboard
from snakegame.menu import run_menu

WIDTH = 40
HEIGHT = 20


def _put(window, y: int, x: int, text: str) -> None:
    try:
        window.addstr(y, x, text)
    except curses.error:
        pass


def run(stdscr) -> int | None:
    """Play one game on a curses screen; return the final score, or None if quit."""
    settings = run_menu(stdscr)
    if settings is None:
        return None

    stdscr.clear()
    stdscr.nodelay(True)
    stdscr.keypad(True)
    game = Game(HEIGHT, WIDTH, settings.obstacle_level)
    leaderboard = Leaderboard()
    leaderboard.load()

    while not game.game_over:
        game.draw(stdscr, settings.head_char, settings.fruit_char)
        game.handle_key(stdscr.getch())
        game.update()
        time.sleep(settings.delay)

    curses.echo()
    stdscr.nodelay(False)
    stdscr.clear()
    _put(stdscr, HEIGHT // 2 - 1, (WIDTH - 10) // 2, "Game Over!")
    _put(stdscr, HEIGHT // 2, (WIDTH - 18) // 2, f"Final Score: {game.score}")
    _put(stdscr, HEIGHT // 2 + 1, (WIDTH - 25) // 2, "Enter your name: ")
    raw_name = stdscr.getstr(MAX_NAME_LENGTH - 1)
    curses.noecho()
    name = raw_name.decode("utf-8", errors="replace") if isinstance(raw_name, bytes) else raw_name

    leaderboard.add(name, game.score)
    leaderboard.show(stdscr)
    return game.score


def main(argv: list[str] | None = None) -> int:
    """Run the snake game in the terminal."""
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake in the terminal.")
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0