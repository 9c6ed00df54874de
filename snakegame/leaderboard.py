"""Persistent top-ten leaderboard stored as a plain text file."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from pathlib import Path

MAX_LEADERBOARD = 10
MAX_NAME_LENGTH = 32
DEFAULT_FILE = "leaderboard.txt"


@dataclass
class ScoreEntry:
    """A player's name and score."""

    name: str
    score: int


@dataclass
class Leaderboard:
    """Best scores, highest first, saved as 'name score' lines."""

    path: Path | str = DEFAULT_FILE
    entries: list[ScoreEntry] = field(default_factory=list)

    def __init__(self, path: Path | str = DEFAULT_FILE) -> None:
        self.path = Path(path)
        self.entries = []

    def load(self) -> None:
        """Read entries from the file; a missing or unreadable file is ignored."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return
        tokens = text.split()
        entries = []
        for name, raw_score in zip(tokens[::2], tokens[1::2]):
            try:
                score = int(raw_score)
            except ValueError:
                break
            entries.append(ScoreEntry(name, score))
            if len(entries) >= MAX_LEADERBOARD:
                break
        self.entries = entries

    def save(self) -> None:
        """Write entries to the file; write failures are ignored."""
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                for entry in self.entries:
                    handle.write(f"{entry.name} {entry.score}\n")
        except OSError:
            pass

    def add(self, name: str, score: int) -> None:
        """Insert a score in rank order, keep the top entries and save."""
        name = (name or "unknown")[: MAX_NAME_LENGTH - 1]
        entry = ScoreEntry(name, score)
        position = next(
            (index for index, existing in enumerate(self.entries) if score > existing.score),
            len(self.entries),
        )
        self.entries.insert(position, entry)
        del self.entries[MAX_LEADERBOARD:]
        self.save()

    def format_lines(self) -> list[str]:
        """Ranked lines as shown on screen."""
        return [
            f"{rank:2d}. {entry.name:<10} {entry.score:5d}"
            for rank, entry in enumerate(self.entries, start=1)
        ]

    def show(self, window) -> None:
        """Display the leaderboard and wait for a key."""
        window.clear()
        _put(window, 1, 13, "Leaderboard:")
        for offset, line in enumerate(self.format_lines()):
            _put(window, 3 + offset, 8, line)
        _put(window, 15, 6, "Press any key to exit...")
        window.refresh()
        window.getch()


def _put(window, y: int, x: int, text: str) -> None:
    try:
        window.addstr(y, x, text)
    except curses.error:
        pass