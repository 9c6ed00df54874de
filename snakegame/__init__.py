"""A terminal snake game with a settings menu and a local leaderboard."""

__version__ = "1.0.0"