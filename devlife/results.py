"""Text summaries of multi-game results: games played and a win bar graph."""

from __future__ import annotations

_COLUMN_WIDTH = 7
_GAP = "   "
_FILL = "#"
_LABELS = ("CPU 1", "CPU 2")


def results_summary(games_played: int, games_remaining: int) -> str:
    """Return the "games played" line shown after each game."""
    return f"Games played: {games_played} / {games_played + games_remaining}"


def _bar_height(wins: int, total: int, height: int) -> int:
    return wins * height // total


def _cell(level: int, bar: int, wins: int) -> str:
    if level <= bar:
        return _FILL * _COLUMN_WIDTH
    if level == bar + 1:
        return str(wins).center(_COLUMN_WIDTH)
    return " " * _COLUMN_WIDTH


def bar_graph(p1_wins: int, p2_wins: int, height: int = 10) -> str:
    """Draw the win counts of both players as two vertical bars.

    Bars are scaled so that all wins together fill ``height`` rows; each bar
    has its win count written just above it and a label underneath.
    """
    if height < 1:
        raise ValueError("a bar graph needs a height of at least one row")
    if p1_wins < 0 or p2_wins < 0:
        raise ValueError("win counts cannot be negative")
    total = (p1_wins + p2_wins) or 1
    bars = (
        _bar_height(p1_wins, total, height),
        _bar_height(p2_wins, total, height),
    )
    wins = (p1_wins, p2_wins)

    lines = [
        _GAP.join(_cell(level, bar, count) for bar, count in zip(bars, wins))
        for level in range(height + 1, 0, -1)
    ]
    lines.append("-" * (2 * _COLUMN_WIDTH + len(_GAP)))
    lines.append(_GAP.join(label.center(_COLUMN_WIDTH) for label in _LABELS))
    return "\n".join(lines)