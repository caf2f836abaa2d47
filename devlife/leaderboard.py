"""A CSV leaderboard of total earnings per player name."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

DEFAULT_PATH = "leaderboard.csv"
DEFAULT_LIMIT = 10

_INT_RE = re.compile(r"[+-]?\d+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _to_int(text: str) -> int:
    """Parse an integer the lenient way the file format allows: bad values are 0."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def _read_rows(path: str | os.PathLike[str]) -> list[tuple[str, int]]:
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []
    rows = []
    for line in lines:
        parts = line.split(",")
        if len(parts) == 2:
            rows.append((parts[0], _to_int(parts[1])))
    return rows


def load_totals(path: str | os.PathLike[str] = DEFAULT_PATH) -> dict[str, int]:
    """Read the totals from ``path``; a missing file gives no entries.

    Lines that are not exactly ``name,total`` are skipped; a later line for the
    same name replaces an earlier one.
    """
    return dict(_read_rows(path))


def add_earnings(path: str | os.PathLike[str], name: str, money: int) -> int:
    """Add ``money`` to ``name``'s total, rewrite the file sorted by name, return the new total."""
    totals = load_totals(path)
    totals[name] = totals.get(name, 0) + money
    with open(path, "w", encoding="utf-8") as handle:
        for player in sorted(totals):
            handle.write(f"{player},{totals[player]}\n")
    return totals[name]


def top_entries(
    path: str | os.PathLike[str] = DEFAULT_PATH, limit: int = DEFAULT_LIMIT
) -> list[tuple[str, int]]:
    """Return up to ``limit`` (name, total) pairs, richest first."""
    entries = [(name.strip(), money) for name, money in _read_rows(path)]
    entries.sort(key=lambda entry: entry[1], reverse=True)
    return entries[:limit]


def format_leaderboard(entries: Iterable[tuple[str, int]]) -> str:
    """Render ranked entries as the leaderboard's rich-text table."""
    parts = [
        " <b>Leaderboard</b> \u2013 <i>Forbes Top List</i><br><br>",
        "<table width='100%' style='font-family: monospace;'>"
        "<tr><th align='left'>Rank</th><th align='left'>Name</th>"
        "<th align='right'>Total $</th></tr>",
    ]
    for rank, (name, money) in enumerate(entries, start=1):
        parts.append(
            f"<tr><td>{rank}.</td><td>{name}</td><td align='right'>${money}</td></tr>"
        )
    parts.append("</table>")
    return "".join(parts)