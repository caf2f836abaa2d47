"""The snaking game board: tile layout, the playable path and a text view."""

from __future__ import annotations

from collections.abc import Mapping

from devlife.tiles import Tile, TileType, create_tile

DEFAULT_ROWS = 11
DEFAULT_COLS = 13

_SPECIAL_TILES: dict[tuple[int, int], TileType] = {
    (0, 12): TileType.BACKWARD,
    (2, 3): TileType.BACKWARD,
    (4, 0): TileType.BACKWARD,
    (6, 4): TileType.BACKWARD,
    (8, 3): TileType.BACKWARD,
    (10, 6): TileType.BACKWARD,
    (2, 8): TileType.BACKWARD,
    (6, 6): TileType.BACKWARD,
    (10, 10): TileType.BACKWARD,
    (0, 2): TileType.FORWARD,
    (2, 6): TileType.FORWARD,
    (4, 4): TileType.FORWARD,
    (6, 1): TileType.FORWARD,
    (0, 6): TileType.FORWARD,
    (4, 6): TileType.FORWARD,
    (8, 11): TileType.FORWARD,
    (0, 8): TileType.MONEY,
    (2, 0): TileType.MONEY,
    (4, 3): TileType.MONEY,
    (6, 2): TileType.MONEY,
    (6, 10): TileType.MONEY,
    (8, 5): TileType.MONEY,
    (10, 8): TileType.MONEY,
    (2, 10): TileType.LIFE_EVENT,
    (4, 8): TileType.LIFE_EVENT,
    (6, 12): TileType.LIFE_EVENT,
    (8, 0): TileType.LIFE_EVENT,
    (10, 4): TileType.LIFE_EVENT,
    (2, 12): TileType.LIFE_EVENT,
    (6, 0): TileType.LIFE_EVENT,
    (10, 9): TileType.LIFE_EVENT,
    (0, 4): TileType.POWERUP,
    (2, 1): TileType.POWERUP,
    (4, 10): TileType.POWERUP,
    (6, 7): TileType.POWERUP,
    (8, 9): TileType.POWERUP,
    (4, 2): TileType.SUPER_MONEY,
    (10, 5): TileType.SUPER_MONEY,
}

_SYMBOLS: dict[str, str] = {
    "EmptyTile": ".",
    "MoneyTile": "$",
    "SuperMoneyTile": "S",
    "PowerupTile": "P",
    "MoveForwardTile": ">",
    "MoveBackwardTile": "<",
    "LifeEventTile": "L",
}
UNPLAYABLE_SYMBOL = "#"
CROWDED_SYMBOL = "*"


def build_path(rows: int, cols: int) -> list[tuple[int, int]]:
    """Return the (row, col) cells in play order: right, down, left, down, ..."""
    if rows < 1 or cols < 1:
        raise ValueError("a board needs at least one row and one column")
    path: list[tuple[int, int]] = []
    going_right = True
    for row in range(0, rows, 2):
        columns = range(cols) if going_right else range(cols - 1, -1, -1)
        path.extend((row, col) for col in columns)
        if row + 1 < rows:
            path.append((row + 1, cols - 1 if going_right else 0))
        going_right = not going_right
    return path


class Board:
    """A grid of tiles and the path players follow across it."""

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        self.rows = rows
        self.cols = cols
        self.path = build_path(rows, cols)
        self._playable = set(self.path)
        self.grid: list[list[Tile]] = [
            [create_tile(_SPECIAL_TILES.get((row, col), TileType.EMPTY)) for col in range(cols)]
            for row in range(rows)
        ]

    def __len__(self) -> int:
        return len(self.path)

    @property
    def last_position(self) -> int:
        """Index of the final tile on the path."""
        return len(self.path) - 1

    def coordinates(self, position: int) -> tuple[int, int]:
        """Return the (row, col) cell of a path position."""
        if not 0 <= position < len(self.path):
            raise IndexError(f"position {position} is off the board")
        return self.path[position]

    def tile_at(self, position: int) -> Tile:
        """Return the tile at a path position."""
        row, col = self.coordinates(position)
        return self.grid[row][col]

    def is_playable_cell(self, row: int, col: int) -> bool:
        """Whether the grid cell lies on the path."""
        return (row, col) in self._playable

    def render(self, positions: Mapping[str, int] | None = None) -> str:
        """Draw the board as text, with a marker for each player's position.

        ``positions`` maps a one-character marker to a path position; markers
        whose position is off the board are not drawn. A cell holding more than
        one player shows ``*``.
        """
        occupants: dict[tuple[int, int], list[str]] = {}
        for marker, position in (positions or {}).items():
            if 0 <= position < len(self.path):
                occupants.setdefault(self.path[position], []).append(marker)

        lines = []
        for row in range(self.rows):
            cells = []
            for col in range(self.cols):
                here = occupants.get((row, col))
                if here:
                    cells.append(here[0] if len(here) == 1 else CROWDED_SYMBOL)
                elif not self.is_playable_cell(row, col):
                    cells.append(UNPLAYABLE_SYMBOL)
                else:
                    cells.append(_SYMBOLS.get(self.grid[row][col].type_name, "?"))
            lines.append("".join(cells))
        return "\n".join(lines)