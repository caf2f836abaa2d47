import pytest

from devlife.board import Board, build_path
from devlife.tiles import (
    EmptyTile,
    LifeEventTile,
    MoneyTile,
    MoveBackwardTile,
    MoveForwardTile,
    PowerupTile,
)


def _position_of(board, cell):
    return board.path.index(cell)


def test_path_starts_top_left():
    assert build_path(11, 13)[0] == (0, 0)


def test_path_cells_are_adjacent_and_unique():
    path = build_path(11, 13)
    assert len(set(path)) == len(path)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_path_covers_every_even_row():
    path = build_path(11, 13)
    for row in range(0, 11, 2):
        assert {col for r, col in path if r == row} == set(range(13))


def test_odd_rows_have_single_drop_cell():
    path = build_path(11, 13)
    for row in range(1, 11, 2):
        drops = [col for r, col in path if r == row]
        assert len(drops) == 1
        assert drops[0] in (0, 12)


def test_path_ends_on_last_row():
    path = build_path(11, 13)
    assert path[-1][0] == 10


@pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3)])
def test_build_path_rejects_empty(rows, cols):
    with pytest.raises(ValueError):
        build_path(rows, cols)


def test_board_length_matches_path():
    board = Board()
    assert len(board) == len(board.path)
    assert board.last_position == len(board.path) - 1


@pytest.mark.parametrize(
    "cell,kind_name",
    [
        ((0, 12), "MoveBackwardTile"),
        ((0, 2), "MoveForwardTile"),
        ((0, 8), "MoneyTile"),
        ((2, 10), "LifeEventTile"),
        ((0, 4), "PowerupTile"),
        ((4, 2), "SuperMoneyTile"),
        ((10, 5), "SuperMoneyTile"),
        ((0, 0), "EmptyTile"),
    ],
)
def test_special_tiles_placed(cell, kind_name):
    board = Board()
    tile = board.tile_at(_position_of(board, cell))
    assert type(tile).__name__ == kind_name


def test_coordinates_round_trip():
    board = Board()
    for position, cell in enumerate(board.path):
        assert board.coordinates(position) == cell


@pytest.mark.parametrize("position", [-1, 10_000])
def test_off_board_position_raises(position):
    board = Board()
    with pytest.raises(IndexError):
        board.tile_at(position)
    with pytest.raises(IndexError):
        board.coordinates(position)


def test_playable_cells_are_path_cells():
    board = Board()
    for row in range(board.rows):
        for col in range(board.cols):
            assert board.is_playable_cell(row, col) == ((row, col) in board.path)


def test_small_board_skips_out_of_range_specials():
    board = Board(3, 3)
    assert len(board) == len(build_path(3, 3))
    assert all(isinstance(t, (EmptyTile, PowerupTile, MoveForwardTile, MoneyTile,
                              MoveBackwardTile, LifeEventTile)) for row in board.grid for t in row)


def test_render_shape():
    board = Board()
    lines = board.render().split("\n")
    assert len(lines) == board.rows
    assert all(len(line) == board.cols for line in lines)


def test_render_marks_players():
    board = Board()
    lines = board.render({"A": 0, "B": board.last_position}).split("\n")
    assert lines[0][0] == "A"
    r, c = board.coordinates(board.last_position)
    assert lines[r][c] == "B"


def test_render_shared_tile():
    board = Board()
    assert board.render({"A": 0, "B": 0})[0] == "*"


def test_render_ignores_off_board_markers():
    board = Board()
    assert board.render({"A": -5}) == board.render()


def test_render_unplayable_cells():
    board = Board()
    lines = board.render().split("\n")
    assert lines[1][0] == "#"
    assert lines[0][12] == "<"