import pytest

from devlife.results import bar_graph, results_summary


def _bar_rows(graph: str) -> tuple[int, int]:
    rows = graph.split("\n")[:-2]
    half = len(rows[0]) // 2
    left = sum(1 for row in rows if "#" in row[:half])
    right = sum(1 for row in rows if "#" in row[half:])
    return left, right


def test_summary_matches_source_format():
    assert results_summary(2, 3) == "Games played: 2 / 5"


def test_summary_with_nothing_remaining():
    assert results_summary(4, 0) == "Games played: 4 / 4"


def test_graph_line_count_follows_height():
    graph = bar_graph(1, 1, 6)
    assert len(graph.split("\n")) == 6 + 3


def test_graph_labels_on_last_line():
    last = bar_graph(2, 5, 4).split("\n")[-1]
    assert "CPU 1" in last
    assert "CPU 2" in last
    assert last.index("CPU 1") < last.index("CPU 2")


def test_equal_wins_give_equal_bars():
    left, right = _bar_rows(bar_graph(3, 3, 8))
    assert left == right
    assert left > 0


def test_no_wins_draws_no_bars():
    graph = bar_graph(0, 0, 5)
    assert "#" not in graph
    assert _bar_rows(graph) == (0, 0)


def test_all_wins_fill_full_height():
    height = 7
    left, right = _bar_rows(bar_graph(5, 0, height))
    assert left == height
    assert right == 0


def test_more_wins_give_taller_bar():
    left, right = _bar_rows(bar_graph(9, 2, 10))
    assert left > right


def test_counts_are_written():
    graph = bar_graph(12, 34, 10)
    assert "12" in graph
    assert "34" in graph


def test_rows_have_equal_width():
    lines = bar_graph(4, 1, 6).split("\n")
    assert len({len(line) for line in lines}) == 1


@pytest.mark.parametrize("height", [0, -3])
def test_bad_height_rejected(height):
    with pytest.raises(ValueError):
        bar_graph(1, 1, height)


def test_negative_wins_rejected():
    with pytest.raises(ValueError):
        bar_graph(-1, 2, 5)