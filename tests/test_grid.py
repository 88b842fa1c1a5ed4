"""
Tests for puzzlegraph.domains.grid: parsing, lookups, garden-plot counting, routes.
"""

import pytest

from puzzlegraph.domains.grid import (
    DOWN, LEFT, RIGHT, UP, Grid, count_reachable, inverse, shortest_route, step,
)

GARDEN = """\
...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
"""

MAZE = """\
S.#.
.##.
...E
"""


@pytest.fixture
def garden():
    return Grid.parse(GARDEN)


def test_parse_dimensions_and_start(garden):
    assert (garden.width, garden.height) == (11, 11)
    assert garden.find("S") == (5, 5)
    assert garden.get((5, 1)) == "#"


def test_get_outside_is_none(garden):
    assert garden.get((-1, 0)) is None
    assert garden.get((11, 0)) is None
    assert not garden.contains((0, 11))


def test_find_all_returns_xy():
    g = Grid(["a.a", "..a"])
    assert g.find_all("a") == [(0, 0), (2, 0), (2, 1)]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Grid(["...", ".."])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        Grid.parse("\n\n")


def test_missing_tile_rejected(garden):
    with pytest.raises(ValueError):
        garden.find("E")


def test_adjacent_respects_bounds_and_order():
    g = Grid(["...", "...", "..."])
    assert list(g.adjacent((1, 1))) == [(1, 0), (2, 1), (1, 2), (0, 1)]
    assert list(g.adjacent((0, 0))) == [(1, 0), (0, 1)]


def test_directions_helpers():
    assert step((2, 2), UP) == (2, 1)
    assert step((2, 2), RIGHT, 3) == (5, 2)
    assert inverse(LEFT) == RIGHT
    assert inverse(DOWN) == UP


def test_cost_and_weighted_neighbors():
    g = Grid(["12", "34"])
    assert g.cost((1, 1)) == 4
    assert g.weighted_neighbors((0, 0)) == [((1, 0), 2), ((0, 1), 3)]


def test_cost_rejects_non_digit(garden):
    with pytest.raises(ValueError):
        garden.cost((0, 0))


@pytest.mark.parametrize("steps, expected", [(0, 1), (1, 2), (2, 4), (6, 16)])
def test_count_reachable_garden(garden, steps, expected):
    assert count_reachable(garden, steps) == expected


def test_shortest_route_runs_start_to_goal():
    g = Grid.parse(MAZE)
    route = shortest_route(g, g.find("S"), g.find("E"))
    assert route[0] == (0, 0)
    assert route[-1] == (3, 2)
    assert len(route) == 6
    assert all(g.get(p) != "#" for p in route)


def test_shortest_route_none_when_blocked():
    g = Grid(["S#E"])
    assert shortest_route(g, (0, 0), (2, 0)) is None
