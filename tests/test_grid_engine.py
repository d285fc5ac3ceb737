from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from aoc2021.errors import ParseError
from aoc2021.grid_utils import DigitGrid, load_grid, neighbors
from aoc2021.propagation import (
    basin_region,
    basin_size,
    basin_sizes,
    count_flashes,
    distance_matrix,
    first_synchronised_step,
    flash_step,
    low_points,
    lowest_total_risk,
)

HEIGHTMAP = [
    "2199943210",
    "3987894921",
    "9856789892",
    "8767896789",
    "9899965678",
]

OCTOPUSES = [
    "5483143223",
    "2745854711",
    "5264556173",
    "6141336146",
    "6357385478",
    "4167524645",
    "2176841721",
    "6882881134",
    "4846848554",
    "5283751526",
]

CHITONS = [
    "1163751742",
    "1381373672",
    "2136511328",
    "3694931569",
    "7463417111",
    "1319128137",
    "1359912421",
    "3125421639",
    "1293138521",
    "2311944581",
]


def make_grid(rows):
    return load_grid(rows)


def test_load_grid_dimensions():
    grid = make_grid(HEIGHTMAP)
    assert grid.shape == (5, 10)
    assert grid[(0, 1)] == 1
    assert grid.to_rows()[4][9] == 8


def test_load_grid_ignores_trailing_blank_lines():
    grid = make_grid(["123", "456", "", ""])
    assert grid.shape == (2, 3)


@pytest.mark.parametrize(
    "rows",
    [
        ["123", "4a6"],
        ["123", "45"],
        [],
        ["", ""],
    ],
)
def test_load_grid_rejects_bad_input(rows):
    with pytest.raises(ParseError):
        load_grid(rows)


def test_parse_error_reports_line_number():
    with pytest.raises(ParseError) as info:
        load_grid(["123", "456", "7x9"])
    assert info.value.line_number == 3
    assert "line 3" in str(info.value)


def test_grid_requires_matching_shape():
    with pytest.raises(ValueError):
        DigitGrid(2, 3, np.zeros((3, 2), dtype=int))
    blank = DigitGrid(2, 3)
    assert blank.to_rows() == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("connectivity, corner, border, interior", [(4, 2, 3, 4), (8, 3, 5, 8)])
def test_neighbor_counts(connectivity, corner, border, interior):
    height, width = 4, 5
    for row in range(height):
        for col in range(width):
            found = neighbors((row, col), height, width, connectivity)
            on_row_edge = row in (0, height - 1)
            on_col_edge = col in (0, width - 1)
            if on_row_edge and on_col_edge:
                expected = corner
            elif on_row_edge or on_col_edge:
                expected = border
            else:
                expected = interior
            assert len(found) == expected
            assert len(set(found)) == len(found)
            assert all(0 <= r < height and 0 <= c < width for r, c in found)
            assert (row, col) not in found


def test_neighbors_single_row_grid():
    assert neighbors((0, 0), 1, 3) == [(0, 1)]
    assert sorted(neighbors((0, 1), 1, 3, connectivity=8)) == [(0, 0), (0, 2)]


def test_neighbors_rejects_unknown_connectivity():
    with pytest.raises(ValueError):
        neighbors((0, 0), 3, 3, connectivity=6)


def test_distance_matrix_small_case():
    grid = make_grid(["11", "11"])
    cost = distance_matrix(grid)
    assert cost.tolist() == [[1, 2], [2, 3]]
    assert lowest_total_risk(grid) == 2


def test_distance_matrix_prefers_cheaper_neighbour():
    grid = make_grid(["19", "11"])
    assert distance_matrix(grid)[1, 1] == 3
    assert lowest_total_risk(grid) == 2


def test_lowest_total_risk_example():
    assert lowest_total_risk(make_grid(CHITONS)) == 40


def test_tile_wraps_to_one():
    grid = make_grid(["8"])
    tiled = grid.tile(3)
    assert tiled.to_rows() == [
        [8, 9, 1],
        [9, 1, 2],
        [1, 2, 3],
    ]


def test_tile_keeps_zeros_in_first_tile():
    grid = make_grid(["105", "000"])
    assert grid.tile(1) == grid
    tiled = make_grid(["10", "01"]).tile(2)
    assert tiled.to_rows()[:2] == [[1, 0, 2, 1], [0, 1, 1, 2]]
    assert tiled.to_rows()[2:] == [[2, 1, 3, 2], [1, 2, 2, 3]]


def test_tile_example():
    grid = make_grid(CHITONS)
    tiled = grid.tile(5)
    assert tiled.shape == (50, 50)
    assert tiled[(10, 10)] == 3
    assert tiled[(0, 10)] == 2
    assert tiled.cells.min() >= 1
    assert lowest_total_risk(tiled) == 315


def test_low_points_example():
    grid = make_grid(HEIGHTMAP)
    assert low_points(grid) == [(0, 1), (0, 9), (2, 2), (4, 6)]


def test_basin_sizes_example():
    grid = make_grid(HEIGHTMAP)
    assert basin_size(grid, (0, 0)) == 3
    assert basin_size(grid, (0, 9)) == 9
    assert basin_size(grid, (2, 2)) == 14
    assert basin_size(grid, (4, 6)) == 9
    assert basin_sizes(grid) == [14, 9, 9, 3]


def test_basin_walled_region_same_from_any_seed():
    grid = make_grid([
        "99999",
        "91239",
        "94969",
        "97819",
        "99999",
    ])
    region = basin_region(grid, (1, 1))
    assert len(region) == 8
    for seed in region:
        assert basin_size(grid, seed) == 8
    assert basin_size(grid, (2, 2)) == 0


def test_flash_step_small_example():
    grid = make_grid([
        "11111",
        "19991",
        "19191",
        "19991",
        "11111",
    ])
    assert flash_step(grid) == 9
    assert grid.to_rows() == [
        [3, 4, 5, 4, 3],
        [4, 0, 0, 0, 4],
        [5, 0, 0, 0, 5],
        [4, 0, 0, 0, 4],
        [3, 4, 5, 4, 3],
    ]
    assert flash_step(grid) == 0
    assert grid.to_rows()[2] == [6, 1, 1, 1, 6]


def test_flashed_cell_does_not_recharge():
    grid = make_grid(["99"])
    assert flash_step(grid) == 2
    assert grid.to_rows() == [[0, 0]]


def test_count_flashes_example_and_reproducible():
    grid = make_grid(OCTOPUSES)
    assert count_flashes(grid, 10) == 204
    assert count_flashes(grid, 100) == 1656
    # runs on a copy
    assert count_flashes(grid, 100) == 1656
    assert grid == make_grid(OCTOPUSES)


def test_first_synchronised_step_example():
    assert first_synchronised_step(make_grid(OCTOPUSES)) == 195
