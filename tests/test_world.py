"""Tests for grazer.world.grid and grazer.world.cell."""

import pytest

from grazer.world.cell import Cell
from grazer.world.grid import Grid, create_grid, is_valid_position


class TestCell:
    """Tests for the Cell dataclass."""

    def test_default_values(self) -> None:
        cell = Cell(x=0, y=0)
        assert cell.has_tree is False
        assert cell.food == 0
        assert cell.is_empty

    def test_not_empty_with_food(self) -> None:
        assert not Cell(x=0, y=0, food=3).is_empty


class TestIsValidPosition:
    """Tests for the bounds predicate."""

    @pytest.mark.parametrize(("x", "y"), [(0, 0), (9, 9), (0, 9), (4, 7)])
    def test_inside(self, x: int, y: int) -> None:
        assert is_valid_position(x, y, 10)

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (10, 0), (0, 10)])
    def test_outside(self, x: int, y: int) -> None:
        assert not is_valid_position(x, y, 10)


class TestGrid:
    """Tests for the Grid container."""

    def test_dimensions(self, small_grid: Grid) -> None:
        assert small_grid.size == 10
        assert len(small_grid.cells) == 10
        assert all(len(row) == 10 for row in small_grid.cells)

    def test_created_empty(self) -> None:
        grid = create_grid(5)
        assert all(cell.is_empty for cell in grid.iter_cells())
        assert grid.tree_count() == 0
        assert grid.food_count() == 0
        assert not grid.has_food()

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            Grid(size=0)

    def test_cell_at_valid(self, small_grid: Grid) -> None:
        cell = small_grid.cell_at(3, 5)
        assert cell.x == 3
        assert cell.y == 5

    def test_cell_at_out_of_bounds(self, small_grid: Grid) -> None:
        with pytest.raises(IndexError):
            small_grid.cell_at(10, 0)
        with pytest.raises(IndexError):
            small_grid.cell_at(0, -1)

    def test_neighbours_corner(self, small_grid: Grid) -> None:
        assert len(small_grid.neighbours(0, 0)) == 3

    def test_neighbours_cardinal_only(self, small_grid: Grid) -> None:
        assert len(small_grid.neighbours(3, 3, include_diagonals=False)) == 4

    def test_neighbours_center(self, small_grid: Grid) -> None:
        assert len(small_grid.neighbours(3, 3)) == 8

    def test_iter_cells_visits_every_cell_once(self, small_grid: Grid) -> None:
        coords = [(c.x, c.y) for c in small_grid.iter_cells()]
        assert len(coords) == 100
        assert len(set(coords)) == 100

    def test_counts(self, small_grid: Grid) -> None:
        small_grid.cell_at(1, 1).has_tree = True
        small_grid.cell_at(2, 2).food = 4
        small_grid.cell_at(3, 2).food = 1
        assert small_grid.tree_count() == 1
        assert small_grid.food_count() == 2
        assert small_grid.has_food()
        assert len(small_grid.empty_cells()) == 97
