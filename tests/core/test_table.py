import pytest

from toy_robot_sim.core.geometry import TableSize
from toy_robot_sim.core.table import Table, is_position_within_bounds
from toy_robot_sim.utils.exceptions import ValidationError


class TestTableBounds:
    @pytest.mark.parametrize(
        "x,y",
        [(0, 0), (4, 4), (0, 4), (4, 0), (2, 3)],
    )
    def test_cells_inside_are_not_out(self, table, x, y):
        assert table.is_out_of_table(x, y) is False
        assert table.contains(x, y) is True

    @pytest.mark.parametrize(
        "x,y",
        [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5), (-3, 9), (100, 2)],
    )
    def test_cells_outside_are_out(self, table, x, y):
        assert table.is_out_of_table(x, y) is True
        assert table.contains(x, y) is False

    def test_rectangular_table_uses_width_for_x_and_height_for_y(self):
        table = Table(3, 7)
        assert not table.is_out_of_table(2, 6)
        assert table.is_out_of_table(3, 0)
        assert not table.is_out_of_table(0, 6)
        assert table.is_out_of_table(0, 7)

    def test_zero_sized_table_has_no_cells(self):
        table = Table(0, 0)
        assert table.is_out_of_table(0, 0)

    def test_check_is_pure(self, table):
        before = table.size
        for _ in range(3):
            table.is_out_of_table(7, 7)
        assert table.size == before


class TestTableConstruction:
    def test_defaults_to_five_by_five(self):
        table = Table()
        assert (table.width, table.height) == (5, 5)

    def test_accepts_table_size(self):
        table = Table(TableSize(8, 2))
        assert table.size == TableSize(8, 2)
        assert repr(table) == "Table(width=8, height=2)"

    def test_table_size_plus_height_is_rejected(self):
        with pytest.raises(ValidationError):
            Table(TableSize(3, 3), 4)

    @pytest.mark.parametrize("width,height", [(-1, 5), (5, -2)])
    def test_negative_dimensions_raise(self, width, height):
        with pytest.raises(ValidationError) as exc_info:
            Table(width, height)
        assert exc_info.value.expected_format == "non-negative integer"

    @pytest.mark.parametrize("width", [2.5, "5", True, None])
    def test_non_integer_dimensions_raise(self, width):
        with pytest.raises(ValidationError):
            Table(width, 5)

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Table(-1, -1)


def test_is_position_within_bounds_function():
    bounds = TableSize(2, 2)
    assert is_position_within_bounds(1, 1, bounds)
    assert not is_position_within_bounds(2, 1, bounds)
    assert not is_position_within_bounds(1, -1, bounds)
