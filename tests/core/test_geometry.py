import pytest

from toy_robot_sim.core.constants import (
    DIRECTION_EAST,
    DIRECTION_NORTH,
    DIRECTION_SOUTH,
    DIRECTION_WEST,
)
from toy_robot_sim.core.geometry import Position, TableSize
from toy_robot_sim.utils.exceptions import ValidationError


class TestTableSize:
    def test_contains_matches_half_open_ranges(self):
        size = TableSize(5, 3)
        assert size.contains(0, 0)
        assert size.contains(4, 2)
        assert not size.contains(5, 2)
        assert not size.contains(4, 3)

    def test_total_cells_and_tuple(self):
        size = TableSize(4, 6)
        assert size.total_cells() == 24
        assert size.to_tuple() == (4, 6)

    def test_is_frozen(self):
        size = TableSize(1, 1)
        with pytest.raises(AttributeError):
            size.width = 2

    def test_rejects_bool(self):
        with pytest.raises(ValidationError) as exc_info:
            TableSize(True, 1)
        assert exc_info.value.parameter_name == "width"


class TestPosition:
    @pytest.mark.parametrize(
        "direction,expected",
        [
            (DIRECTION_NORTH, (2, 3)),
            (DIRECTION_EAST, (3, 2)),
            (DIRECTION_SOUTH, (2, 1)),
            (DIRECTION_WEST, (1, 2)),
        ],
    )
    def test_advanced_moves_one_unit(self, direction, expected):
        moved = Position(2, 2, direction).advanced()
        assert (moved.x, moved.y) == expected
        assert moved.direction == direction

    def test_advanced_returns_new_instance(self):
        start = Position(0, 0, DIRECTION_NORTH)
        start.advanced()
        assert start.to_tuple() == (0, 0, DIRECTION_NORTH)

    @pytest.mark.parametrize("direction", [-1, 4, 10])
    def test_direction_index_out_of_range_raises(self, direction):
        with pytest.raises(ValidationError):
            Position(0, 0, direction)
