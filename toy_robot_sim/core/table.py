"""
Boundary checking for the toy robot table.

The table is the only authority on which cells exist. It is a pure leaf
component: it knows its dimensions and answers inside/outside questions,
nothing else. The robot consults it before every mutation so that placed
coordinates never leave the table.
"""

import logging
from typing import Optional, Union

from ..utils.exceptions import ValidationError
from .constants import DEFAULT_TABLE_HEIGHT, DEFAULT_TABLE_WIDTH
from .geometry import TableSize

__all__ = ["Table", "is_position_within_bounds"]

logger = logging.getLogger(__name__)


class Table:
    """
    Boundary checker for a rectangular grid of ``width x height`` cells.

    Accepts either explicit dimensions or a ready-made :class:`TableSize`.

    Example:
        >>> table = Table(5, 5)
        >>> table.is_out_of_table(4, 4)
        False
        >>> table.is_out_of_table(5, 0)
        True
    """

    def __init__(
        self,
        width: Union[int, TableSize] = DEFAULT_TABLE_WIDTH,
        height: Optional[int] = None,
    ) -> None:
        """
        Initialize table with its fixed dimensions.

        Args:
            width: Table width in cells, or a TableSize carrying both dimensions
            height: Table height in cells; defaults to DEFAULT_TABLE_HEIGHT when
                width is an integer

        Raises:
            ValidationError: If dimensions are negative or not integers
        """
        if isinstance(width, TableSize):
            if height is not None:
                raise ValidationError(
                    "Pass either a TableSize or explicit width/height, not both",
                    parameter_name="height",
                    parameter_value=height,
                )
            self._size = width
        else:
            self._size = TableSize(
                width, DEFAULT_TABLE_HEIGHT if height is None else height
            )
        logger.debug("Table created with size %dx%d", self.width, self.height)

    @property
    def size(self) -> TableSize:
        return self._size

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    def is_out_of_table(self, x: int, y: int) -> bool:
        """Return True iff (x, y) falls outside ``[0, width) x [0, height)``."""
        return not is_position_within_bounds(x, y, self._size)

    def contains(self, x: int, y: int) -> bool:
        """Return True iff (x, y) is a cell of the table."""
        return is_position_within_bounds(x, y, self._size)

    def __repr__(self) -> str:
        return f"Table(width={self.width}, height={self.height})"


def is_position_within_bounds(x: int, y: int, bounds: TableSize) -> bool:
    """
    Fast boolean check for position validity within table bounds.

    Args:
        x: Column to check
        y: Row to check
        bounds: Table size defining boundary limits

    Returns:
        bool: True if position is within table bounds, False otherwise
    """
    if x < 0 or x >= bounds.width:
        return False
    if y < 0 or y >= bounds.height:
        return False
    return True
