from array import array
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Cell:
    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False


class Grid:
    # Bitmask Constants (bit set = passage open)
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    CLOSED = 0
    ALL_OPEN = NORTH | EAST | SOUTH | WEST

    __slots__ = ('rows', 'columns', 'cells')

    def __init__(self, rows: int, columns: int):
        self.rows = 0
        self.columns = 0
        self.cells = array('B')
        self.resize(rows, columns)

    @staticmethod
    def _check_dimensions(rows: int, columns: int):
        # bool is an int subclass but never a dimension
        if any(isinstance(v, bool) or not isinstance(v, int) for v in (rows, columns)):
            raise ValueError(f"Grid dimensions must be integers, got {rows!r}x{columns!r}")
        if rows < 1 or columns < 1:
            raise ValueError(f"Grid needs at least one row and one column, got {rows}x{columns}")

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.columns and 0 <= y < self.rows:
            return y * self.columns + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def cell_at(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(
            north=bool(val & self.NORTH),
            south=bool(val & self.SOUTH),
            east=bool(val & self.EAST),
            west=bool(val & self.WEST),
        )

    def is_open(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def open_east(self, x: int, y: int):
        """
        Opens the wall between (x, y) and (x+1, y).
        Does nothing on the last column, there is no cell to carve into.
        """
        idx1 = self.get_index(x, y)
        if x + 1 >= self.columns:
            return
        self.cells[idx1] |= self.EAST
        self.cells[idx1 + 1] |= self.WEST

    def open_north(self, x: int, y: int):
        """
        Opens the wall between (x, y) and (x, y-1).
        Does nothing on row 0.
        """
        idx1 = self.get_index(x, y)
        if y == 0:
            return
        self.cells[idx1] |= self.NORTH
        self.cells[idx1 - self.columns] |= self.SOUTH

    def clear(self):
        self.cells = array('B', [self.CLOSED] * (self.rows * self.columns))

    def resize(self, rows: int, columns: int):
        self._check_dimensions(rows, columns)
        self.rows = rows
        self.columns = columns
        self.clear()

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors joined to (x, y) by an open passage.
        """
        val = self.cells[self.get_index(x, y)]

        if (val & self.NORTH) and y > 0:
            yield (x, y - 1)
        if (val & self.SOUTH) and y < self.rows - 1:
            yield (x, y + 1)
        if (val & self.EAST) and x < self.columns - 1:
            yield (x + 1, y)
        if (val & self.WEST) and x > 0:
            yield (x - 1, y)
