from array import array
from typing import Iterator, Tuple

from maze_astar.core.errors import AllocationFailure, OutOfBounds
from maze_astar.core.geometry import Direction, Point, Size, result_of


class Maze:
    """
    Fixed-size grid of per-cell direction sets.

    Two cells share one byte: cell index 'y * width + x' lives in byte
    'index // 2', even indexes in the low nibble, odd ones in the high nibble.
    A zeroed byte means both cells are closed in every direction.
    """
    LOW_NIBBLE  = 0x0F
    HIGH_NIBBLE = 0xF0

    __slots__ = ('_size', '_start', '_end', 'cells')

    def __init__(self, size: Size, start: Point, end: Point):
        size = Size(*size)
        start = Point(*start)
        end = Point(*end)

        if size.width <= 0 or size.height <= 0:
            raise ValueError(f"Maze dimensions must be positive, got {size.width}x{size.height}")
        if not size.contains(start):
            raise OutOfBounds(start, size)
        if not size.contains(end):
            raise OutOfBounds(end, size)

        self._size = size
        self._start = start
        self._end = end

        # 'B' (unsigned char) -> 1 byte per pair of cells
        try:
            self.cells = array('B', bytes(self.packed_length(size)))
        except MemoryError as e:
            raise AllocationFailure(f"Cannot allocate cells for {size.width}x{size.height} maze") from e

    @staticmethod
    def packed_length(size: Size) -> int:
        return (size[0] * size[1] + 1) // 2

    @property
    def size(self) -> Size:
        return self._size

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    def get_index(self, point: Point) -> int:
        x, y = point
        if 0 <= x < self._size.width and 0 <= y < self._size.height:
            return y * self._size.width + x
        raise OutOfBounds(point, self._size)

    def get_directions(self, point: Point) -> int:
        idx = self.get_index(point)
        byte = self.cells[idx >> 1]
        if idx & 1:
            return byte >> 4
        return byte & self.LOW_NIBBLE

    def set_directions(self, point: Point, directions: int):
        if not 0 <= directions <= Direction.ALL:
            raise ValueError(f"Direction set must fit in 4 bits, got {directions}")

        idx = self.get_index(point)
        byte = self.cells[idx >> 1]
        if idx & 1:
            self.cells[idx >> 1] = (byte & self.LOW_NIBBLE) | (directions << 4)
        else:
            self.cells[idx >> 1] = (byte & self.HIGH_NIBBLE) | directions

    def has_direction(self, point: Point, direction: int) -> bool:
        return (self.get_directions(point) & direction) != 0

    def carve(self, point: Point, direction: int) -> bool:
        """
        Opens 'direction' at 'point' and the opposite direction at the
        neighbour, keeping the passage traversable both ways.
        Returns False if the neighbour is outside the grid.
        """
        neighbor = result_of(point, direction)
        if not self._size.contains(neighbor):
            return False

        self.set_directions(point, self.get_directions(point) | direction)
        opposite = Direction.OPPOSITE[direction]
        self.set_directions(neighbor, self.get_directions(neighbor) | opposite)
        return True

    def open_neighbors(self, point: Point) -> Iterator[Tuple[Point, int]]:
        """
        Yields (neighbor, direction) for every open direction of the cell,
        in N, W, S, E order. Directions that would leave the grid are skipped
        even if their bit is set.
        """
        directions = self.get_directions(point)
        for direction in Direction.ORDER:
            if directions & direction:
                neighbor = result_of(point, direction)
                if self._size.contains(neighbor):
                    yield neighbor, direction

    def points(self) -> Iterator[Point]:
        for y in range(self._size.height):
            for x in range(self._size.width):
                yield Point(x, y)

    def __repr__(self):
        return f"Maze(size={tuple(self._size)}, start={tuple(self._start)}, end={tuple(self._end)})"


def make_maze(size: Size, start: Point, end: Point) -> Maze:
    return Maze(size, start, end)
