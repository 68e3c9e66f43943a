import math
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int

    def contains(self, point: Point) -> bool:
        return 0 <= point[0] < self.width and 0 <= point[1] < self.height


class Direction:
    # Bit values match the wall mask of the text format (8=N, 4=W, 2=S, 1=E),
    # so an open-direction set is just the complement of a wall mask.
    NORTH = 0b1000
    WEST  = 0b0100
    SOUTH = 0b0010
    EAST  = 0b0001

    NONE = 0
    ALL  = NORTH | WEST | SOUTH | EAST

    # Expansion order
    ORDER = (NORTH, WEST, SOUTH, EAST)

    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    LETTERS = {NORTH: "N", WEST: "W", SOUTH: "S", EAST: "E"}


def in_bounds(size: Size, point: Point) -> bool:
    return 0 <= point[0] < size[0] and 0 <= point[1] < size[1]


def equal(a: Point, b: Point) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def squared_distance(a: Point, b: Point) -> int:
    """
    Square of the straight-line distance. Preserves ordering, but grows
    quadratically, so it overestimates the remaining hop count on anything
    but the shortest distances.
    """
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> int:
    """
    Straight-line distance rounded down to an integer.

    Never larger than the Manhattan distance between the points, so it is
    an admissible (and consistent) A* heuristic on a 4-connected grid.
    """
    return math.isqrt(squared_distance(a, b))


def result_of(point: Point, direction: int) -> Point:
    """
    Returns the point one cell away in 'direction'.
    No clamping: moving north/west from row/column 0 gives a negative
    coordinate, so callers must check bounds.
    """
    if direction not in Direction.DX:
        raise ValueError(f"Not a single direction: {direction}")
    return Point(point[0] + Direction.DX[direction], point[1] + Direction.DY[direction])


def direction_between(a: Point, b: Point) -> int:
    """Direction of the single step that leads from 'a' to 'b'."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if dx == 0 and dy == -1: return Direction.NORTH
    if dx == 0 and dy == 1: return Direction.SOUTH
    if dx == -1 and dy == 0: return Direction.WEST
    if dx == 1 and dy == 0: return Direction.EAST
    raise ValueError(f"Points {tuple(a)} and {tuple(b)} are not adjacent")
