"""
Plain-text maze files.

Format, values separated by whitespace:

    rows columns
    start_row start_column
    end_row end_column
    <rows lines of 'columns' wall masks>

A wall mask adds 8 for a wall to the north, 4 west, 2 south, 1 east. The
maze stores the complement: the directions that are open.
"""
import logging
from typing import IO, List, Sequence

from maze_astar.core.errors import MazeFormatError, OutOfBounds
from maze_astar.core.geometry import Direction, Point, Size, direction_between
from maze_astar.core.maze import Maze
from maze_astar.core.nodes import NodeCollection

logger = logging.getLogger(__name__)


def _read_numbers(lines, what: str, count: int, line_no: int) -> List[int]:
    try:
        line = next(lines)
    except StopIteration:
        raise MazeFormatError(f"Unexpected end of file reading {what}") from None

    try:
        values = [int(tok) for tok in line.split()]
    except ValueError:
        raise MazeFormatError(f"Line {line_no}: non-numeric {what}: {line.strip()!r}") from None

    if len(values) < count:
        raise MazeFormatError(f"Line {line_no}: expected {count} values for {what}, got {len(values)}")
    return values[:count]


def read_maze(fp: IO[str]) -> Maze:
    lines = (line for line in fp if line.strip())

    rows, columns = _read_numbers(lines, "size", 2, 1)
    if rows <= 0 or columns <= 0:
        raise MazeFormatError(f"Maze size must be positive, got {rows}x{columns}")

    start_row, start_col = _read_numbers(lines, "start", 2, 2)
    end_row, end_col = _read_numbers(lines, "end", 2, 3)

    try:
        maze = Maze(Size(columns, rows), Point(start_col, start_row), Point(end_col, end_row))
    except OutOfBounds as e:
        raise MazeFormatError(str(e)) from e

    for row in range(rows):
        walls_row = _read_numbers(lines, f"walls of row {row}", columns, row + 4)
        for column, walls in enumerate(walls_row):
            if not 0 <= walls <= Direction.ALL:
                raise MazeFormatError(f"Row {row}, column {column}: wall mask {walls} out of range")
            maze.set_directions(Point(column, row), ~walls & Direction.ALL)

    logger.debug("Read %s", maze)
    return maze


def load_maze(path: str) -> Maze:
    with open(path, "r") as f:
        return read_maze(f)


def write_maze(maze: Maze, fp: IO[str]):
    fp.write(f"{maze.height} {maze.width}\n")
    fp.write(f"{maze.start.y} {maze.start.x}\n")
    fp.write(f"{maze.end.y} {maze.end.x}\n")
    for y in range(maze.height):
        walls = (~maze.get_directions(Point(x, y)) & Direction.ALL for x in range(maze.width))
        fp.write(" ".join(str(w) for w in walls) + "\n")


def save_maze(maze: Maze, path: str):
    with open(path, "w") as f:
        write_maze(maze, f)


def format_path(points: Sequence[Point]) -> str:
    """One letter (N, W, S, E) per move along 'points'."""
    return "".join(Direction.LETTERS[direction_between(a, b)]
                   for a, b in zip(points, points[1:]))


def write_path(nodes: NodeCollection, fp: IO[str], index: int = -1, reverse: bool = False):
    """
    Writes the moves leading to the node at 'index' as a single line.
    For a reverse search (rooted at the maze end) the parent chain already
    runs from start to end, so it is written in walk order instead.
    """
    if reverse:
        points = [node.point for node in nodes.walk(index)]
    else:
        points = nodes.path(index)
    fp.write(format_path(points) + "\n")
