from typing import Iterable, Optional

from maze_astar.core.geometry import Direction, Point
from maze_astar.core.maze import Maze

CORNER = "+"
H_WALL = "---"
H_OPEN = "   "
V_WALL = "|"
V_OPEN = " "

MARK_START = "S"
MARK_END = "E"
MARK_PATH = "*"
MARK_EXPLORED = "."


def render(maze: Maze, path: Optional[Iterable[Point]] = None,
           explored: Optional[Iterable[Point]] = None) -> str:
    """
    Draws the maze as ASCII art, one 3-character cell per grid cell.

    Each cell's own direction set decides the walls drawn on its north and
    west sides; the outer south and east borders come from the last row and
    column. Cells on 'path' are marked '*', other 'explored' cells '.'.
    """
    path_cells = set(path or ())
    explored_cells = set(explored or ())

    def mark(point: Point) -> str:
        if point == maze.start: return MARK_START
        if point == maze.end: return MARK_END
        if point in path_cells: return MARK_PATH
        if point in explored_cells: return MARK_EXPLORED
        return " "

    lines = []
    for y in range(maze.height):
        top = [CORNER]
        middle = []
        for x in range(maze.width):
            point = Point(x, y)
            directions = maze.get_directions(point)
            top.append(H_OPEN if directions & Direction.NORTH else H_WALL)
            top.append(CORNER)
            middle.append(V_OPEN if directions & Direction.WEST else V_WALL)
            middle.append(f" {mark(point)} ")

        last = maze.get_directions(Point(maze.width - 1, y))
        middle.append(V_OPEN if last & Direction.EAST else V_WALL)
        lines.append("".join(top))
        lines.append("".join(middle))

    bottom = [CORNER]
    for x in range(maze.width):
        directions = maze.get_directions(Point(x, maze.height - 1))
        bottom.append(H_OPEN if directions & Direction.SOUTH else H_WALL)
        bottom.append(CORNER)
    lines.append("".join(bottom))

    return "\n".join(lines) + "\n"
