import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_astar.algo.astar import AStar
from maze_astar.core.errors import MazeFormatError
from maze_astar.core.geometry import Direction, Point
from maze_astar.io.text_format import format_path, read_maze, write_maze, write_path

# 3 rows x 4 columns
#   +---+---+---+---+
#   | S         |   |
#   +---+---+   +   +
#   |           |   |
#   +   +---+---+   +
#   |             E |
#   +---+---+---+---+
MAZE_TEXT = """3 4
0 0
2 3
14 10 9 13
12 10 3 5
6 10 10 3
"""


class TestTextFormat(unittest.TestCase):
    def test_read(self):
        maze = read_maze(io.StringIO(MAZE_TEXT))
        self.assertEqual(maze.width, 4)
        self.assertEqual(maze.height, 3)
        self.assertEqual(maze.start, Point(0, 0))
        self.assertEqual(maze.end, Point(3, 2))

        # Walls 14 = N|W|S -> only east open
        self.assertEqual(maze.get_directions(Point(0, 0)), Direction.EAST)
        # Walls 9 = N|E -> west and south open
        self.assertEqual(maze.get_directions(Point(2, 0)), Direction.WEST | Direction.SOUTH)
        # Walls 5 = W|E -> north and south open
        self.assertEqual(maze.get_directions(Point(3, 1)), Direction.NORTH | Direction.SOUTH)

    def test_round_trip(self):
        maze = read_maze(io.StringIO(MAZE_TEXT))
        buf = io.StringIO()
        write_maze(maze, buf)
        self.assertEqual(buf.getvalue(), MAZE_TEXT)

    def test_blank_lines_ignored(self):
        text = "\n" + MAZE_TEXT.replace("\n", "\n\n")
        maze = read_maze(io.StringIO(text))
        self.assertEqual(maze.end, Point(3, 2))

    def test_solve_and_write_path(self):
        maze = read_maze(io.StringIO(MAZE_TEXT))
        solver = AStar(maze)
        out = solver.solve()
        self.assertTrue(solver.solved)

        buf = io.StringIO()
        write_path(out, buf)
        self.assertEqual(buf.getvalue(), "EESWWSEEE\n")

    def test_write_path_reverse(self):
        maze = read_maze(io.StringIO(MAZE_TEXT))
        out = AStar(maze, reverse=True).solve()

        buf = io.StringIO()
        write_path(out, buf, reverse=True)
        self.assertEqual(buf.getvalue(), "EESWWSEEE\n")

    def test_format_path(self):
        self.assertEqual(format_path([Point(1, 1)]), "")
        self.assertEqual(format_path([Point(1, 1), Point(1, 0), Point(0, 0)]), "NW")

    def test_errors(self):
        bad_inputs = [
            "",                                    # empty
            "0 4\n0 0\n0 0\n",                     # zero rows
            "2 2\n0 0\n",                          # missing end
            "2 2\n0 0\n1 1\n0 0\n",                # missing row
            "2 2\n0 0\n1 1\n0 x\n0 0\n",           # not a number
            "2 2\n0 0\n1 1\n0\n0 0\n",             # short row
            "2 2\n0 0\n5 1\n0 0\n0 0\n",           # end outside
            "2 2\n0 0\n1 1\n16 0\n0 0\n",          # mask out of range
        ]
        for text in bad_inputs:
            with self.assertRaises(MazeFormatError, msg=repr(text)):
                read_maze(io.StringIO(text))


if __name__ == '__main__':
    unittest.main()
