import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_astar.algo.astar import AStar
from maze_astar.core.geometry import Direction, Point, Size
from maze_astar.core.maze import make_maze
from maze_astar.io.text_format import read_maze
from maze_astar.viz.ascii import render

MAZE_TEXT = """3 4
0 0
2 3
14 10 9 13
12 10 3 5
6 10 10 3
"""


class TestAscii(unittest.TestCase):
    def test_plain(self):
        maze = read_maze(io.StringIO(MAZE_TEXT))
        expected = (
            "+---+---+---+---+\n"
            "| S         |   |\n"
            "+---+---+   +   +\n"
            "|           |   |\n"
            "+   +---+---+   +\n"
            "|             E |\n"
            "+---+---+---+---+\n"
        )
        self.assertEqual(render(maze), expected)

    def test_path_and_explored(self):
        maze = read_maze(io.StringIO(MAZE_TEXT))
        solver = AStar(maze)
        out = solver.solve()

        text = render(maze, path=solver.path, explored=[n.point for n in out])
        # The route is unique, so every explored cell is on it
        lines = text.splitlines()
        self.assertEqual(text.count("*"), 8)
        self.assertNotIn(".", text)
        self.assertEqual(lines[1], "| S   *   * |   |")
        self.assertEqual(lines[5], "| *   *   *   E |")

    def test_explored_marks(self):
        maze = make_maze(Size(3, 1), Point(0, 0), Point(2, 0))
        maze.carve(Point(0, 0), Direction.EAST)
        text = render(maze, explored=[Point(1, 0)])
        self.assertEqual(text.splitlines()[1], "| S   . | E |")


if __name__ == '__main__':
    unittest.main()
