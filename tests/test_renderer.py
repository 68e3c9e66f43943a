import unittest
import sys
import os

# Headless SDL so the test runs without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_astar.algo.astar import AStar
from maze_astar.config import RenderConfig
from maze_astar.core.geometry import Direction, Point, Size
from maze_astar.core.maze import make_maze
from maze_astar.core.nodes import NodeCollection


class TestRenderer(unittest.TestCase):
    def test_animate_search(self):
        maze = make_maze(Size(6, 6), Point(0, 0), Point(5, 5))
        for point in maze.points():
            maze.set_directions(point, Direction.ALL)

        solver = AStar(maze, progress_interval=1)
        try:
            import pygame
            from maze_astar.viz.renderer import Renderer
            renderer = Renderer(maze, solver=solver, config=RenderConfig(width=320, height=240, steps_per_frame=3))
            renderer.init_window()
        except Exception as e:
            self.skipTest(f"pygame display unavailable: {e}")
        renderer.solver_iter = solver.run(NodeCollection(36))

        try:
            for _ in range(50):
                renderer.step_solver()
                renderer.render_frame()
                if renderer.solve_finished:
                    break
        finally:
            pygame.quit()

        self.assertTrue(renderer.solve_finished)
        self.assertTrue(solver.solved)
        self.assertEqual(len(solver.path), 11)


if __name__ == '__main__':
    unittest.main()
