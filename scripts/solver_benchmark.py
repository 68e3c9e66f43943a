import sys
import os
import time
import argparse
import logging

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_astar.core.geometry import Point, Size
from maze_astar.core.maze import make_maze
from maze_astar.core.nodes import NodeCollection
from maze_astar.algo.dfs import RecursiveBacktracker
from maze_astar.core.complexity import MazePostProcessor
from maze_astar.config import SOLVERS

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger("Benchmark")


def run_once(maze, name):
    solver = SOLVERS[name](maze, progress_interval=0)
    t0 = time.time()
    solver.solve(NodeCollection(maze.width * maze.height))
    duration = time.time() - t0
    path_len = len(solver.path) - 1 if solver.solved else -1
    return duration, path_len, solver.expanded_count


def run_benchmark():
    parser = argparse.ArgumentParser(description="Solver Benchmark")
    parser.add_argument("--sizes", type=int, nargs="+", default=[25, 50, 100], help="Square maze sizes")
    parser.add_argument("--braids", type=float, nargs="+", default=[0.0, 0.1, 0.5], help="Braid factors")
    parser.add_argument("--seed", type=int, default=42, help="Random Seed")
    args = parser.parse_args()

    print(f"{'SIZE':<8} | {'BRAID':<6} | {'ALGO':<9} | {'TIME (s)':<9} | {'PATH':<6} | {'EXPANDED':<8}")
    print("-" * 62)

    for size in args.sizes:
        for braid in args.braids:
            maze = make_maze(Size(size, size), Point(0, 0), Point(size - 1, size - 1))
            RecursiveBacktracker(maze, seed=args.seed).run_all()
            if braid > 0:
                MazePostProcessor.braid(maze, factor=braid, seed=args.seed)

            results = {name: run_once(maze, name) for name in SOLVERS}
            for name, (duration, path_len, expanded) in results.items():
                print(f"{size:<8} | {braid:<6} | {name:<9} | {duration:<9.4f} | {path_len:<6} | {expanded:<8}")

            # A* must match the uniform-cost optimum
            if results["astar"][1] != results["dijkstra"][1]:
                logger.warning(f"A* path {results['astar'][1]} != Dijkstra {results['dijkstra'][1]} "
                               f"at size {size}, braid {braid}")


if __name__ == "__main__":
    run_benchmark()
