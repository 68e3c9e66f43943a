"""
Configuration objects and default settings.
"""

from dataclasses import dataclass
from typing import Optional

from maze_astar.algo.astar import AStar, Dijkstra, GreedyAStar


# Solver name -> class, in the order the CLI lists them
SOLVERS = {
    "astar": AStar,
    "greedy": GreedyAStar,
    "dijkstra": Dijkstra,
}


@dataclass
class SolveConfig:
    """Configuration for a search run."""
    algo: str = "astar"
    reverse: bool = False
    progress_interval: int = 100  # Yield a status every N expansions
    max_capacity: Optional[int] = None  # Frontier size limit, None = unbounded

    def make_solver(self, maze, event_writer=None):
        try:
            cls = SOLVERS[self.algo]
        except KeyError:
            raise ValueError(f"Unknown solver '{self.algo}', expected one of {', '.join(SOLVERS)}") from None
        return cls(maze, event_writer=event_writer, reverse=self.reverse,
                   progress_interval=self.progress_interval, max_capacity=self.max_capacity)


@dataclass
class RenderConfig:
    """Configuration for the pygame viewer."""
    width: int = 1280
    height: int = 720
    steps_per_frame: int = 25  # Solver expansions per frame
    fps: int = 60
    record: bool = False
    record_fps: int = 30


# Default configurations
DEFAULT_SOLVE_CONFIG = SolveConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()
