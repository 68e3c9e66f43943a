from abc import ABC, abstractmethod
from typing import Iterator, Optional

from maze_astar.core.maze import Maze
from maze_astar.core.nodes import NodeCollection


class Generator(ABC):
    def __init__(self, maze: Maze, seed: int = None):
        self.maze = maze
        self.seed = seed
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual maze modifications happen in-place on self.maze.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass


class Solver(ABC):
    def __init__(self, maze: Maze, event_writer=None):
        self.maze = maze
        self.event_writer = event_writer
        self.nodes: Optional[NodeCollection] = None
        self.expanded_count = 0

    @abstractmethod
    def run(self, out: NodeCollection) -> Iterator[str]:
        """
        Searches the maze, appending explored nodes to 'out'.
        Yields progress strings; the last one is the final status.
        """
        pass

    def solve(self, out: NodeCollection = None) -> NodeCollection:
        """Runs the search to completion and returns the explored nodes."""
        if out is None:
            out = NodeCollection(self.maze.width * self.maze.height)
        for _ in self.run(out):
            pass
        return out
