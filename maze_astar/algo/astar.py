import logging
from typing import Iterator, List, Optional

from maze_astar.algo.base import Solver
from maze_astar.core.geometry import Point, distance, squared_distance
from maze_astar.core.maze import Maze
from maze_astar.core.nodes import Node, NodeCollection

logger = logging.getLogger(__name__)


class AStar(Solver):
    """
    Best-first search over the maze.

    The frontier is a NodeCollection scanned linearly for the node with the
    lowest 'path_cost + heuristic'; the first such node (lowest index) wins
    ties. Expanded nodes are pushed onto the caller's collection, which
    doubles as the arena their children's parent indexes point into.

    With the default floor-Euclidean heuristic the first path to reach the
    goal is a shortest one.
    """

    def __init__(self, maze: Maze, event_writer=None, reverse: bool = False,
                 progress_interval: int = 100, max_capacity: int = None):
        super().__init__(maze, event_writer)
        self.reverse = reverse
        self.progress_interval = progress_interval
        self.max_capacity = max_capacity
        self.path: List[Point] = []
        self.solved = False
        # Live only while run() is in progress
        self.frontier: Optional[NodeCollection] = None

    @property
    def origin(self) -> Point:
        return self.maze.end if self.reverse else self.maze.start

    @property
    def goal(self) -> Point:
        return self.maze.start if self.reverse else self.maze.end

    def heuristic(self, a: Point, b: Point) -> int:
        return distance(a, b)

    def select(self, frontier: NodeCollection) -> int:
        goal = self.goal
        best_index = 0
        best = frontier[0]
        best_cost = best.path_cost + self.heuristic(best.point, goal)

        for index in range(1, len(frontier)):
            node = frontier[index]
            cost = node.path_cost + self.heuristic(node.point, goal)
            if cost < best_cost:
                best_index = index
                best_cost = cost

        return best_index

    def run(self, out: NodeCollection) -> Iterator[str]:
        if len(out):
            raise ValueError("Output collection must be empty before a search")

        self.nodes = out
        self.path = []
        self.solved = False
        self.expanded_count = 0

        maze = self.maze
        goal = self.goal
        capacity = maze.width * maze.height
        if self.max_capacity is not None:
            capacity = min(capacity, self.max_capacity)
        frontier = NodeCollection(capacity, max_capacity=self.max_capacity)
        frontier.append(Node(self.origin, None, 0))
        self.frontier = frontier

        logger.debug("Searching %s from %s to %s", maze, tuple(self.origin), tuple(goal))

        try:
            while frontier:
                node = frontier.remove(self.select(frontier))

                # Stale duplicate of a cell that was reached more cheaply first
                if out.contains(node.point):
                    continue

                handle = out.push(node)
                self.expanded_count += 1
                if self.event_writer:
                    self.event_writer.log_expand(*node.point)

                if node.point == goal:
                    self.solved = True
                    break

                for neighbor, _ in maze.open_neighbors(node.point):
                    if out.contains(neighbor):
                        continue
                    frontier.append(Node(neighbor, handle, node.path_cost + 1))
                    if self.event_writer:
                        self.event_writer.log_frontier(*neighbor)

                if self.progress_interval and self.expanded_count % self.progress_interval == 0:
                    yield f"Expanded: {self.expanded_count}"
        finally:
            self.frontier = None

        if self.solved:
            self.reconstruct_path(out)
        logger.debug("Search finished: solved=%s expanded=%d", self.solved, self.expanded_count)

        if self.event_writer:
            self.event_writer.log_result(self.solved, max(0, len(self.path) - 1))

        yield "Solved" if self.solved else "No Path"

    def reconstruct_path(self, out: NodeCollection):
        # Walking parents from the goal gives goal -> origin. A reverse search
        # starts at 'end', so that order is already start -> end.
        self.path = [node.point for node in out.walk()]
        if not self.reverse:
            self.path.reverse()

        if self.event_writer:
            for point in self.path:
                self.event_writer.log_path_add(*point)


class GreedyAStar(AStar):
    """
    A* with the squared straight-line distance as heuristic. Cheaper to
    evaluate and more eager towards the goal, but the heuristic is not
    admissible, so the path found is not guaranteed to be the shortest.
    """
    def heuristic(self, a, b):
        return squared_distance(a, b)


class Dijkstra(AStar):
    """ Uniform-cost search is just A* with h(n) = 0. """
    def heuristic(self, a, b):
        return 0


def is_solved(maze: Maze, out: NodeCollection, reverse: bool = False) -> bool:
    """Whether the last explored node is the goal of the search."""
    if not len(out):
        return False
    goal = maze.start if reverse else maze.end
    return out[-1].point == goal


def solve_maze(maze: Maze, out: NodeCollection = None, reverse: bool = False,
               solver_cls=AStar) -> NodeCollection:
    """
    Runs a complete search and returns the explored nodes in expansion
    order. Check the outcome with is_solved(); an unreachable goal is not
    an error.
    """
    solver = solver_cls(maze, reverse=reverse)
    return solver.solve(out)
