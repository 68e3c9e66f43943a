import random

from maze_astar.core.geometry import Direction, result_of
from maze_astar.core.maze import Maze


def popcount(directions: int) -> int:
    return bin(directions & Direction.ALL).count("1")


class MazePostProcessor:
    @staticmethod
    def braid(maze: Maze, factor: float = 1.0, seed: int = None) -> int:
        """
        Removes dead ends to create loops, giving the solver routes of
        different lengths to choose between.
        factor: 0.0 = Remove NO dead ends (Perfect Maze)
                1.0 = Remove ALL dead ends (No dead ends)
        Returns the number of passages carved.
        """
        rng = random.Random(seed)

        # A dead end has exactly one open direction
        dead_ends = [p for p in maze.points() if popcount(maze.get_directions(p)) == 1]
        rng.shuffle(dead_ends)

        target_remove = int(len(dead_ends) * factor)
        removed_count = 0

        for point in dead_ends:
            if removed_count >= target_remove:
                break

            # An earlier carve may already have opened this one up
            directions = maze.get_directions(point)
            if popcount(directions) != 1:
                continue

            closed = [d for d in Direction.ORDER
                      if not directions & d and maze.size.contains(result_of(point, d))]
            if closed:
                maze.carve(point, rng.choice(closed))
                removed_count += 1

        return removed_count

    @staticmethod
    def calculate_stats(maze: Maze):
        dead_ends = 0
        corridors = 0
        intersections = 0  # 3 or 4 exits
        isolated = 0

        for point in maze.points():
            exits = popcount(maze.get_directions(point))
            if exits == 0: isolated += 1
            elif exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            else: intersections += 1

        total = maze.width * maze.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
