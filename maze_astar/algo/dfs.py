import random
from typing import Iterator, List

from maze_astar.algo.base import Generator
from maze_astar.core.geometry import Direction, Point, result_of


class RecursiveBacktracker(Generator):
    """
    Carves a perfect maze (exactly one route between any two cells) by a
    randomised depth-first walk from the maze's start cell.
    """
    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        maze = self.maze

        visited = bytearray(maze.width * maze.height)
        start = maze.start
        visited[maze.get_index(start)] = 1

        stack: List[Point] = [start]

        while stack:
            current = stack[-1]

            # Unvisited grid neighbours, walls are ignored here
            neighbors = []
            for direction in Direction.ORDER:
                nxt = result_of(current, direction)
                if maze.size.contains(nxt) and not visited[maze.get_index(nxt)]:
                    neighbors.append((nxt, direction))

            if neighbors:
                nxt, direction = rng.choice(neighbors)
                maze.carve(current, direction)
                visited[maze.get_index(nxt)] = 1

                stack.append(nxt)
                self.step_count += 1

                # Yield every N steps to keep UI responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                stack.pop()

        yield "Done"
