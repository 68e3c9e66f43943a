class MazeError(Exception):
    """Base class for every error raised by maze_astar."""


class OutOfBounds(MazeError, IndexError):
    """A point lies outside the grid of the maze it was used with."""

    def __init__(self, point, size):
        self.point = tuple(point)
        self.size = tuple(size)
        super().__init__(f"Coordinate {self.point} out of bounds for {self.size[0]}x{self.size[1]} maze")


class AllocationFailure(MazeError, MemoryError):
    """Cell storage or a node collection could not be created or grown."""


class PinnedNodeError(MazeError, ValueError):
    """An insert/remove would shift a node that is referenced as a parent."""


class MazeFormatError(MazeError, ValueError):
    """A maze file could not be parsed."""
