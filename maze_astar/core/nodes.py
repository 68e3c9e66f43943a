from collections import Counter
from typing import Iterator, List, NamedTuple, Optional

from maze_astar.core.errors import AllocationFailure, PinnedNodeError
from maze_astar.core.geometry import Point


class Node(NamedTuple):
    point: Point
    # Index of the parent in the arena that stores this node, None for a root
    parent: Optional[int] = None
    path_cost: int = 0


class NodeCollection:
    """
    Ordered, growable sequence of nodes.

    Used two ways by the solver:
    - as a frontier: nodes are inserted and removed at arbitrary indexes,
      remaining nodes keep their relative order.
    - as an arena: nodes are pushed at the end and their index is handed out
      as a parent reference. Any node that has been referenced this way is
      pinned and can no longer be shifted by insert/remove.

    Capacity doubles when exhausted (0 -> 1 -> 2 -> 4 ...). 'max_capacity'
    bounds growth; exceeding it raises AllocationFailure.
    """

    def __init__(self, capacity: int = 0, max_capacity: Optional[int] = None):
        if capacity < 0:
            raise ValueError("Capacity cannot be negative")
        if max_capacity is not None and capacity > max_capacity:
            raise AllocationFailure(f"Initial capacity {capacity} exceeds limit {max_capacity}")

        self.nodes: List[Node] = []
        self.capacity = capacity
        self.max_capacity = max_capacity
        # Point -> number of nodes at that point
        self._counts = Counter()
        # Nodes at indexes below this are referenced as parents
        self._pinned = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __repr__(self):
        return f"NodeCollection(length={len(self.nodes)}, capacity={self.capacity})"

    @property
    def pinned(self) -> int:
        return self._pinned

    def get(self, index: int) -> Node:
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"Node index {index} out of range for length {len(self.nodes)}")
        return self.nodes[index]

    def resize(self, new_capacity: int):
        if new_capacity < len(self.nodes):
            raise ValueError(f"Cannot shrink capacity to {new_capacity} below length {len(self.nodes)}")
        if self.max_capacity is not None and new_capacity > self.max_capacity:
            raise AllocationFailure(f"Capacity {new_capacity} exceeds limit {self.max_capacity}")
        self.capacity = new_capacity

    def _reserve_one(self):
        if len(self.nodes) < self.capacity:
            return

        new_capacity = 1 if self.capacity == 0 else self.capacity * 2
        if self.max_capacity is not None:
            if len(self.nodes) >= self.max_capacity:
                raise AllocationFailure(f"Node collection full ({self.max_capacity} nodes)")
            new_capacity = min(new_capacity, self.max_capacity)
        self.resize(new_capacity)

    def insert(self, node: Node, index: int):
        """Inserts 'node' before 'index'; 'index' may equal the length."""
        length = len(self.nodes)
        if not 0 <= index <= length:
            raise IndexError(f"Insert index {index} out of range for length {length}")
        if index < self._pinned:
            raise PinnedNodeError(f"Insert at {index} would shift parent-referenced node")

        self._reserve_one()
        try:
            self.nodes.insert(index, node)
        except MemoryError as e:
            raise AllocationFailure("Cannot grow node collection") from e
        self._counts[node.point] += 1

    def remove(self, index: int) -> Node:
        length = len(self.nodes)
        if not 0 <= index < length:
            raise IndexError(f"Remove index {index} out of range for length {length}")
        if index < self._pinned:
            raise PinnedNodeError(f"Node {index} is referenced as a parent")

        node = self.nodes.pop(index)
        self._counts[node.point] -= 1
        if not self._counts[node.point]:
            del self._counts[node.point]
        return node

    def append(self, node: Node) -> int:
        self.insert(node, len(self.nodes))
        return len(self.nodes) - 1

    def push(self, node: Node) -> int:
        """
        Appends 'node' as an arena entry and returns its index handle.
        The node's parent must already be stored here; it becomes pinned.
        """
        if node.parent is not None:
            if not 0 <= node.parent < len(self.nodes):
                raise IndexError(f"Parent index {node.parent} is not in this collection")
            self._pinned = max(self._pinned, node.parent + 1)
        return self.append(node)

    def contains(self, point: Point) -> bool:
        return point in self._counts

    def __contains__(self, point) -> bool:
        return self.contains(point)

    def walk(self, index: int = -1) -> Iterator[Node]:
        """Yields the node at 'index', then each ancestor up to the root."""
        if not self.nodes:
            return
        if index < 0:
            index += len(self.nodes)
        node = self.get(index)
        while True:
            yield node
            if node.parent is None:
                break
            node = self.nodes[node.parent]

    def path(self, index: int = -1) -> List[Point]:
        """Points from the root to the node at 'index'."""
        points = [node.point for node in self.walk(index)]
        points.reverse()
        return points

    def path_length(self, index: int = -1) -> int:
        """Number of moves between the root and the node at 'index'."""
        return max(0, sum(1 for _ in self.walk(index)) - 1)
