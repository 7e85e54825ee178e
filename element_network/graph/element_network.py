"""
ElementNetwork: a fixed universe of numbered elements with an undirected
"connected" relation and breadth-first reachability queries.
"""

import logging
import numbers
from collections import deque
from typing import Dict, FrozenSet, List, Optional

import networkx as nx

from ..core.exceptions import InvalidArgumentError, InvalidStateError
from ..core.models import Connection, ConnectionLevel
from ..validators.element_validator import ElementValidator

logger = logging.getLogger(__name__)

# Internal BFS result when the target cannot be reached
UNREACHABLE = -1


class ElementNetwork:
    """
    Elements ``1..size`` and the symmetric adjacency between them.

    Every element has an adjacency entry from construction onward. The
    relation is stored in an undirected ``networkx.Graph``, so
    ``b in neighbors(a)`` holds exactly when ``a in neighbors(b)``.
    Every public operation validates its element arguments before
    touching state, so a failed call never leaves a half-applied edge.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
            raise InvalidArgumentError(
                "Size must be a positive integer.",
                details={'size': size},
            )

        self._size = int(size)
        self._validator = ElementValidator(self._size)
        self._graph = nx.Graph(name="Element Network")
        self._graph.add_nodes_from(range(1, self._size + 1))

        logger.debug(f"Created network with {size} elements")

    @property
    def size(self) -> int:
        return self._size

    @property
    def elements(self) -> range:
        """The valid element universe."""
        return range(1, self._size + 1)

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def graph(self) -> nx.Graph:
        """Frozen read-only view of the underlying networkx graph."""
        return nx.freeze(self._graph.copy(as_view=True))

    @property
    def adjacency(self) -> Dict[int, FrozenSet[int]]:
        """Read-only snapshot of element -> neighbor set."""
        return {node: frozenset(neighbors) for node, neighbors in self._graph.adjacency()}

    # Mutations -----------------------------------------------------------

    def connect(self, a: int, b: int) -> bool:
        """
        Connect two distinct elements.

        Args:
            a: First element
            b: Second element

        Returns:
            True if a new edge was created, False if it already existed

        Raises:
            OutOfRangeError: If either element is outside 1..size
            InvalidArgumentError: If ``a == b``
        """
        self._validator.validate_pair(a, b)

        if a == b:
            raise InvalidArgumentError(
                "Cannot connect an element to itself.",
                details={'element': a},
            )

        if self._graph.has_edge(a, b):
            logger.debug(f"Elements {a} and {b} already connected")
            return False

        self._graph.add_edge(int(a), int(b))
        logger.debug(f"Connected {a} and {b}")
        return True

    def disconnect(self, a: int, b: int) -> None:
        """
        Remove the direct connection between two elements.

        Raises:
            OutOfRangeError: If either element is outside 1..size
            InvalidStateError: If the elements are not directly connected
        """
        self._validator.validate_pair(a, b)

        if not self._graph.has_edge(a, b):
            raise InvalidStateError(
                "Elements are not connected.",
                details={'a': a, 'b': b},
            )

        self._graph.remove_edge(a, b)
        logger.debug(f"Disconnected {a} and {b}")

    # Queries -------------------------------------------------------------

    def are_connected(self, a: int, b: int) -> bool:
        """Whether ``b`` is reachable from ``a`` through zero or more edges."""
        self._validator.validate_pair(a, b)
        return self._bfs(a, b) != UNREACHABLE

    def level_of(self, a: int, b: int) -> int:
        """
        Number of edges on a shortest path between two elements.

        Returns 0 both when ``a == b`` and when the elements are unreachable
        from each other; use ``are_connected`` or ``query`` to tell them apart.
        """
        self._validator.validate_pair(a, b)

        if a == b:
            return 0

        level = self._bfs(a, b)
        return 0 if level == UNREACHABLE else level

    def query(self, a: int, b: int) -> ConnectionLevel:
        """Reachability and level of two elements in a single answer."""
        self._validator.validate_pair(a, b)
        level = self._bfs(a, b)
        if level == UNREACHABLE:
            return ConnectionLevel(a, b, connected=False, level=0)
        return ConnectionLevel(a, b, connected=True, level=level)

    def shortest_path(self, a: int, b: int) -> List[int]:
        """
        One shortest path from ``a`` to ``b`` as a list of elements.

        Returns ``[a]`` when ``a == b`` and an empty list when unreachable.
        """
        self._validator.validate_pair(a, b)

        parents = {}
        if self._bfs(a, b, parents) == UNREACHABLE:
            return []

        path = [b]
        while path[-1] != a:
            path.append(parents[path[-1]])
        path.reverse()
        return path

    def neighbors(self, a: int) -> FrozenSet[int]:
        """Elements directly connected to ``a``."""
        self._validator.validate(a)
        return frozenset(self._graph.adj[a])

    def has_edge(self, a: int, b: int) -> bool:
        """Whether two elements are directly connected."""
        self._validator.validate_pair(a, b)
        return self._graph.has_edge(a, b)

    def edges(self) -> List[Connection]:
        """All connections, sorted."""
        return sorted(Connection.of(a, b) for a, b in self._graph.edges())

    def _bfs(self, start: int, target: int, parents: Optional[Dict[int, int]] = None) -> int:
        """
        Breadth-first search for the hop distance from ``start`` to ``target``.

        Returns UNREACHABLE when the queue empties without finding ``target``.
        When ``parents`` is given it is filled with the BFS tree links.
        """
        if start == target:
            return 0

        adjacency = self._graph.adj

        visited = {start}
        queue = deque([(start, 0)])

        while queue:
            current, level = queue.popleft()

            for neighbor in adjacency[current]:
                if neighbor in visited:
                    continue
                if parents is not None:
                    parents[neighbor] = current
                if neighbor == target:
                    return level + 1
                visited.add(neighbor)
                queue.append((neighbor, level + 1))

        return UNREACHABLE

    # Container protocol --------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element) -> bool:
        return self._validator.is_valid(element)

    def __repr__(self) -> str:
        return f"ElementNetwork(size={self._size}, edges={self.edge_count})"
