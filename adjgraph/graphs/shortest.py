"""
Unweighted shortest path search.

Breadth-first search over whole candidate paths rather than single keys.
Each key is enqueued at most once, so the first path that reaches the
target is a shortest one in edge count.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS and shortest-path distances).
"""

from collections import deque
from typing import TYPE_CHECKING, Deque, Hashable, List, Optional, Set, Tuple

from ..logging import get_logger
from .base import VertexNotFoundError

if TYPE_CHECKING:
    from .base import Graph

logger = get_logger(__name__)


def shortest_path(graph: "Graph", start: Hashable, end: Hashable) -> Optional[List[Hashable]]:
    """
    Find a path with the fewest edges from start to end.

    When several shortest paths exist, the one discovered first is returned.
    Discovery order follows successor_set iteration, so which one wins is
    backend-dependent.

    Args:
        graph: Graph backend.
        start: First key of the path.
        end: Last key of the path.

    Returns:
        List of keys beginning with start and ending with end, or None if
        end is not reachable from start. [start] if start == end.

    Raises:
        VertexNotFoundError: If start or end is not in graph.

    Complexity: O(V + E) queue operations; each extension copies its
    parent path, O(V) per copy.

    Example:
        >>> G = AdjacencyListGraph(['A', 'B', 'C'])
        >>> G.add_edge('A', 'B'), G.add_edge('B', 'C'), G.add_edge('A', 'C')
        (True, True, True)
        >>> shortest_path(G, 'A', 'C')
        ['A', 'C']
    """
    for key in (start, end):
        if not graph.has_vertex(key):
            raise VertexNotFoundError(key)

    if start == end:
        return [start]

    paths: Deque[Tuple[Hashable, ...]] = deque([(start,)])
    visited: Set[Hashable] = {start}
    best: Optional[Tuple[Hashable, ...]] = None

    while paths:
        path = paths.popleft()
        # Extensions of this path can only be longer than the best one
        if best is not None and len(path) >= len(best):
            continue

        for v in graph.successor_set(path[-1]):
            if v in visited:
                continue
            visited.add(v)
            extended = path + (v,)
            paths.append(extended)
            if v == end and (best is None or len(extended) < len(best)):
                best = extended

    if best is None:
        logger.debug(f"No path from {start!r} to {end!r}")
        return None

    logger.debug(f"Shortest path from {start!r} to {end!r} has {len(best) - 1} edges")
    return list(best)
