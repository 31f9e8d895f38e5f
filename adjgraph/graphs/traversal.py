"""
Graph traversal algorithms: reachability and BFS.

Written against the abstract Graph interface only. Reachability passes are
stack-based (LIFO), so they return sets; visiting order is not part of
their result.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import TYPE_CHECKING, Callable, Hashable, List, Set

from .base import VertexNotFoundError

if TYPE_CHECKING:
    from .base import Graph


def _reachable(
    graph: "Graph", source: Hashable, neighbors: Callable[[Hashable], Set[Hashable]]
) -> Set[Hashable]:
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source)

    visited: Set[Hashable] = {source}
    stack: List[Hashable] = [source]

    while stack:
        u = stack.pop()
        for v in neighbors(u):
            if v not in visited:
                visited.add(v)
                stack.append(v)

    return visited


def forward_reachable(graph: "Graph", source: Hashable) -> Set[Hashable]:
    """
    Return every key reachable from source along edge direction.

    Args:
        graph: Graph to traverse.
        source: Key to start from. It is always part of the result.

    Returns:
        Set of reachable keys.

    Raises:
        VertexNotFoundError: If source is not in graph.

    Complexity: O(V + E) set operations.

    Example:
        >>> G = AdjacencyListGraph(['A', 'B', 'C'])
        >>> G.add_edge('A', 'B')
        True
        >>> forward_reachable(G, 'A') == {'A', 'B'}
        True
    """
    return _reachable(graph, source, graph.successor_set)


def backward_reachable(graph: "Graph", source: Hashable) -> Set[Hashable]:
    """
    Return every key from which source can be reached.

    Same traversal as forward_reachable, following predecessor edges.

    Raises:
        VertexNotFoundError: If source is not in graph.
    """
    return _reachable(graph, source, graph.predecessor_set)


def bfs_order(graph: "Graph", source: Hashable) -> List[Hashable]:
    """
    Breadth-first search from a source key.

    Successors are taken from successor_iterator, so ties within one BFS
    level follow the backend's iteration order.

    Args:
        graph: Graph to traverse.
        source: Key to start from.

    Returns:
        Keys in BFS discovery order, source first, each key once.

    Raises:
        VertexNotFoundError: If source is not in graph.

    Complexity: O(V + E).
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source)

    order: List[Hashable] = []
    visited: Set[Hashable] = {source}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph.successor_iterator(u):
            if v not in visited:
                visited.add(v)
                queue.append(v)

    return order
