"""
Strongly connected component of a single vertex.

A key w shares a component with key v iff w is reachable from v and v is
reachable from w, so the component is the intersection of one forward and
one backward reachability pass.
"""

from typing import TYPE_CHECKING, Hashable, Set

from ..logging import get_logger
from .traversal import backward_reachable, forward_reachable

if TYPE_CHECKING:
    from .base import Graph

logger = get_logger(__name__)


def strongly_connected_component(graph: "Graph", key: Hashable) -> Set[Hashable]:
    """
    Return the strongly connected component containing key.

    Args:
        graph: Graph backend.
        key: Vertex whose component is wanted.

    Returns:
        Set of keys mutually reachable with key, always including key.

    Raises:
        VertexNotFoundError: If key is not in graph.

    Complexity: O(V + E) per pass, two passes.

    Example:
        >>> G = AdjacencyMatrixGraph(['A', 'B', 'C'])
        >>> G.add_edge('A', 'B'), G.add_edge('B', 'A'), G.add_edge('B', 'C')
        (True, True, True)
        >>> strongly_connected_component(G, 'A') == {'A', 'B'}
        True
    """
    forward = forward_reachable(graph, key)
    backward = backward_reachable(graph, key)
    component = forward & backward
    logger.debug(
        f"Component of {key!r}: {len(component)} keys "
        f"({len(forward)} forward-reachable, {len(backward)} backward-reachable)"
    )
    return component
