"""
Longest shortest path from a fixed source.

Runs shortest_path from one source to every key on a thread pool, then
picks the longest result on the calling thread. Workers share nothing but
the (read-only) graph, so no locking is needed as long as the caller does
not mutate the graph while the search runs.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable, List, Optional

from ..logging import get_logger
from .base import VertexNotFoundError
from .shortest import shortest_path

if TYPE_CHECKING:
    from .base import Graph

logger = get_logger(__name__)


@dataclass(frozen=True)
class LongestPathConfig:
    """
    Options for longest_shortest_path.

    Args:
        max_workers: Thread pool size. None lets ThreadPoolExecutor choose.
        include_trivial: If True, the one-key path [source] is a valid
            result when no other key is reachable.
    """

    max_workers: Optional[int] = None
    include_trivial: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


def longest_shortest_path(
    graph: "Graph", source: Hashable, config: Optional[LongestPathConfig] = None
) -> Optional[List[Hashable]]:
    """
    Return the longest of the shortest paths from source to every other key.

    Args:
        graph: Graph backend. Must not be mutated during the call.
        source: Start of every candidate path.
        config: Search options (defaults to LongestPathConfig()).

    Returns:
        The longest shortest path as a list of keys, or None if no key other
        than source is reachable (and include_trivial is off). Among paths
        of equal length, the target that comes first in key_set() order wins.

    Raises:
        VertexNotFoundError: If source is not in graph.

    Example:
        >>> G = AdjacencyListGraph(['A', 'B', 'C'])
        >>> G.add_edge('A', 'B'), G.add_edge('B', 'C')
        (True, True)
        >>> longest_shortest_path(G, 'A')
        ['A', 'B', 'C']
    """
    if config is None:
        config = LongestPathConfig()
    if not graph.has_vertex(source):
        raise VertexNotFoundError(source)

    targets = list(graph.key_set())
    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        paths = list(pool.map(lambda target: shortest_path(graph, source, target), targets))

    best: Optional[List[Hashable]] = None
    min_length = 1 if config.include_trivial else 2
    for path in paths:
        if path is None or len(path) < min_length:
            continue
        if best is None or len(path) > len(best):
            best = path

    if best is None:
        logger.debug(f"No path leaves {source!r}")
    else:
        logger.debug(f"Longest shortest path from {source!r} ends at {best[-1]!r} after {len(best) - 1} edges")
    return best


def max_out_degree_vertex(graph: "Graph") -> Optional[Hashable]:
    """
    Return the key with the highest out-degree.

    Ties, including a graph where every out-degree is zero, go to the key
    that comes first in key_set() order.

    Returns:
        A vertex key, or None if the graph has no vertices.
    """
    best_key: Optional[Hashable] = None
    best_degree = -1
    for key in graph.key_set():
        degree = graph.out_degree(key)
        if degree > best_degree:
            best_key, best_degree = key, degree
    return best_key
