"""
Utility functions for graph backends and algorithms.

Provides helpers for key indexing, edge enumeration, and dense adjacency
export.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np

from .base import VertexNotFoundError

if TYPE_CHECKING:
    from .base import Graph


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from keys to indices 0..n-1.

    Keys are numbered in the order they are first produced by the iterable;
    repeated keys keep their first index.

    Args:
        nodes: Iterable of hashable keys.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the key ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_node
        ['c', 'a', 'b']
    """
    index_to_node = list(dict.fromkeys(nodes))
    node_to_index = {node: idx for idx, node in enumerate(index_to_node)}
    return node_to_index, index_to_node


def edge_list(graph: "Graph") -> List[Tuple[Hashable, Hashable]]:
    """
    Return every directed edge of a graph as (from, to) tuples.

    Only the abstract graph interface is used, so any backend works.

    Args:
        graph: Graph backend.

    Returns:
        List of (from, to) tuples, grouped by source key in key_set() order
        and, within a source, in successor-iterator order.
    """
    edges: List[Tuple[Hashable, Hashable]] = []
    for u in graph.key_set():
        for v in graph.successor_iterator(u):
            edges.append((u, v))
    return edges


def adjacency_array(graph: "Graph", order: Optional[Iterable[Hashable]] = None) -> np.ndarray:
    """
    Build a dense boolean adjacency matrix for any backend.

    A[i, j] is True iff (order[i], order[j]) is an edge.

    Args:
        graph: Graph backend.
        order: Keys defining row/column order. Defaults to key_set() order.
            Keys may be a subset of the graph's keys; edges to keys outside
            the subset are dropped.

    Returns:
        (n, n) numpy array of dtype bool.

    Raises:
        VertexNotFoundError: If order contains a key not in the graph.

    Example:
        >>> G = AdjacencyListGraph(['a', 'b'])
        >>> G.add_edge('a', 'b')
        True
        >>> adjacency_array(G, ['a', 'b']).astype(int).tolist()
        [[0, 1], [0, 0]]
    """
    node_to_idx, idx_to_node = node_index_map(graph.key_set() if order is None else order)
    n = len(idx_to_node)
    A = np.zeros((n, n), dtype=bool)

    for u in idx_to_node:
        if not graph.has_vertex(u):
            raise VertexNotFoundError(u)
        i = node_to_idx[u]
        for v in graph.successor_iterator(u):
            j = node_to_idx.get(v)
            if j is not None:
                A[i, j] = True
    return A
