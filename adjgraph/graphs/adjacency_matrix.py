"""
Adjacency-matrix graph backend.

Keys are numbered 0..n-1 once, at construction, and edges live in a dense
n x n numpy boolean matrix. Edge tests and updates are O(1); degree and
adjacency queries scan one row or column in O(n); memory is O(n^2).
"""

from __future__ import annotations

from typing import Hashable, Iterable, List, Optional, Set

import numpy as np

from ..logging import get_logger
from .base import AdjacencyIterator, Graph, VertexNotFoundError
from .utils import node_index_map

logger = get_logger(__name__)


class AdjacencyMatrixGraph(Graph):
    """
    Directed graph stored as a dense boolean adjacency matrix.

    Cell (i, j) is True iff the edge (key_i, key_j) exists. Indices follow
    the first-seen order of the constructor's keys and never change; the
    translation tables are never mutated after construction, and the
    matrix is never reallocated.

    Args:
        keys: Iterable of hashable vertex keys. Duplicates are ignored.

    Complexity:
        - construction: O(V^2) memory
        - add_edge / remove_edge / has_edge: O(1)
        - out_degree / in_degree / successor_set / predecessor_set: O(V)
        - num_edges: O(V^2)

    Example:
        >>> G = AdjacencyMatrixGraph(["A", "B", "C"])
        >>> G.add_edge("A", "C")
        True
        >>> G.index_of("C")
        2
    """

    def __init__(self, keys: Iterable[Hashable]):
        self._key_to_index, self._index_to_key = node_index_map(keys)
        n = len(self._index_to_key)
        self._matrix = np.zeros((n, n), dtype=bool)
        logger.debug(f"Built {type(self).__name__} with {n} vertices ({self._matrix.nbytes} matrix bytes)")

    def index_of(self, key: Hashable) -> int:
        """
        Return the fixed matrix index of key.

        Raises:
            VertexNotFoundError: If key is not in the graph.
        """
        try:
            return self._key_to_index[key]
        except KeyError:
            raise VertexNotFoundError(key) from None

    def key_at(self, index: int) -> Hashable:
        """
        Return the key assigned to a matrix index.

        Raises:
            IndexError: If index is outside 0..size()-1.
        """
        if not 0 <= index < len(self._index_to_key):
            raise IndexError(f"Index {index} out of range for {len(self._index_to_key)} vertices")
        return self._index_to_key[index]

    def adjacency_array(self) -> np.ndarray:
        """Return a copy of the boolean adjacency matrix in index order."""
        return self._matrix.copy()

    def size(self) -> int:
        return self._matrix.shape[0]

    def num_edges(self) -> int:
        return int(np.count_nonzero(self._matrix))

    def has_vertex(self, key: Hashable) -> bool:
        return key in self._key_to_index

    def add_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        i = self.index_of(from_key)
        j = self.index_of(to_key)
        if self._matrix[i, j]:
            return False
        self._matrix[i, j] = True
        self._after_mutation()
        return True

    def remove_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        i = self.index_of(from_key)
        j = self.index_of(to_key)
        if not self._matrix[i, j]:
            return False
        self._matrix[i, j] = False
        self._after_mutation()
        return True

    def has_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        return bool(self._matrix[self.index_of(from_key), self.index_of(to_key)])

    def out_degree(self, key: Hashable) -> int:
        return int(np.count_nonzero(self._matrix[self.index_of(key)]))

    def in_degree(self, key: Hashable) -> int:
        return int(np.count_nonzero(self._matrix[:, self.index_of(key)]))

    def key_set(self) -> Set[Hashable]:
        return set(self._index_to_key)

    def successor_set(self, key: Hashable) -> Set[Hashable]:
        row = self._matrix[self.index_of(key)]
        return {self._index_to_key[j] for j in np.flatnonzero(row)}

    def predecessor_set(self, key: Hashable) -> Set[Hashable]:
        column = self._matrix[:, self.index_of(key)]
        return {self._index_to_key[i] for i in np.flatnonzero(column)}

    def successor_iterator(self, key: Hashable) -> "_MatrixScanIterator":
        return _MatrixScanIterator(self._matrix[self.index_of(key)], self._index_to_key)

    def predecessor_iterator(self, key: Hashable) -> "_MatrixScanIterator":
        return _MatrixScanIterator(self._matrix[:, self.index_of(key)], self._index_to_key)

    def check_invariants(self) -> None:
        n = len(self._index_to_key)
        if self._matrix.shape != (n, n) or len(self._key_to_index) != n:
            raise RuntimeError(
                f"{type(self).__name__} matrix shape {self._matrix.shape} does not match {n} vertices"
            )
        super().check_invariants()


class _MatrixScanIterator(AdjacencyIterator):
    """
    Scans one live row or column view forward from the last index returned.

    Nothing is precomputed: has_next() searches for the next True cell
    without moving, __next__ moves to it. The view has a fixed length, so
    edge changes can only alter which keys come out, not the indices read.
    """

    def __init__(self, line: np.ndarray, index_to_key: List[Hashable]):
        self._line = line
        self._index_to_key = index_to_key
        self._last = -1

    def _find_next(self) -> Optional[int]:
        start = self._last + 1
        hits = np.flatnonzero(self._line[start:])
        if hits.size == 0:
            return None
        return start + int(hits[0])

    def has_next(self) -> bool:
        return self._find_next() is not None

    def __next__(self) -> Hashable:
        index = self._find_next()
        if index is None:
            raise StopIteration
        self._last = index
        return self._index_to_key[index]
