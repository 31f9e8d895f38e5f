"""
Adjacency-list graph backend.

Vertex records live in an arena (a list) and refer to each other by integer
handle, so successor and predecessor lists hold handles instead of object
references. Construction is O(V); edge tests and updates cost O(deg(v)).
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Set

from ..logging import get_logger
from .base import AdjacencyIterator, Graph, VertexNotFoundError

logger = get_logger(__name__)


class _VertexRecord:
    """One vertex: its key plus ordered successor and predecessor handles."""

    __slots__ = ("key", "successors", "predecessors")

    def __init__(self, key: Hashable):
        self.key = key
        self.successors: List[int] = []
        self.predecessors: List[int] = []


class AdjacencyListGraph(Graph):
    """
    Directed graph stored as per-vertex successor and predecessor lists.

    The two lists are kept mirror images of each other: handle h appears in
    the successors of v exactly when v appears in the predecessors of h.
    Every mutator updates both sides in the same call.

    Args:
        keys: Iterable of hashable vertex keys. Duplicates are ignored.

    Complexity:
        - construction: O(V)
        - add_edge / remove_edge / has_edge: O(deg)
        - out_degree / in_degree: O(1)
        - num_edges: O(V)

    Example:
        >>> G = AdjacencyListGraph(["A", "B", "C"])
        >>> G.add_edge("A", "B")
        True
        >>> G.successor_set("A")
        {'B'}
    """

    def __init__(self, keys: Iterable[Hashable]):
        self._records: List[_VertexRecord] = []
        self._handles: Dict[Hashable, int] = {}
        for key in keys:
            if key not in self._handles:
                self._handles[key] = len(self._records)
                self._records.append(_VertexRecord(key))
        logger.debug(f"Built {type(self).__name__} with {len(self._records)} vertices")

    def _handle(self, key: Hashable) -> int:
        try:
            return self._handles[key]
        except KeyError:
            raise VertexNotFoundError(key) from None

    def _record(self, key: Hashable) -> _VertexRecord:
        return self._records[self._handle(key)]

    def size(self) -> int:
        return len(self._records)

    def num_edges(self) -> int:
        return sum(len(record.successors) for record in self._records)

    def has_vertex(self, key: Hashable) -> bool:
        return key in self._handles

    def add_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        src = self._handle(from_key)
        dst = self._handle(to_key)
        src_record = self._records[src]
        dst_record = self._records[dst]

        if dst in src_record.successors or src in dst_record.predecessors:
            return False

        src_record.successors.append(dst)
        dst_record.predecessors.append(src)
        self._after_mutation()
        return True

    def remove_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        src = self._handle(from_key)
        dst = self._handle(to_key)
        src_record = self._records[src]
        dst_record = self._records[dst]

        if dst not in src_record.successors or src not in dst_record.predecessors:
            return False

        src_record.successors.remove(dst)
        dst_record.predecessors.remove(src)
        self._after_mutation()
        return True

    def has_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        src = self._handle(from_key)
        dst = self._handle(to_key)
        return dst in self._records[src].successors

    def out_degree(self, key: Hashable) -> int:
        return len(self._record(key).successors)

    def in_degree(self, key: Hashable) -> int:
        return len(self._record(key).predecessors)

    def key_set(self) -> Set[Hashable]:
        return set(self._handles)

    def successor_set(self, key: Hashable) -> Set[Hashable]:
        return {self._records[h].key for h in self._record(key).successors}

    def predecessor_set(self, key: Hashable) -> Set[Hashable]:
        return {self._records[h].key for h in self._record(key).predecessors}

    def successor_iterator(self, key: Hashable) -> "_HandleListIterator":
        return _HandleListIterator(self._records, self._record(key).successors)

    def predecessor_iterator(self, key: Hashable) -> "_HandleListIterator":
        return _HandleListIterator(self._records, self._record(key).predecessors)


class _HandleListIterator(AdjacencyIterator):
    """
    Walks a live handle list by position up to its length at creation.

    The bound is snapshotted once; if the list shrinks underneath the
    iterator, iteration simply ends early.
    """

    def __init__(self, records: List[_VertexRecord], handles: List[int]):
        self._records = records
        self._handles = handles
        self._limit = len(handles)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < min(self._limit, len(self._handles))

    def __next__(self) -> Hashable:
        if not self.has_next():
            raise StopIteration
        handle = self._handles[self._position]
        self._position += 1
        return self._records[handle].key
