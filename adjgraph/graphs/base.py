"""
Abstract directed-graph contract shared by every storage backend.

A backend is built once from a fixed set of hashable vertex keys and starts
with no edges. Afterwards only edges change: there are no operations to add
or remove vertices. Every operation addresses vertices by key, never by an
internal index, and raises VertexNotFoundError for keys outside the key
space.

Algorithms (strongly connected components, shortest paths) are written
against this interface only, so either backend can be used with them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional, Set, Tuple

from ..diagnostics import assert_adjacency_consistent, is_debug_enabled


class VertexNotFoundError(KeyError):
    """
    Raised when an operation references a key outside a graph's key space.

    Attributes:
        key: The offending vertex key.
    """

    def __init__(self, key: Hashable):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Vertex {self.key!r} not in graph"


class AdjacencyIterator(ABC):
    """
    Lazy, forward-only iterator over the keys adjacent to one vertex.

    Besides the iterator protocol, has_next() reports whether another key
    is available without consuming it. Mutating the graph while an
    iterator over the affected vertex is live gives an unspecified
    sequence of keys, but the iterator always terminates and never reads
    outside the backing storage.
    """

    def __iter__(self) -> "AdjacencyIterator":
        return self

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if __next__ would produce another key."""

    @abstractmethod
    def __next__(self) -> Hashable:
        """Return the next adjacent key or raise StopIteration."""


class Graph(ABC):
    """
    Directed graph over a fixed set of hashable vertex keys.

    Edges are unweighted ordered pairs; a given pair is either present or
    absent. Self-loops are allowed.
    """

    @abstractmethod
    def size(self) -> int:
        """Return the number of vertices."""

    @abstractmethod
    def num_edges(self) -> int:
        """Return the number of directed edges."""

    @abstractmethod
    def has_vertex(self, key: Hashable) -> bool:
        """Return True if key is one of the graph's vertices."""

    @abstractmethod
    def add_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        """
        Add the directed edge (from_key, to_key).

        Returns:
            True if the edge was added, False if it was already present.

        Raises:
            VertexNotFoundError: If either key is not in the graph.
        """

    @abstractmethod
    def remove_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        """
        Remove the directed edge (from_key, to_key).

        Returns:
            True if the edge was removed, False if it was not present.

        Raises:
            VertexNotFoundError: If either key is not in the graph.
        """

    @abstractmethod
    def has_edge(self, from_key: Hashable, to_key: Hashable) -> bool:
        """
        Return True if the directed edge (from_key, to_key) is present.

        Raises:
            VertexNotFoundError: If either key is not in the graph.
        """

    @abstractmethod
    def out_degree(self, key: Hashable) -> int:
        """Return the number of successors of key."""

    @abstractmethod
    def in_degree(self, key: Hashable) -> int:
        """Return the number of predecessors of key."""

    @abstractmethod
    def key_set(self) -> Set[Hashable]:
        """Return a new set holding every vertex key."""

    @abstractmethod
    def successor_set(self, key: Hashable) -> Set[Hashable]:
        """Return the keys v such that (key, v) is an edge."""

    @abstractmethod
    def predecessor_set(self, key: Hashable) -> Set[Hashable]:
        """Return the keys u such that (u, key) is an edge."""

    @abstractmethod
    def successor_iterator(self, key: Hashable) -> AdjacencyIterator:
        """Return a lazy iterator over the successors of key."""

    @abstractmethod
    def predecessor_iterator(self, key: Hashable) -> AdjacencyIterator:
        """Return a lazy iterator over the predecessors of key."""

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        try:
            return self.has_vertex(key)
        except TypeError:
            # unhashable keys can never be vertices
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(V={self.size()}, E={self.num_edges()})"

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """
        Return every directed edge as a (from, to) tuple.

        Order follows key_set() iteration, then each successor iterator.
        """
        from .utils import edge_list

        return edge_list(self)

    def strongly_connected_component(self, key: Hashable) -> Set[Hashable]:
        """
        Return the keys mutually reachable with key (key included).

        See adjgraph.graphs.components.strongly_connected_component.
        """
        from .components import strongly_connected_component

        return strongly_connected_component(self, key)

    def shortest_path(self, start: Hashable, end: Hashable) -> Optional[List[Hashable]]:
        """
        Return a shortest path from start to end, or None if end is unreachable.

        See adjgraph.graphs.shortest.shortest_path.
        """
        from .shortest import shortest_path

        return shortest_path(self, start, end)

    def check_invariants(self) -> None:
        """
        Validate the backend's internal bookkeeping.

        Raises:
            RuntimeError: If the adjacency structures disagree with each other.
        """
        assert_adjacency_consistent(self)

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            self.check_invariants()
