"""Consistency checks for graph backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, List

if TYPE_CHECKING:
    from ..graphs.base import Graph


def adjacency_violations(graph: "Graph") -> List[str]:
    """
    Collect every adjacency bookkeeping violation in a graph.

    Only the public backend contract is used, so the check applies to any
    backend. Three properties are verified for each vertex v:

    - w in successor_set(v) iff v in predecessor_set(w)
    - out_degree(v) == len(successor_set(v)) == number of keys produced by
      successor_iterator(v), each of them distinct
    - the same for in_degree / predecessor_set / predecessor_iterator

    Parameters
    ----------
    graph:
        Graph backend to inspect.

    Returns
    -------
    list of str
        Human-readable descriptions, empty if the graph is consistent.

    Complexity: O(V + E) set operations plus whatever the backend needs to
    produce adjacency sets (O(V^2) for the matrix backend).
    """
    problems: List[str] = []
    for v in graph.key_set():
        successors = graph.successor_set(v)
        predecessors = graph.predecessor_set(v)

        for w in successors:
            if v not in graph.predecessor_set(w):
                problems.append(f"edge ({v!r}, {w!r}) missing from predecessors of {w!r}")
        for u in predecessors:
            if v not in graph.successor_set(u):
                problems.append(f"edge ({u!r}, {v!r}) missing from successors of {u!r}")

        problems.extend(
            _degree_violations(v, "out", graph.out_degree(v), successors, list(graph.successor_iterator(v)))
        )
        problems.extend(
            _degree_violations(v, "in", graph.in_degree(v), predecessors, list(graph.predecessor_iterator(v)))
        )
    return problems


def _degree_violations(
    key: Hashable, direction: str, degree: int, adjacent: set, iterated: list
) -> List[str]:
    problems = []
    if degree != len(adjacent):
        problems.append(f"{direction}-degree of {key!r} is {degree} but {len(adjacent)} keys are adjacent")
    if len(iterated) != len(set(iterated)) or set(iterated) != adjacent:
        problems.append(f"{direction}-iterator of {key!r} produced {iterated!r}, expected {sorted(map(repr, adjacent))}")
    return problems


def is_adjacency_consistent(graph: "Graph") -> bool:
    """
    Check whether a graph's adjacency bookkeeping is internally consistent.

    Parameters
    ----------
    graph:
        Graph backend to inspect.

    Returns
    -------
    bool
        True if no violations were found.
    """
    return not adjacency_violations(graph)


def assert_adjacency_consistent(graph: "Graph") -> None:
    """
    Assert that a graph's adjacency bookkeeping is internally consistent.

    Raises
    ------
    RuntimeError
        If any violation is found. The message lists the first few.
    """
    problems = adjacency_violations(graph)
    if problems:
        shown = "; ".join(problems[:5])
        more = f" (+{len(problems) - 5} more)" if len(problems) > 5 else ""
        raise RuntimeError(f"{type(graph).__name__} adjacency is inconsistent: {shown}{more}")
