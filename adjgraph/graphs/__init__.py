"""
Directed graph package for adjgraph.

This package provides one abstract directed-graph contract and two storage
backends behind it, plus algorithms written against the contract only:
- Graph contract and error type (Graph, AdjacencyIterator, VertexNotFoundError)
- Adjacency-list backend (AdjacencyListGraph)
- Adjacency-matrix backend (AdjacencyMatrixGraph)
- Reachability and BFS (forward_reachable, backward_reachable, bfs_order)
- Strongly connected component of one vertex
- Unweighted shortest path and longest shortest path

Vertex keys are fixed when a backend is built; only edges change afterwards.
"""

from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .base import AdjacencyIterator, Graph, VertexNotFoundError
from .components import strongly_connected_component
from .longest import LongestPathConfig, longest_shortest_path, max_out_degree_vertex
from .shortest import shortest_path
from .traversal import backward_reachable, bfs_order, forward_reachable
from .utils import adjacency_array, edge_list, node_index_map

__all__ = [
    "Graph",
    "AdjacencyIterator",
    "VertexNotFoundError",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "forward_reachable",
    "backward_reachable",
    "bfs_order",
    "strongly_connected_component",
    "shortest_path",
    "LongestPathConfig",
    "longest_shortest_path",
    "max_out_degree_vertex",
    "node_index_map",
    "edge_list",
    "adjacency_array",
]

# Example usage:
# from adjgraph.graphs import AdjacencyListGraph, shortest_path
#
# G = AdjacencyListGraph(['A', 'B', 'C'])
# G.add_edge('A', 'B')
# G.add_edge('B', 'C')
# path = shortest_path(G, 'A', 'C')  # ['A', 'B', 'C']
