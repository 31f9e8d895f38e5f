"""adjgraph - directed graphs with interchangeable list and matrix backends."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_adjacency_consistent,
    debug_context,
    is_adjacency_consistent,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph backends and algorithms
from .graphs import (
    AdjacencyIterator,
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    Graph,
    LongestPathConfig,
    VertexNotFoundError,
    adjacency_array,
    backward_reachable,
    bfs_order,
    edge_list,
    forward_reachable,
    longest_shortest_path,
    max_out_degree_vertex,
    node_index_map,
    shortest_path,
    strongly_connected_component,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    # Version
    "__version__",
    # Graph contract
    "Graph",
    "AdjacencyIterator",
    "VertexNotFoundError",
    # Backends
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    # Algorithms
    "forward_reachable",
    "backward_reachable",
    "bfs_order",
    "strongly_connected_component",
    "shortest_path",
    "LongestPathConfig",
    "longest_shortest_path",
    "max_out_degree_vertex",
    # Utilities
    "node_index_map",
    "edge_list",
    "adjacency_array",
    # Diagnostics
    "is_adjacency_consistent",
    "assert_adjacency_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
