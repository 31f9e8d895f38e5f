"""Pytest configuration and shared fixtures for adjgraph tests.

This module provides:
- A `backend` fixture parametrized over both graph backends
- A deterministic numpy RNG for randomized operation sequences
- An autouse fixture that keeps debug mode off between tests
"""

import os

import numpy as np
import pytest

from adjgraph.diagnostics import set_debug_enabled
from adjgraph.graphs import AdjacencyListGraph, AdjacencyMatrixGraph


@pytest.fixture(params=[AdjacencyListGraph, AdjacencyMatrixGraph], ids=["list", "matrix"])
def backend(request):
    """Graph backend class; tests using it run once per backend."""
    return request.param


@pytest.fixture
def make_graph(backend):
    """Build a graph of the current backend from keys and (from, to) edges."""

    def _make(keys, edges=()):
        graph = backend(keys)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    return _make


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off():
    """Start every test with debug mode disabled, whatever ADJGRAPH_DEBUG says."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)
