"""Contract tests run against every graph backend."""

import pytest

from adjgraph.graphs import VertexNotFoundError


class TestConstruction:
    """Tests for building a backend from a key set."""

    def test_empty_graph(self, backend):
        """Test graph with no vertices."""
        G = backend([])
        assert G.size() == 0
        assert G.num_edges() == 0
        assert G.key_set() == set()

    def test_starts_without_edges(self, backend):
        """Test that a new graph has all keys and no edges."""
        G = backend(["A", "B", "C"])
        assert G.size() == 3
        assert len(G) == 3
        assert G.num_edges() == 0
        assert G.key_set() == {"A", "B", "C"}
        for key in "ABC":
            assert G.out_degree(key) == 0
            assert G.in_degree(key) == 0

    def test_duplicate_keys_collapse(self, backend):
        """Test that repeated keys produce one vertex."""
        G = backend(["A", "B", "A"])
        assert G.size() == 2

    def test_has_vertex(self, backend):
        """Test vertex membership."""
        G = backend([1, 2, 3])
        assert G.has_vertex(2)
        assert not G.has_vertex(4)
        assert 3 in G
        assert 7 not in G
        assert [1] not in G

    def test_key_set_is_a_copy(self, backend):
        """Test that mutating the returned key set does not change the graph."""
        G = backend(["A", "B"])
        keys = G.key_set()
        keys.add("C")
        assert G.key_set() == {"A", "B"}

    def test_repr(self, backend):
        """Test repr shows vertex and edge counts."""
        G = backend(["A", "B"])
        G.add_edge("A", "B")
        assert repr(G) == f"{backend.__name__}(V=2, E=1)"


class TestEdges:
    """Tests for edge mutation and queries."""

    def test_add_edge_then_repeat(self, backend):
        """Test add_edge returns True once, then False."""
        G = backend(["A", "B"])
        assert G.add_edge("A", "B") is True
        assert G.add_edge("A", "B") is False
        assert G.has_edge("A", "B") is True
        assert G.num_edges() == 1

    def test_edges_are_directed(self, backend):
        """Test that (a, b) does not imply (b, a)."""
        G = backend(["A", "B"])
        G.add_edge("A", "B")
        assert G.has_edge("A", "B")
        assert not G.has_edge("B", "A")
        assert G.add_edge("B", "A") is True
        assert G.num_edges() == 2

    def test_remove_edge_once(self, backend):
        """Test remove_edge returns True exactly once."""
        G = backend(["A", "B"])
        G.add_edge("A", "B")
        assert G.remove_edge("A", "B") is True
        assert G.remove_edge("A", "B") is False
        assert not G.has_edge("A", "B")
        assert G.num_edges() == 0

    def test_remove_absent_edge(self, backend):
        """Test removing an edge that was never added."""
        G = backend(["A", "B"])
        assert G.remove_edge("B", "A") is False

    def test_self_loop(self, backend):
        """Test self-loops count once in both degrees."""
        G = backend(["A"])
        assert G.add_edge("A", "A")
        assert G.has_edge("A", "A")
        assert G.out_degree("A") == 1
        assert G.in_degree("A") == 1
        assert G.successor_set("A") == {"A"}
        assert G.predecessor_set("A") == {"A"}
        assert G.num_edges() == 1

    def test_degrees_and_sets(self, backend):
        """Test degrees and adjacency sets on a small graph."""
        G = backend(["A", "B", "C", "D"])
        G.add_edge("A", "B")
        G.add_edge("A", "C")
        G.add_edge("D", "C")

        assert G.out_degree("A") == 2
        assert G.in_degree("C") == 2
        assert G.successor_set("A") == {"B", "C"}
        assert G.predecessor_set("C") == {"A", "D"}
        assert G.successor_set("B") == set()
        assert G.predecessor_set("A") == set()

    def test_edges_listing(self, backend):
        """Test edges() lists each directed edge once."""
        G = backend(["A", "B", "C"])
        G.add_edge("A", "B")
        G.add_edge("C", "A")
        assert sorted(G.edges()) == [("A", "B"), ("C", "A")]

    def test_num_edges_after_adds_and_removes(self, backend):
        """Test num_edges equals additions minus removals."""
        keys = list(range(5))
        G = backend(keys)
        added = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0), (0, 0), (2, 0)]
        for u, v in added:
            G.add_edge(u, v)
        for u, v in added[:3]:
            G.remove_edge(u, v)
        assert G.num_edges() == len(added) - 3


class TestMissingVertices:
    """Tests that foreign keys raise VertexNotFoundError."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda G: G.add_edge("A", "Z"),
            lambda G: G.add_edge("Z", "A"),
            lambda G: G.remove_edge("A", "Z"),
            lambda G: G.remove_edge("Z", "A"),
            lambda G: G.has_edge("A", "Z"),
            lambda G: G.has_edge("Z", "A"),
            lambda G: G.out_degree("Z"),
            lambda G: G.in_degree("Z"),
            lambda G: G.successor_set("Z"),
            lambda G: G.predecessor_set("Z"),
            lambda G: G.successor_iterator("Z"),
            lambda G: G.predecessor_iterator("Z"),
            lambda G: G.strongly_connected_component("Z"),
            lambda G: G.shortest_path("A", "Z"),
            lambda G: G.shortest_path("Z", "A"),
        ],
    )
    def test_raises_not_found(self, backend, call):
        """Test every key-taking operation rejects a missing key."""
        G = backend(["A", "B"])
        with pytest.raises(VertexNotFoundError) as excinfo:
            call(G)
        assert excinfo.value.key == "Z"

    def test_failed_add_does_not_mutate(self, backend):
        """Test a rejected add_edge leaves the graph unchanged."""
        G = backend(["A", "B"])
        with pytest.raises(VertexNotFoundError):
            G.add_edge("A", "Z")
        assert G.num_edges() == 0
        assert G.out_degree("A") == 0

    def test_not_found_is_key_error(self, backend):
        """Test VertexNotFoundError can be caught as KeyError."""
        G = backend(["A"])
        with pytest.raises(KeyError):
            G.out_degree("missing")

    def test_message_names_key(self):
        """Test the error message mentions the missing key."""
        assert str(VertexNotFoundError("Q")) == "Vertex 'Q' not in graph"


class TestIterators:
    """Tests for lazy successor and predecessor iterators."""

    def test_successor_iterator_matches_set(self, backend):
        """Test iterator yields each successor exactly once."""
        G = backend(["A", "B", "C", "D"])
        for v in "BCD":
            G.add_edge("A", v)
        produced = list(G.successor_iterator("A"))
        assert sorted(produced) == ["B", "C", "D"]

    def test_predecessor_iterator_matches_set(self, backend):
        """Test iterator yields each predecessor exactly once."""
        G = backend(["A", "B", "C", "D"])
        for u in "ABC":
            G.add_edge(u, "D")
        produced = list(G.predecessor_iterator("D"))
        assert sorted(produced) == ["A", "B", "C"]

    def test_empty_iterator(self, backend):
        """Test iterator over a vertex with no neighbors."""
        G = backend(["A"])
        it = G.successor_iterator("A")
        assert it.has_next() is False
        with pytest.raises(StopIteration):
            next(it)

    def test_has_next_does_not_consume(self, backend):
        """Test has_next can be called repeatedly without advancing."""
        G = backend(["A", "B"])
        G.add_edge("A", "B")
        it = G.successor_iterator("A")
        assert it.has_next()
        assert it.has_next()
        assert next(it) == "B"
        assert not it.has_next()
        assert not it.has_next()

    def test_iteration_order_is_stable(self, backend):
        """Test two iterators over unchanged adjacency agree on order."""
        G = backend(list(range(8)))
        for v in (5, 1, 7, 3):
            G.add_edge(0, v)
        assert list(G.successor_iterator(0)) == list(G.successor_iterator(0))

    def test_removal_during_iteration_terminates(self, backend):
        """Test removing edges mid-iteration neither raises nor loops."""
        G = backend(list(range(6)))
        for v in range(1, 6):
            G.add_edge(0, v)
        it = G.successor_iterator(0)
        first = next(it)
        for v in range(1, 6):
            G.remove_edge(0, v)
        rest = list(it)
        assert first in range(1, 6)
        assert len(rest) <= 4
        assert G.out_degree(0) == 0


class TestRandomSequences:
    """Randomized add/remove sequences checked against a reference edge set."""

    def test_degrees_sets_and_iterators_agree(self, backend, rng):
        """Test degree == set size == iterator count after random mutations."""
        keys = [f"v{i}" for i in range(7)]
        G = backend(keys)
        reference = set()

        for _ in range(200):
            u, v = (keys[i] for i in rng.integers(0, len(keys), size=2))
            if rng.random() < 0.6:
                assert G.add_edge(u, v) is ((u, v) not in reference)
                reference.add((u, v))
            else:
                assert G.remove_edge(u, v) is ((u, v) in reference)
                reference.discard((u, v))

        assert G.num_edges() == len(reference)
        for key in keys:
            succ = {b for a, b in reference if a == key}
            pred = {a for a, b in reference if b == key}
            assert G.successor_set(key) == succ
            assert G.predecessor_set(key) == pred
            assert G.out_degree(key) == len(succ) == len(list(G.successor_iterator(key)))
            assert G.in_degree(key) == len(pred) == len(list(G.predecessor_iterator(key)))
            for other in keys:
                assert G.has_edge(key, other) == ((key, other) in reference)
