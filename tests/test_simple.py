"""Tests for subgraphenum.search.simple module."""
from itertools import islice

import networkx as nx
import pytest

from subgraphenum.errors import InvalidParameter
from subgraphenum.graph.view import AdjacencyView
from subgraphenum.search.simple import SimpleEnumerator, Frame, validate_k, EMITTED, PRUNED, DONE
from subgraphenum.search.candidates import CandidateSets
from subgraphenum.utils.connectivity import is_connected_induced
from subgraphenum.utils.subgraphs import brute_force_connected_subgraphs


def small_graphs():
    return [
        nx.path_graph(6),
        nx.cycle_graph(7),
        nx.star_graph(5),
        nx.complete_graph(6),
        nx.petersen_graph(),
        nx.convert_node_labels_to_integers(nx.grid_2d_graph(3, 4)),
        nx.gnp_random_graph(11, 0.3, seed=1),
        nx.gnp_random_graph(12, 0.2, seed=7),
        nx.disjoint_union(nx.complete_graph(3), nx.path_graph(4)),
    ]


# --- completeness / uniqueness / invariants ---

@pytest.mark.parametrize("G", small_graphs())
def test_matches_brute_force_for_every_k(G):
    view = AdjacencyView.from_networkx(G)
    for k in range(1, G.number_of_nodes() + 1):
        found = list(SimpleEnumerator(view, k))
        assert len(found) == len(set(found))
        assert set(found) == set(brute_force_connected_subgraphs(view, k))


@pytest.mark.parametrize("pivot", ["min", "degree"])
def test_outputs_have_size_k_and_are_connected(pivot):
    G = nx.gnp_random_graph(12, 0.25, seed=3)
    view = AdjacencyView.from_networkx(G)
    for sub in SimpleEnumerator(view, 5, pivot=pivot):
        assert len(sub) == 5
        assert is_connected_induced(view, sub)


def test_pivot_rules_agree():
    G = nx.gnp_random_graph(10, 0.35, seed=11)
    a = set(SimpleEnumerator(G, 4, pivot="min"))
    b = set(SimpleEnumerator(G, 4, pivot="degree"))
    assert a == b


# --- scenarios ---

def test_k1_gives_singletons_in_order():
    G = nx.gnp_random_graph(9, 0.2, seed=5)
    assert list(SimpleEnumerator(G, 1)) == [frozenset({v}) for v in range(9)]


def test_k_equals_n_connected():
    assert list(SimpleEnumerator(nx.cycle_graph(6), 6)) == [frozenset(range(6))]


def test_k_equals_n_disconnected():
    G = nx.disjoint_union(nx.path_graph(3), nx.path_graph(3))
    assert list(SimpleEnumerator(G, 6)) == []


def test_two_triangles_k4_empty():
    G = nx.disjoint_union(nx.complete_graph(3), nx.complete_graph(3))
    assert list(SimpleEnumerator(G, 4)) == []
    assert len(list(SimpleEnumerator(G, 3))) == 2


def test_path_k2():
    view = AdjacencyView.from_edges([(1, 2), (2, 3), (3, 4), (4, 5)])
    assert list(SimpleEnumerator(view, 2)) == [
        frozenset({1, 2}),
        frozenset({2, 3}),
        frozenset({3, 4}),
        frozenset({4, 5}),
    ]


def test_isolated_vertices():
    view = AdjacencyView([[], [], []])
    assert len(list(SimpleEnumerator(view, 1))) == 3
    assert list(SimpleEnumerator(view, 2)) == []


# --- validation ---

@pytest.mark.parametrize("k", [0, -1, 6, 100])
def test_invalid_k_out_of_range(k):
    with pytest.raises(InvalidParameter):
        SimpleEnumerator(nx.path_graph(5), k)


@pytest.mark.parametrize("k", [2.0, "2", None, True])
def test_invalid_k_type(k):
    with pytest.raises(InvalidParameter):
        SimpleEnumerator(nx.path_graph(5), k)


def test_invalid_k_on_empty_graph():
    with pytest.raises(InvalidParameter):
        SimpleEnumerator(nx.Graph(), 1)


def test_validate_k():
    assert validate_k(3, 3) == 3
    with pytest.raises(InvalidParameter):
        validate_k(4, 3)


# --- ordering and cooperative stop ---

def test_roots_non_decreasing():
    G = nx.gnp_random_graph(12, 0.3, seed=2)
    view = AdjacencyView.from_networkx(G)
    roots = [min(sub, key=view.index_of) for sub in SimpleEnumerator(view, 4)]
    assert roots == sorted(roots)


def test_close_stops_enumeration():
    it = SimpleEnumerator(nx.complete_graph(8), 3)
    first = list(islice(it, 2))
    assert len(first) == 2
    steps = it.steps
    it.close()
    assert list(it) == []
    assert it.steps == steps
    assert it.depth == 0


def test_stack_depth_bounded_by_k():
    G = nx.convert_node_labels_to_integers(nx.grid_2d_graph(4, 4))
    it = SimpleEnumerator(G, 5)
    for _ in it:
        # the emitting frame has been popped already
        assert it.depth <= 4


def test_iterator_protocol():
    it = SimpleEnumerator(nx.path_graph(3), 2)
    assert iter(it) is it
    assert next(it) == frozenset({0, 1})
    assert next(it) == frozenset({1, 2})
    with pytest.raises(StopIteration):
        next(it)


# --- delay ---

def _step_gaps(G, k):
    it = SimpleEnumerator(G, k)
    marks = [0]
    for _ in it:
        marks.append(it.steps)
    marks.append(it.steps)
    return [b - a for a, b in zip(marks, marks[1:])]


@pytest.mark.parametrize(
    "G,k",
    [
        (nx.convert_node_labels_to_integers(nx.grid_2d_graph(5, 5)), 5),
        (nx.convert_node_labels_to_integers(nx.grid_2d_graph(4, 6)), 7),
        (nx.gnp_random_graph(30, 0.1, seed=4), 6),
        (nx.disjoint_union(nx.path_graph(20), nx.complete_graph(5)), 5),
    ],
)
def test_steps_between_outputs_bounded(G, k):
    n = G.number_of_nodes()
    gaps = _step_gaps(G, k)
    assert len(gaps) >= 2
    assert max(gaps) <= 4 * k * (n + 1) + n + 1


def test_delay_independent_of_output_count():
    small = nx.convert_node_labels_to_integers(nx.grid_2d_graph(4, 4))
    large = nx.convert_node_labels_to_integers(nx.grid_2d_graph(6, 6))
    n_large = large.number_of_nodes()
    out_small = sum(1 for _ in SimpleEnumerator(small, 6))
    out_large = sum(1 for _ in SimpleEnumerator(large, 6))
    assert out_large > 2 * out_small
    # total work grows with the output count, the worst gap only with n
    assert max(_step_gaps(large, 6)) <= 4 * 6 * (n_large + 1) + n_large + 1


# --- frame states ---

def test_frame_states():
    view = AdjacencyView([[1], [0, 2], [1]])
    cs = CandidateSets(view)
    frame = Frame(cs.root(0))
    assert frame.state == "active"
    assert not frame.branched
    assert {EMITTED, PRUNED, DONE} == {"emitted", "pruned", "done"}
    assert "R=[0]" in repr(frame)


def test_frame_state_tally_path():
    it = SimpleEnumerator(nx.path_graph(3), 2)
    assert len(list(it)) == 2
    assert it.frame_states == {EMITTED: 2, DONE: 2}
    assert it.frame_states[PRUNED] == 0


def test_frame_state_tally_pruned_roots():
    G = nx.disjoint_union(nx.complete_graph(3), nx.complete_graph(3))
    it = SimpleEnumerator(G, 4)
    assert list(it) == []
    assert it.frame_states == {PRUNED: 3}
    assert it.steps == 3


# --- root skipping ---

def test_k_equals_n_visits_one_root():
    it = SimpleEnumerator(nx.cycle_graph(6), 6)
    assert len(list(it)) == 1
    assert it.roots_visited == 1


def test_roots_visited_stops_at_n_minus_k():
    it = SimpleEnumerator(nx.path_graph(7), 3)
    assert len(list(it)) == 5
    assert it.roots_visited == 5


# --- integer-like k ---

class Idx:
    """Integer-like value, as numpy scalars are."""

    def __init__(self, i):
        self.i = i

    def __index__(self):
        return self.i


def test_validate_k_integer_like():
    k = validate_k(Idx(2), 5)
    assert k == 2
    assert type(k) is int


def test_integer_like_k_enumerates():
    assert len(list(SimpleEnumerator(nx.path_graph(5), Idx(2)))) == 4


def test_integer_like_k_out_of_range():
    with pytest.raises(InvalidParameter):
        SimpleEnumerator(nx.path_graph(5), Idx(6))
