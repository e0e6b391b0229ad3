from __future__ import annotations

from itertools import combinations
from typing import Hashable, Iterable, List

import networkx as nx

from subgraphenum.errors import InvalidGraph
from subgraphenum.graph.view import as_view
from subgraphenum.search.simple import validate_k
from subgraphenum.utils.connectivity import is_connected_induced


def brute_force_connected_subgraphs(graph, k: int) -> List[frozenset]:
    """Enumerate connected induced k-subgraphs by testing every k-subset.

    Exponential in |V|; a reference for cross-checking the polynomial-delay
    enumerator on small graphs. Results follow itertools.combinations order
    over the canonical vertex order.
    """
    view = as_view(graph)
    validate_k(k, view.number_of_vertices())
    return [
        frozenset(subset)
        for subset in combinations(view.vertices(), k)
        if is_connected_induced(view, subset)
    ]


def induced_subgraph(graph, subset: Iterable[Hashable]) -> nx.Graph:
    """Materialise the subgraph of *graph* induced by *subset*.

    For a NetworkX input this is an independent copy of G.subgraph(subset),
    so node and edge attributes are kept. Labels outside the graph raise
    InvalidGraph for every kind of input.
    """
    if isinstance(graph, nx.Graph):
        members = list(subset)
        missing = [v for v in members if v not in graph]
        if missing:
            raise InvalidGraph(f"unknown vertex {missing[0]!r}")
        return graph.subgraph(members).copy()
    view = as_view(graph)
    members = list(subset)
    H = nx.Graph()
    H.add_nodes_from(sorted(members, key=view.index_of))
    H.add_edges_from(view.induced_edges(members))
    return H
