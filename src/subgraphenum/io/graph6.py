from __future__ import annotations

import networkx as nx

from subgraphenum.graph.view import AdjacencyView


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph on 0..n-1.
    """
    return nx.from_graph6_bytes(strip_graph6_header(g6).encode("ascii"))


def g6_to_view(g6: str) -> AdjacencyView:
    """
    Parse a graph6 string straight into an AdjacencyView.

    Vertex i of the graph6 encoding is canonical index i.
    """
    G = g6_to_nx(g6)
    return AdjacencyView([list(G.neighbors(u)) for u in range(G.number_of_nodes())])
