from .adjlist import as_index, edges_from_adj, symmetric_adj, adj_from_edges
from .view import GraphView, AdjacencyView, as_view

__all__ = [
    "as_index",
    "edges_from_adj",
    "symmetric_adj",
    "adj_from_edges",
    "GraphView",
    "AdjacencyView",
    "as_view",
]
