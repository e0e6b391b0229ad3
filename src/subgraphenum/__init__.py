"""
subgraphenum: polynomial-delay enumeration of connected induced subgraphs
of a fixed size k in undirected graphs.
"""

from .errors import SubgraphEnumError, InvalidParameter, InvalidGraph
from .config import PIVOT_RULES, SUBGRAPHENUM_PIVOT, resolve_pivot

# Graph views
from .graph.view import GraphView, AdjacencyView, as_view
from .io.graph6 import g6_to_nx, g6_to_view

# Enumeration
from .search.candidates import Frontier, CandidateSets
from .search.simple import SimpleEnumerator
from .search.connected import (
    iter_connected_subgraphs,
    connected_subgraphs,
    count_connected_subgraphs,
)

# Shared utilities
from .utils.connectivity import is_connected_induced, connected_components
from .utils.subgraphs import brute_force_connected_subgraphs, induced_subgraph

__all__ = [
    # Errors
    "SubgraphEnumError",
    "InvalidParameter",
    "InvalidGraph",
    # Config
    "PIVOT_RULES",
    "SUBGRAPHENUM_PIVOT",
    "resolve_pivot",
    # Graph views
    "GraphView",
    "AdjacencyView",
    "as_view",
    "g6_to_nx",
    "g6_to_view",
    # Enumeration
    "Frontier",
    "CandidateSets",
    "SimpleEnumerator",
    "iter_connected_subgraphs",
    "connected_subgraphs",
    "count_connected_subgraphs",
    # Utils
    "is_connected_induced",
    "connected_components",
    "brute_force_connected_subgraphs",
    "induced_subgraph",
]
