from .connectivity import is_connected_induced, connected_components
from .subgraphs import brute_force_connected_subgraphs, induced_subgraph

__all__ = [
    "is_connected_induced",
    "connected_components",
    "brute_force_connected_subgraphs",
    "induced_subgraph",
]
