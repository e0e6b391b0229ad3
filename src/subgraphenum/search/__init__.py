from .candidates import Frontier, CandidateSets
from .simple import SimpleEnumerator, Frame, validate_k
from .connected import (
    iter_connected_subgraphs,
    connected_subgraphs,
    count_connected_subgraphs,
)

__all__ = [
    "Frontier",
    "CandidateSets",
    "SimpleEnumerator",
    "Frame",
    "validate_k",
    "iter_connected_subgraphs",
    "connected_subgraphs",
    "count_connected_subgraphs",
]
