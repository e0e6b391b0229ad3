from __future__ import annotations


class SubgraphEnumError(Exception):
    """Base class for errors raised by subgraphenum."""


class InvalidParameter(SubgraphEnumError, ValueError):
    """Raised before any search starts when k or an option is malformed."""


class InvalidGraph(SubgraphEnumError, ValueError):
    """Raised when an input graph cannot be adapted to an undirected view."""
