from __future__ import annotations

from typing import Hashable, Iterator, List, Optional

from subgraphenum.search.simple import SimpleEnumerator


def iter_connected_subgraphs(
    graph,
    k: int,
    *,
    pivot: Optional[str] = None,
) -> Iterator[frozenset]:
    """
    Lazily yield every connected induced subgraph of *graph* on exactly k
    vertices, as a frozenset of vertex labels, each exactly once.

    *graph* may be a NetworkX graph, an AdjacencyView, any object with
    vertices() and neighbors(v), or an index adjacency list.

    Raises InvalidParameter immediately (not on first next()) unless
    1 <= k <= |V|. Stopping iteration early stops the search.
    """
    return SimpleEnumerator(graph, k, pivot=pivot)


def connected_subgraphs(
    graph,
    k: int,
    *,
    pivot: Optional[str] = None,
) -> List[List[Hashable]]:
    """
    All connected induced k-vertex subgraphs as lists of vertex labels.

    Each list is in canonical vertex order; the outer list is in discovery
    order.
    """
    it = SimpleEnumerator(graph, k, pivot=pivot)
    index_of = it.view.index_of
    return [sorted(sub, key=index_of) for sub in it]


def count_connected_subgraphs(
    graph,
    k: int,
    *,
    pivot: Optional[str] = None,
) -> int:
    """Number of connected induced k-vertex subgraphs."""
    return sum(1 for _ in SimpleEnumerator(graph, k, pivot=pivot))
