from __future__ import annotations

from typing import (
    Hashable,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

import networkx as nx

from subgraphenum.errors import InvalidGraph
from subgraphenum.graph.adjlist import as_index, adj_from_edges, edges_from_adj, symmetric_adj


@runtime_checkable
class GraphView(Protocol):
    """Read-only undirected adjacency, with vertices in canonical order."""

    def vertices(self) -> Sequence[Hashable]:
        ...

    def neighbors(self, v: Hashable) -> Iterable[Hashable]:
        ...


class AdjacencyView:
    """
    Immutable undirected graph over vertex indices 0..n-1.

    Index i is the i-th vertex in canonical order; labels[i] is the
    caller's name for it. Neighbour sets are frozensets, so membership
    tests and per-neighbour iteration are constant time.
    """

    __slots__ = ("_adj", "_labels", "_index", "_m")

    def __init__(
        self,
        adj: Sequence[Iterable[int]],
        labels: Optional[Sequence[Hashable]] = None,
    ) -> None:
        self._adj = symmetric_adj(adj)
        n = len(self._adj)
        if labels is None:
            self._labels: Tuple[Hashable, ...] = tuple(range(n))
            self._index = None
        else:
            self._labels = tuple(labels)
            if len(self._labels) != n:
                raise InvalidGraph(f"got {len(self._labels)} labels for {n} vertices")
            self._index = {v: i for i, v in enumerate(self._labels)}
            if len(self._index) != n:
                raise InvalidGraph("vertex labels must be distinct")
        self._m = sum(len(s) for s in self._adj) // 2

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable]],
        vertices: Optional[Iterable[Hashable]] = None,
    ) -> "AdjacencyView":
        """
        Build a view from a labelled edge list.

        If *vertices* is given it fixes the canonical order and may include
        isolated vertices. Otherwise the vertex set is inferred from the
        edges and sorted, so labels must be mutually comparable.
        """
        edges = list(edges)
        if vertices is None:
            labels = sorted({v for e in edges for v in e})
        else:
            labels = list(vertices)
        return cls(adj_from_edges(edges, labels), labels)

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "AdjacencyView":
        """
        Adapt a NetworkX graph; node insertion order is the canonical order.
        """
        if G.is_directed():
            raise InvalidGraph("directed graphs are not supported")
        if G.is_multigraph():
            G = nx.Graph(G)
        return cls.from_edges(G.edges(), vertices=G.nodes())

    @classmethod
    def from_view(cls, view: GraphView) -> "AdjacencyView":
        """Snapshot any object offering vertices() and neighbors(v)."""
        labels = list(view.vertices())
        index = {v: i for i, v in enumerate(labels)}
        adj: List[List[int]] = []
        for v in labels:
            row = []
            for w in view.neighbors(v):
                if w not in index:
                    raise InvalidGraph(f"neighbor {w!r} of {v!r} is not a vertex")
                row.append(index[w])
            adj.append(row)
        return cls(adj, labels)

    # ------------------------------------------------------------------
    # GraphView
    # ------------------------------------------------------------------

    def vertices(self) -> Tuple[Hashable, ...]:
        return self._labels

    def neighbors(self, v: Hashable) -> frozenset:
        i = self.index_of(v)
        if self._index is None:
            return self._adj[i]
        return frozenset(self._labels[j] for j in self._adj[i])

    # ------------------------------------------------------------------
    # Index space
    # ------------------------------------------------------------------

    @property
    def adjacency(self) -> Tuple[frozenset, ...]:
        """Neighbour index sets, indexed by vertex index."""
        return self._adj

    def index_of(self, v: Hashable) -> int:
        if self._index is None:
            return as_index(v, len(self._adj), "graph")
        try:
            return self._index[v]
        except KeyError:
            raise InvalidGraph(f"unknown vertex {v!r}") from None

    def label_of(self, i: int) -> Hashable:
        return self._labels[i]

    def degree(self, v: Hashable) -> int:
        return len(self._adj[self.index_of(v)])

    def number_of_vertices(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        return self._m

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"AdjacencyView(n={len(self._adj)}, m={self._m})"

    # ------------------------------------------------------------------
    # Materialisation
    # ------------------------------------------------------------------

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """Edges (u, v) with u before v in canonical order."""
        return [(self._labels[a], self._labels[b]) for a, b in edges_from_adj(self._adj)]

    def induced_edges(self, subset: Iterable[Hashable]) -> List[Tuple[Hashable, Hashable]]:
        """Edges of G with both endpoints in *subset*, in canonical order."""
        idx = sorted({self.index_of(v) for v in subset})
        members = set(idx)
        pairs = sorted(
            (a, b) for a in idx for b in self._adj[a] if b > a and b in members
        )
        return [(self._labels[a], self._labels[b]) for a, b in pairs]

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(self._labels)
        G.add_edges_from(self.edges())
        return G


def as_view(graph) -> AdjacencyView:
    """
    Coerce *graph* into an AdjacencyView.

    Accepts an AdjacencyView (returned as is), a NetworkX graph, a
    GraphView-like object, or an index adjacency list.
    """
    if isinstance(graph, AdjacencyView):
        return graph
    if isinstance(graph, nx.Graph):
        return AdjacencyView.from_networkx(graph)
    if isinstance(graph, GraphView):
        return AdjacencyView.from_view(graph)
    if isinstance(graph, (list, tuple)):
        return AdjacencyView(graph)
    raise InvalidGraph(f"cannot build a graph view from {type(graph).__name__}")
