from __future__ import annotations

import operator
from typing import Hashable, Iterable, List, Sequence, Tuple

from subgraphenum.errors import InvalidGraph


def edges_from_adj(adj: Sequence[Iterable[int]]) -> List[Tuple[int, int]]:
    """
    Return undirected edges as (u,v) with u < v.
    """
    eds: List[Tuple[int, int]] = []
    for u, neigh in enumerate(adj):
        for v in neigh:
            if v > u:
                eds.append((u, v))
    return eds


def as_index(v, n: int, where: str) -> int:
    """Normalise an integer-like vertex index; bools are not indices."""
    bad = f"{where} holds {v!r}, not an index in 0..{n - 1}"
    if isinstance(v, bool):
        raise InvalidGraph(bad)
    try:
        i = operator.index(v)
    except TypeError:
        raise InvalidGraph(bad) from None
    if not 0 <= i < n:
        raise InvalidGraph(bad)
    return i


def symmetric_adj(adj: Sequence[Iterable[int]]) -> Tuple[frozenset, ...]:
    """
    Symmetrise an index adjacency list and drop self-loops.

    Entries must be indices in 0..n-1; anything else raises InvalidGraph.
    """
    n = len(adj)
    sets: List[set] = [set() for _ in range(n)]
    for u, neigh in enumerate(adj):
        for v in neigh:
            v = as_index(v, n, f"adjacency of vertex {u}")
            if v == u:
                continue
            sets[u].add(v)
            sets[v].add(u)
    return tuple(frozenset(s) for s in sets)


def adj_from_edges(
    edges: Iterable[Tuple[Hashable, Hashable]],
    labels: Sequence[Hashable],
) -> List[List[int]]:
    """
    Build an index adjacency list over *labels* from a labelled edge list.
    """
    index = {v: i for i, v in enumerate(labels)}
    if len(index) != len(labels):
        raise InvalidGraph("vertex labels must be distinct")
    adj: List[List[int]] = [[] for _ in labels]
    for u, v in edges:
        try:
            iu, iv = index[u], index[v]
        except KeyError as exc:
            raise InvalidGraph(f"edge ({u!r}, {v!r}) uses unknown vertex {exc.args[0]!r}") from None
        adj[iu].append(iv)
        adj[iv].append(iu)
    return adj
