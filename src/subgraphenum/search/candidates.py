from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from subgraphenum.config import resolve_pivot
from subgraphenum.graph.view import AdjacencyView


@dataclass(frozen=True)
class Frontier:
    """
    Search state of one branch, as vertex indices.

    root:       canonical minimum of every set found below this state.
    subgraph:   R, the connected partial solution (contains root).
    excluded:   X, vertices forbidden in this branch. Indices below root
                are excluded implicitly and never stored.
    candidates: P = N(R) minus R and X.

    Snapshots are never mutated; branching builds new ones, so sibling
    branches cannot observe each other.
    """

    root: int
    subgraph: FrozenSet[int]
    excluded: FrozenSet[int]
    candidates: FrozenSet[int]

    def is_blocked(self, u: int) -> bool:
        return u < self.root or u in self.excluded


class CandidateSets:
    """
    Derives successor frontiers for the include/exclude branching.

    pivot:
      "min"    -> candidate with the smallest canonical index
      "degree" -> candidate of largest degree, ties to the smallest index
    """

    def __init__(self, view: AdjacencyView, pivot: str | None = None) -> None:
        self.pivot = resolve_pivot(pivot)
        self._adj = view.adjacency

    def root(self, r: int) -> Frontier:
        """Frontier of the search rooted at r: R = {r}, X = {0..r-1}."""
        return Frontier(
            root=r,
            subgraph=frozenset((r,)),
            excluded=frozenset(),
            candidates=frozenset(u for u in self._adj[r] if u > r),
        )

    def include(self, f: Frontier, v: int) -> Frontier:
        """R' = R + v, X' = X, P' = (P - v) + (N(v) - R' - X)."""
        subgraph = f.subgraph | {v}
        fresh = [u for u in self._adj[v] if u not in subgraph and not f.is_blocked(u)]
        return Frontier(
            root=f.root,
            subgraph=subgraph,
            excluded=f.excluded,
            candidates=(f.candidates - {v}).union(fresh),
        )

    def exclude(self, f: Frontier, v: int) -> Frontier:
        """R' = R, X' = X + v, P' = P - v."""
        return Frontier(
            root=f.root,
            subgraph=f.subgraph,
            excluded=f.excluded | {v},
            candidates=f.candidates - {v},
        )

    def branch(self, f: Frontier, v: int) -> Tuple[Frontier, Frontier]:
        """Both successors of f on v, as (include, exclude)."""
        return self.include(f, v), self.exclude(f, v)

    def pick(self, f: Frontier) -> int:
        if self.pivot == "degree":
            adj = self._adj
            return min(f.candidates, key=lambda u: (-len(adj[u]), u))
        return min(f.candidates)

    def can_complete(self, f: Frontier, k: int) -> bool:
        """
        True iff some connected k-set contains R and avoids X.

        Breadth-first search from R in G - X, stopping as soon as k
        vertices are reached. Since P already holds every unblocked
        neighbour of R, the search starts from P.
        """
        if len(f.subgraph) >= k:
            return True
        seen = set(f.subgraph)
        seen.update(f.candidates)
        if len(seen) >= k:
            return True
        queue = deque(f.candidates)
        while queue:
            u = queue.popleft()
            for w in self._adj[u]:
                if w in seen or f.is_blocked(w):
                    continue
                seen.add(w)
                if len(seen) >= k:
                    return True
                queue.append(w)
        return False
