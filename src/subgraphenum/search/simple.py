"""
Polynomial-delay enumeration of connected induced k-vertex subgraphs.

This is the procedure "Simple" of Komusiewicz and Sommer, "Enumerating
Connected Induced Subgraphs: Improved Delay and Experimental Comparison".

For every root r in canonical order a depth-first search grows a connected
set R from {r}, never touching vertices before r, so r is the canonical
minimum of everything found below it. Each step picks a candidate v and
splits into "R contains v" and "v is excluded for good". A set is reached
by exactly one such sequence of decisions, so nothing is emitted twice and
nothing found has to be remembered.

Branches that cannot reach k vertices any more are cut (CandidateSets.
can_complete). Every frame left on the stack therefore still has an output
below it, which bounds the work between two outputs by a polynomial in
|V| + |E|.
"""

from __future__ import annotations

import logging
import operator
from collections import Counter
from typing import Iterator, List, Optional

from subgraphenum.errors import InvalidParameter
from subgraphenum.graph.view import AdjacencyView, as_view
from subgraphenum.search.candidates import CandidateSets, Frontier

logger = logging.getLogger(__name__)

ACTIVE = "active"
EMITTED = "emitted"
PRUNED = "pruned"
DONE = "done"


class Frame:
    """One level of the search stack."""

    __slots__ = ("frontier", "state", "branched")

    def __init__(self, frontier: Frontier) -> None:
        self.frontier = frontier
        self.state = ACTIVE
        self.branched = False

    def __repr__(self) -> str:
        f = self.frontier
        return f"Frame(R={sorted(f.subgraph)}, P={sorted(f.candidates)}, state={self.state})"


def validate_k(k, n: int) -> int:
    if isinstance(k, bool):
        raise InvalidParameter("k must be an integer, got bool")
    try:
        k = operator.index(k)
    except TypeError:
        raise InvalidParameter(f"k must be an integer, got {type(k).__name__}") from None
    if not 1 <= k <= n:
        raise InvalidParameter(f"k must satisfy 1 <= k <= |V| = {n}, got k={k}")
    return k


class SimpleEnumerator:
    """
    Iterator over every connected induced subgraph with exactly k vertices.

    Each item is a frozenset of vertex labels. Arguments are checked here,
    before anything is produced. Items come in discovery order: roots in
    canonical order, depth-first below each root.

    steps counts frame visits and is exposed for delay measurements;
    frame_states tallies how each popped frame ended.
    """

    def __init__(self, graph, k: int, *, pivot: Optional[str] = None) -> None:
        self.view: AdjacencyView = as_view(graph)
        self.k = validate_k(k, self.view.number_of_vertices())
        self.candidates = CandidateSets(self.view, pivot)
        self.steps = 0
        self.roots_visited = 0
        self.frame_states: Counter = Counter()
        self._stack: List[Frame] = []
        self._it = self._run()

    @property
    def depth(self) -> int:
        return len(self._stack)

    def __iter__(self) -> "SimpleEnumerator":
        return self

    def __next__(self) -> frozenset:
        return next(self._it)

    def close(self) -> None:
        """Stop early; the stack is dropped and no further work is done."""
        self._it.close()
        self._stack.clear()

    def _run(self) -> Iterator[frozenset]:
        labels = self.view.vertices()
        n = len(labels)
        logger.debug("enumerating connected %d-subgraphs of %r (pivot=%s)", self.k, self.view, self.candidates.pivot)
        for r in range(n):
            # Fewer than k vertices left from r on: no later root can succeed.
            if n - r < self.k:
                break
            self.roots_visited += 1
            for sub in self._search(r):
                yield frozenset(labels[i] for i in sub)
        logger.debug(
            "finished after %d steps over %d roots (%d emitted, %d pruned, %d done)",
            self.steps,
            self.roots_visited,
            self.frame_states[EMITTED],
            self.frame_states[PRUNED],
            self.frame_states[DONE],
        )

    def _search(self, r: int) -> Iterator[frozenset]:
        cs = self.candidates
        k = self.k
        stack = self._stack
        stack.append(Frame(cs.root(r)))
        while stack:
            self.steps += 1
            frame = stack[-1]
            f = frame.frontier
            if len(f.subgraph) == k:
                frame.state = EMITTED
                stack.pop()
                self.frame_states[frame.state] += 1
                yield f.subgraph
                continue
            if not cs.can_complete(f, k):
                frame.state = DONE if frame.branched else PRUNED
                stack.pop()
                self.frame_states[frame.state] += 1
                continue
            v = cs.pick(f)
            included, excluded = cs.branch(f, v)
            # This frame continues as the exclude branch once the include
            # branch pushed above it has been exhausted.
            frame.frontier = excluded
            frame.branched = True
            stack.append(Frame(included))
