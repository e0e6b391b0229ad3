from __future__ import annotations

from typing import Hashable, Iterable, List, Set

from subgraphenum.graph.view import AdjacencyView


def is_connected_induced(view: AdjacencyView, subset: Iterable[Hashable]) -> bool:
    """Check whether *subset* induces a connected subgraph of *view*.

    Semantics for degenerate cases:
      - empty subset      -> True  (vacuously connected)
      - one vertex        -> True
    """
    members = {view.index_of(v) for v in subset}
    if len(members) <= 1:
        return True

    adj = view.adjacency
    start = next(iter(members))
    visited: Set[int] = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for nbr in adj[node]:
            if nbr in members and nbr not in visited:
                visited.add(nbr)
                stack.append(nbr)
    return len(visited) == len(members)


def connected_components(view: AdjacencyView) -> List[List[Hashable]]:
    """Vertex sets of the connected components, each in canonical order.

    Components are listed by their smallest canonical index.
    """
    adj = view.adjacency
    seen: Set[int] = set()
    components: List[List[Hashable]] = []
    for start in range(len(adj)):
        if start in seen:
            continue
        seen.add(start)
        comp = [start]
        stack = [start]
        while stack:
            node = stack.pop()
            for nbr in adj[node]:
                if nbr not in seen:
                    seen.add(nbr)
                    comp.append(nbr)
                    stack.append(nbr)
        components.append([view.label_of(i) for i in sorted(comp)])
    return components
