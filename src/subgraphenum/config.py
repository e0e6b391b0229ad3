from __future__ import annotations

import os

from subgraphenum.errors import InvalidParameter


PIVOT_RULES = ("min", "degree")

SUBGRAPHENUM_PIVOT = os.environ.get("SUBGRAPHENUM_PIVOT", "min")


def resolve_pivot(pivot: str | None = None) -> str:
    """Return the pivot rule to use, falling back to $SUBGRAPHENUM_PIVOT."""
    rule = SUBGRAPHENUM_PIVOT if pivot is None else pivot
    if rule not in PIVOT_RULES:
        raise InvalidParameter(
            f"unknown pivot rule {rule!r}; expected one of {', '.join(PIVOT_RULES)}"
        )
    return rule
