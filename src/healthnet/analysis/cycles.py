# -*- coding: utf-8 -*-
"""
Directed cycle detection by depth-first search.

The search keeps a global visited set, the set of nodes on the current
depth-first path (the recursion stack) and that path in order. An edge into a
node of the current path closes a cycle.

The depth-first search uses an explicit stack of ``(node, edge iterator)``
frames instead of recursion, so long chains are not limited by the interpreter
recursion limit. Visiting order is the one of the recursive formulation: roots
in facility insertion order, neighbours in connection insertion order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Set, Tuple

from healthnet.analysis.results import CycleResult
from healthnet.analysis.search import iter_edges

if TYPE_CHECKING:  # noqa: F401
    from healthnet.pre.network import HealthNetwork
    from healthnet.pre.records import Connection

__all__ = ["detect_cycle"]


def detect_cycle(network: HealthNetwork) -> CycleResult:
    """
    Find one directed cycle, if any.

    Returns
    -------
    CycleResult
        ``has_cycle=True`` and the cycle closed on its first node
        (e.g. ``(2, 3, 4, 2)``) for the first cycle found, otherwise
        ``has_cycle=False`` and an empty cycle.
    """
    visited: Set[int] = set()

    for root in network.facility_ids():
        if root in visited:
            continue
        cycle = _search_from(network, root, visited)
        if cycle:
            return CycleResult(has_cycle=True, cycle=cycle)

    return CycleResult(has_cycle=False)


def _search_from(network: HealthNetwork, root: int, visited: Set[int]) -> Tuple[int, ...]:
    on_stack: Set[int] = {root}
    path: List[int] = [root]
    stack: List[Tuple[int, Iterator[Connection]]] = [(root, iter_edges(network, root))]
    visited.add(root)

    while stack:
        node, edges = stack[-1]
        connection = next(edges, None)

        if connection is None:
            # all neighbours explored: leave the recursion stack
            stack.pop()
            on_stack.discard(node)
            path.pop()
            continue

        target = connection.target
        if target not in visited:
            visited.add(target)
            on_stack.add(target)
            path.append(target)
            stack.append((target, iter_edges(network, target)))
        elif target in on_stack:
            start = path.index(target)
            return tuple(path[start:]) + (target,)

    return ()
