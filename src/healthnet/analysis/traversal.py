# -*- coding: utf-8 -*-
"""
Breadth-first reachability walk over the health network.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from healthnet.analysis.results import TraversalResult
from healthnet.analysis.search import iter_edges, require_facility

if TYPE_CHECKING:  # noqa: F401
    from healthnet.pre.network import HealthNetwork

__all__ = ["bfs"]


def bfs(network: HealthNetwork, origin: int) -> TraversalResult:
    """
    Facilities reachable from ``origin``, in breadth-first visitation order.

    Each facility appears at most once; unreachable facilities are absent.
    Neighbours are enqueued in the insertion order of the outgoing connections,
    not by identifier value, so the result is deterministic for a given network.

    Raises
    ------
    FacilityNotFoundError
        If ``origin`` does not exist.
    """
    require_facility(network, origin)

    visited = {origin}
    frontier = deque([origin])
    order = []

    while frontier:
        current = frontier.popleft()
        order.append(current)
        for connection in iter_edges(network, current):
            if connection.target not in visited:
                visited.add(connection.target)
                frontier.append(connection.target)

    return TraversalResult(origin=origin, order=tuple(order))
