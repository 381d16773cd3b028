# -*- coding: utf-8 -*-
"""
Building blocks shared by the search algorithms.

- `require_facility` – precondition check on an identifier.
- `iter_edges` – outgoing edges with a consistency check on their target.
- `settle` – priority-queue relaxation shared by the shortest-path searches.
- `reconstruct_path` / `path_hops` – predecessor walk and per-hop detail.
"""

from __future__ import annotations

import heapq
import math
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

from healthnet.analysis.results import Hop
from healthnet.utils.errors import FacilityNotFoundError, NetworkIntegrityError

if TYPE_CHECKING:  # noqa: F401
    from healthnet.pre.network import HealthNetwork
    from healthnet.pre.records import Connection

__all__ = ["require_facility", "iter_edges", "settle", "reconstruct_path", "path_hops"]


def require_facility(network: HealthNetwork, facility_id: int) -> None:
    """Raise `FacilityNotFoundError` if ``facility_id`` is not in the network."""
    if not network.exists(facility_id):
        raise FacilityNotFoundError(facility_id)


def iter_edges(network: HealthNetwork, facility_id: int) -> Iterator[Connection]:
    """
    Yield the outgoing connections of a facility, in insertion order.

    Raises
    ------
    NetworkIntegrityError
        If a connection leads to a facility the store does not know. This is a
        store defect, never an expected outcome.
    """
    for connection in network.outgoing_edges(facility_id):
        if not network.exists(connection.target):
            raise NetworkIntegrityError(
                f"Connection {connection.source} -> {connection.target} "
                "references a missing health center."
            )
        yield connection


def settle(
    network: HealthNetwork,
    origin: int,
    previous: Dict[int, Optional[int]],
) -> Iterator[Tuple[int, float]]:
    """
    Priority-queue relaxation from ``origin``, yielding nodes as they are settled.

    Each ``(node, distance)`` pair is yielded before the node's outgoing edges are
    relaxed, so a consumer that stops iterating on a settled node ends the search
    right there. ``previous`` is filled in place with the predecessor of every
    node reached so far (``None`` for the origin).

    Notes
    -----
    The frontier holds ``(distance, id)`` pairs; stale entries are skipped when
    popped. Weights are strictly positive, which makes the first pop of a node final.
    """
    best: Dict[int, float] = {origin: 0.0}
    settled = set()
    frontier = [(0.0, origin)]
    previous.clear()
    previous[origin] = None

    while frontier:
        _, u = heapq.heappop(frontier)
        if u in settled:
            continue
        settled.add(u)
        yield u, best[u]

        for connection in iter_edges(network, u):
            v = connection.target
            if v in settled:
                continue
            candidate = best[u] + connection.distance
            if candidate < best.get(v, math.inf):
                best[v] = candidate
                previous[v] = u
                heapq.heappush(frontier, (candidate, v))


def reconstruct_path(previous: Dict[int, Optional[int]], target: int) -> Tuple[int, ...]:
    """
    Walk the predecessor map back from ``target`` and return the path in travel order.

    The origin is the node whose predecessor is ``None``.
    """
    path = []
    node: Optional[int] = target
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return tuple(path)


def path_hops(network: HealthNetwork, path: Tuple[int, ...]) -> Tuple[Hop, ...]:
    """Connection detail (distance, time, description) for each hop of ``path``."""
    return tuple(
        Hop.from_connection(network.get_connection(source, target))
        for source, target in zip(path, path[1:])
    )
