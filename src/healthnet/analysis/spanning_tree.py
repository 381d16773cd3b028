# -*- coding: utf-8 -*-
"""
Minimum spanning tree by Prim's algorithm.

The network is directed while a spanning tree is an undirected notion. The
builder only follows outgoing connections and keys each candidate facility by
the raw connection distance, whatever its direction. A facility that can only
be reached against the direction of the connections is therefore left out and
the result is reported as disconnected. This approximation is the documented
behaviour of the builder.
"""

from __future__ import annotations

import heapq
import math
from typing import TYPE_CHECKING, Dict, Set

from healthnet.analysis.results import Hop, Outcome, SpanningTreeResult
from healthnet.analysis.search import iter_edges, require_facility

if TYPE_CHECKING:  # noqa: F401
    from healthnet.pre.network import HealthNetwork
    from healthnet.pre.records import Connection

__all__ = ["prim_mst"]


def prim_mst(network: HealthNetwork, root: int) -> SpanningTreeResult:
    """
    Greedy minimum spanning tree grown from ``root``.

    Parameters
    ----------
    network : HealthNetwork
        The network, read only.
    root : int
        Identifier of the starting facility.

    Returns
    -------
    SpanningTreeResult
        Parent → child edges in facility insertion order and their total
        distance. ``status`` is ``Outcome.SPANNING`` when the tree has
        ``facility_count - 1`` edges, ``Outcome.DISCONNECTED`` otherwise.

    Raises
    ------
    FacilityNotFoundError
        If ``root`` does not exist.
    """
    require_facility(network, root)

    key: Dict[int, float] = {root: 0.0}
    parent: Dict[int, Connection] = {}
    settled: Set[int] = set()
    frontier = [(0.0, root)]

    while frontier:
        _, u = heapq.heappop(frontier)
        if u in settled:
            continue
        settled.add(u)

        for connection in iter_edges(network, u):
            v = connection.target
            if v not in settled and connection.distance < key.get(v, math.inf):
                key[v] = connection.distance
                parent[v] = connection
                heapq.heappush(frontier, (connection.distance, v))

    edges = tuple(
        Hop.from_connection(parent[facility_id])
        for facility_id in network.facility_ids()
        if facility_id != root and facility_id in parent
    )
    facility_count = len(network)
    status = Outcome.SPANNING if len(edges) == facility_count - 1 else Outcome.DISCONNECTED

    return SpanningTreeResult(
        root=root,
        edges=edges,
        total_distance=sum(edge.distance for edge in edges),
        facility_count=facility_count,
        status=status,
    )
