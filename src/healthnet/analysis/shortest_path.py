# -*- coding: utf-8 -*-
"""
Shortest paths over the health network.

- `dijkstra` – single-source, single-destination search with early termination.
- `floyd_warshall` – all-pairs distances with a next-hop matrix for path rebuilding.

Both use the connection distance as weight; weights are strictly positive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Tuple

import numpy as np

from healthnet.analysis.results import AllPairsResult, Hop, Outcome, PathResult, SearchState
from healthnet.analysis.search import iter_edges, path_hops, reconstruct_path, require_facility, settle
from healthnet.utils.errors import InvalidOperationError

if TYPE_CHECKING:  # noqa: F401
    from healthnet.pre.network import HealthNetwork

__all__ = ["dijkstra", "floyd_warshall"]


# -----------------------------------------------------------------------------
# Single source
# -----------------------------------------------------------------------------
def dijkstra(network: HealthNetwork, origin: int, destination: int) -> PathResult:
    """
    Shortest path from ``origin`` to ``destination``.

    Parameters
    ----------
    network : HealthNetwork
        The network, read only.
    origin, destination : int
        Facility identifiers. Both must exist and differ.

    Returns
    -------
    PathResult
        ``Outcome.FOUND`` with the distance, the path and the detail of each hop,
        or ``Outcome.UNREACHABLE`` when no path exists.

    Raises
    ------
    FacilityNotFoundError
        If either facility does not exist.
    InvalidOperationError
        If ``origin == destination``.

    Notes
    -----
    The search stops as soon as the destination is settled.
    """
    require_facility(network, origin)
    require_facility(network, destination)
    if origin == destination:
        raise InvalidOperationError("Source and destination are the same.")

    previous: Dict[int, Optional[int]] = {}
    state = SearchState.INIT
    total = float("inf")

    for node, distance in settle(network, origin, previous):
        state = SearchState.RELAXING
        if node == destination:
            state = SearchState.SETTLED_TARGET
            total = distance
            break
    else:
        state = SearchState.EXHAUSTED

    if state is not SearchState.SETTLED_TARGET:
        return PathResult(origin=origin, destination=destination, status=Outcome.UNREACHABLE)

    path = reconstruct_path(previous, destination)
    return PathResult(
        origin=origin,
        destination=destination,
        status=Outcome.FOUND,
        distance=total,
        path=path,
        hops=path_hops(network, path),
    )


# -----------------------------------------------------------------------------
# All pairs
# -----------------------------------------------------------------------------
def floyd_warshall(network: HealthNetwork) -> AllPairsResult:
    """
    All-pairs shortest distances (Floyd–Warshall).

    Facility identifiers are mapped to dense indices in insertion order. The
    distance matrix starts with 0 on the diagonal, the direct connections, and
    ``inf`` elsewhere; the next-hop matrix points to the first step of the best
    known path (``-1`` when none).

    Returns
    -------
    AllPairsResult
        Distance and next-hop matrices, with ``path()`` for reconstruction and
        ``to_frame()`` for display.

    Notes
    -----
    O(n³) in the number of facilities, intended for small networks. The loop
    over the intermediate facility ``k`` is explicit; for a given ``k`` all
    ``(i, j)`` pairs are relaxed at once with NumPy, which is equivalent to the
    inner double loop because row and column ``k`` cannot improve during step ``k``.
    A next hop is only replaced on a strict improvement.
    """
    ids: Tuple[int, ...] = tuple(network.facility_ids())
    n = len(ids)
    index = {facility_id: i for i, facility_id in enumerate(ids)}

    distances = np.full((n, n), np.inf, dtype=float)
    next_hop = np.full((n, n), -1, dtype=np.int64)
    np.fill_diagonal(distances, 0.0)
    np.fill_diagonal(next_hop, np.arange(n))

    edges: Dict[Tuple[int, int], Hop] = {}
    for facility_id in ids:
        i = index[facility_id]
        for connection in iter_edges(network, facility_id):
            j = index[connection.target]
            distances[i, j] = connection.distance
            next_hop[i, j] = j
            edges[connection.key] = Hop.from_connection(connection)

    for k in range(n):
        through_k = distances[:, k, np.newaxis] + distances[np.newaxis, k, :]
        improved = through_k < distances
        distances = np.where(improved, through_k, distances)
        next_hop = np.where(improved, next_hop[:, k, np.newaxis], next_hop)

    return AllPairsResult(ids=ids, distances=distances, next_hop=next_hop, edges=edges)
