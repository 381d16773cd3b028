# -*- coding: utf-8 -*-
"""
Emergency routing: nearest facility with enough capacity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from healthnet.analysis.results import Outcome, RoutingResult, SearchState
from healthnet.analysis.search import path_hops, reconstruct_path, require_facility, settle
from healthnet.utils.errors import InvalidOperationError

if TYPE_CHECKING:  # noqa: F401
    from healthnet.pre.network import HealthNetwork

__all__ = ["nearest_with_capacity"]


def nearest_with_capacity(network: HealthNetwork, origin: int, min_capacity: int) -> RoutingResult:
    """
    Shortest route from ``origin`` to the nearest facility with ``capacity >= min_capacity``.

    Parameters
    ----------
    network : HealthNetwork
        The network, read only.
    origin : int
        Identifier of the current location.
    min_capacity : int
        Minimum capacity required, strictly positive.

    Returns
    -------
    RoutingResult
        - ``Outcome.ORIGIN_SATISFIES`` if the origin already has enough capacity
          (no search is run, distance 0, path ``(origin,)``);
        - ``Outcome.FOUND`` with the matched facility, distance, path and hops;
        - ``Outcome.NO_MATCH`` if no reachable facility qualifies.

    Raises
    ------
    FacilityNotFoundError
        If ``origin`` does not exist.
    InvalidOperationError
        If ``min_capacity`` is not a positive integer.

    Notes
    -----
    A facility is accepted the moment it is *settled*, which makes it the
    qualifying facility at minimum distance; the search stops there.
    """
    require_facility(network, origin)
    if isinstance(min_capacity, bool) or not isinstance(min_capacity, int) or min_capacity <= 0:
        raise InvalidOperationError("Capacity must be an integer greater than 0.")

    start = network.get_facility(origin)
    if start.capacity >= min_capacity:
        return RoutingResult(
            origin=origin,
            min_capacity=min_capacity,
            status=Outcome.ORIGIN_SATISFIES,
            facility=start,
            distance=0.0,
            path=(origin,),
        )

    previous: Dict[int, Optional[int]] = {}
    state = SearchState.INIT
    match = None
    total = float("inf")

    for node, distance in settle(network, origin, previous):
        state = SearchState.RELAXING
        if node == origin:
            continue
        candidate = network.get_facility(node)
        if candidate.capacity >= min_capacity:
            state = SearchState.SETTLED_TARGET
            match, total = candidate, distance
            break
    else:
        state = SearchState.EXHAUSTED

    if state is not SearchState.SETTLED_TARGET:
        return RoutingResult(origin=origin, min_capacity=min_capacity, status=Outcome.NO_MATCH)

    path = reconstruct_path(previous, match.id)
    return RoutingResult(
        origin=origin,
        min_capacity=min_capacity,
        status=Outcome.FOUND,
        facility=match,
        distance=total,
        path=path,
        hops=path_hops(network, path),
    )
