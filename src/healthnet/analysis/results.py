# -*- coding: utf-8 -*-
"""
Result types returned by the algorithms of `healthnet.analysis`.

Every algorithm returns a fresh, immutable result. Ordinary search outcomes
(destination unreachable, no facility with enough capacity, spanning tree not
covering the network) are carried by the ``status`` field, never raised.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np
import polars as pl

from healthnet.pre.records import Connection, Facility
from healthnet.utils.errors import FacilityNotFoundError, InvalidOperationError

__all__ = [
    "Outcome",
    "SearchState",
    "Hop",
    "PathResult",
    "RoutingResult",
    "TraversalResult",
    "CycleResult",
    "SpanningTreeResult",
    "AllPairsResult",
]


class Outcome(str, Enum):
    """Outcome of an algorithm run."""
    FOUND = "found"
    UNREACHABLE = "unreachable"
    NO_MATCH = "no_match"
    ORIGIN_SATISFIES = "origin_satisfies"
    SPANNING = "spanning"
    DISCONNECTED = "disconnected"


class SearchState(str, Enum):
    """States of a priority-queue path search."""
    INIT = "init"
    RELAXING = "relaxing"
    SETTLED_TARGET = "settled_target"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Hop:
    """One edge of a path or tree, with its connection detail."""
    source: int
    target: int
    distance: float
    time: int
    description: str = ""

    @classmethod
    def from_connection(cls, connection: Connection) -> Hop:
        return cls(
            connection.source,
            connection.target,
            connection.distance,
            connection.time,
            connection.description,
        )


@dataclass(frozen=True)
class PathResult:
    """Shortest path between two facilities."""
    origin: int
    destination: int
    status: Outcome
    distance: float = math.inf
    path: Tuple[int, ...] = ()
    hops: Tuple[Hop, ...] = ()

    @property
    def found(self) -> bool:
        return self.status is Outcome.FOUND

    @property
    def total_time(self) -> int:
        """Sum of the travel times along the path (minutes)."""
        return sum(hop.time for hop in self.hops)


@dataclass(frozen=True)
class RoutingResult:
    """Nearest facility satisfying a capacity threshold."""
    origin: int
    min_capacity: int
    status: Outcome
    facility: Optional[Facility] = None
    distance: float = math.inf
    path: Tuple[int, ...] = ()
    hops: Tuple[Hop, ...] = ()

    @property
    def found(self) -> bool:
        return self.status in (Outcome.FOUND, Outcome.ORIGIN_SATISFIES)


@dataclass(frozen=True)
class TraversalResult:
    """Breadth-first visitation order from an origin."""
    origin: int
    order: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, facility_id: object) -> bool:
        return facility_id in self.order


@dataclass(frozen=True)
class CycleResult:
    """First directed cycle found, closed on its first node (``[a, b, c, a]``)."""
    has_cycle: bool
    cycle: Tuple[int, ...] = ()

    def __bool__(self) -> bool:
        return self.has_cycle


@dataclass(frozen=True)
class SpanningTreeResult:
    """
    Edges selected by Prim's algorithm from a root.

    ``status`` is `Outcome.DISCONNECTED` when fewer than ``facility_count - 1``
    edges were selected: the result is then a spanning forest of the facilities
    reachable from the root, which is reported, not treated as a failure.
    """
    root: int
    edges: Tuple[Hop, ...]
    total_distance: float
    facility_count: int
    status: Outcome

    @property
    def is_connected(self) -> bool:
        return self.status is Outcome.SPANNING

    @property
    def covered(self) -> int:
        """Number of facilities included in the tree (root included)."""
        return len(self.edges) + 1


@dataclass(frozen=True, eq=False)
class AllPairsResult:
    """
    All-pairs shortest distances and next-hop matrix.

    Attributes
    ----------
    ids : tuple of int
        Facility identifiers; position ``i`` is row/column ``i`` of the matrices.
    distances : numpy.ndarray
        ``(n, n)`` float matrix, ``inf`` where no path exists, 0 on the diagonal.
    next_hop : numpy.ndarray
        ``(n, n)`` int matrix of dense indices, ``-1`` where no path exists.
    edges : dict
        ``(source, target) -> Hop`` for the direct connections, used to detail paths.
    """
    ids: Tuple[int, ...]
    distances: np.ndarray
    next_hop: np.ndarray
    edges: Dict[Tuple[int, int], Hop] = field(default_factory=dict, repr=False)

    def _index(self, facility_id: int) -> int:
        try:
            return self.ids.index(facility_id)
        except ValueError:
            raise FacilityNotFoundError(facility_id) from None

    def distance(self, source: int, target: int) -> float:
        """Shortest distance from ``source`` to ``target`` (``inf`` if unreachable)."""
        return float(self.distances[self._index(source), self._index(target)])

    def path(self, source: int, target: int) -> PathResult:
        """
        Rebuild the shortest path ``source -> target`` from the next-hop matrix.

        Raises
        ------
        FacilityNotFoundError
            If either identifier is not part of the matrix.
        InvalidOperationError
            If ``source == target``.
        """
        i = self._index(source)
        j = self._index(target)
        if i == j:
            raise InvalidOperationError("Source and destination are the same.")

        total = float(self.distances[i, j])
        if math.isinf(total):
            return PathResult(origin=source, destination=target, status=Outcome.UNREACHABLE)

        nodes: List[int] = [source]
        current = i
        while current != j:
            current = int(self.next_hop[current, j])
            nodes.append(self.ids[current])

        hops = tuple(self.edges[(a, b)] for a, b in zip(nodes, nodes[1:]))
        return PathResult(
            origin=source,
            destination=target,
            status=Outcome.FOUND,
            distance=total,
            path=tuple(nodes),
            hops=hops,
        )

    def to_frame(self) -> pl.DataFrame:
        """
        Distance matrix as a Polars DataFrame.

        Column ``from`` holds the source identifier; one column per target
        identifier (named after it) holds the distances, ``inf`` when unreachable.
        """
        data = {"from": list(self.ids)}
        for j, target in enumerate(self.ids):
            data[str(target)] = self.distances[:, j].tolist()
        return pl.DataFrame(data)
