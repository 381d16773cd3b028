# -*- coding: utf-8 -*-
"""
Graph store of the health network.

This module defines the class `HealthNetwork`, which exclusively owns the
facilities and the directed connections between them. Every algorithm of
`healthnet.analysis` borrows read access to a `HealthNetwork` for the duration
of one call.

Layout
------
The store is an arena: facilities are kept in insertion order in a list, the
outgoing connections of each facility in a parallel list of adjacency lists,
and a dictionary maps a facility identifier to its arena index. Identifiers can
be any integers; no bounded identifier space is assumed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import networkx as nx
import polars as pl

from healthnet.pre.records import Connection, Facility
from healthnet.utils.config import ParamConfig, resolve_config
from healthnet.utils.errors import (
    ConnectionNotFoundError,
    FacilityNotFoundError,
    InvalidOperationError,
    NetworkIntegrityError,
)

__all__ = ["HealthNetwork"]


# -----------------------------------------------------------------------------
# Class: HealthNetwork
# -----------------------------------------------------------------------------
class HealthNetwork:
    """
    Directed, weighted network of health centers.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    main_print : bool
        Indicates whether execution information should be printed to the console.

    Methods
    -------
    add_facility(facility), remove_facility(facility_id), update_facility(facility_id, **changes)
        Facility mutations. Removal cascades to every connection touching the facility.
    add_connection(connection), remove_connection(source, target), update_connection(source, target, **changes)
        Connection mutations, with endpoint, self-loop and duplicate checks.
    exists(facility_id), get_facility(facility_id), get_connection(source, target)
        Lookups.
    outgoing_edges(facility_id)
        Outgoing connections in insertion order.
    facilities_table(), connections_table()
        Polars views for display.
    to_networkx()
        A NetworkX DiGraph copy of the network.

    Notes
    -----
    - The store is not thread-safe. Mutations and algorithm runs must be serialized
      by the caller.
    - Connection records are immutable; updates replace them in place so the
      enumeration order of outgoing edges is preserved.
    """

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        """
        Initializes an empty network.

        Parameters
        ----------
        param : dict or ParamConfig, optional
            Configuration parameters. Only ``main_print`` is used by the store.
        """
        self.config = resolve_config(param)
        self.main_print = self.config.main_print

        self._facilities: List[Facility] = []
        self._adjacency: List[List[Connection]] = []
        self._index: Dict[int, int] = {}

    @classmethod
    def from_records(
        cls,
        facilities: Iterable[Facility],
        connections: Iterable[Connection] = (),
        param: Union[dict, ParamConfig, None] = None,
    ) -> HealthNetwork:
        """
        Build a network from validated records.

        Facilities are added first, then connections, each in the given order.
        Any invalid connection (unknown endpoint, duplicate pair) raises.
        """
        network = cls(param)
        for facility in facilities:
            network.add_facility(facility)
        for connection in connections:
            network.add_connection(connection)
        return network

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(facilities={len(self)}, "
            f"connections={self.number_of_connections()})"
        )

    def __len__(self) -> int:
        return len(self._facilities)

    def __contains__(self, facility_id: object) -> bool:
        return facility_id in self._index

    def __iter__(self) -> Iterator[Facility]:
        return iter(self._facilities)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    def exists(self, facility_id: int) -> bool:
        """Return ``True`` if a facility with this identifier exists."""
        return facility_id in self._index

    def _position(self, facility_id: int) -> int:
        try:
            return self._index[facility_id]
        except KeyError:
            raise FacilityNotFoundError(facility_id) from None

    def get_facility(self, facility_id: int) -> Facility:
        """
        Return the facility with the given identifier.

        Raises
        ------
        FacilityNotFoundError
            If no facility has this identifier.
        """
        return self._facilities[self._position(facility_id)]

    def get_connection(self, source: int, target: int) -> Connection:
        """
        Return the connection ``source -> target``.

        Raises
        ------
        FacilityNotFoundError
            If either endpoint does not exist.
        ConnectionNotFoundError
            If both facilities exist but are not connected in this direction.
        """
        position = self._position(source)
        self._position(target)
        for connection in self._adjacency[position]:
            if connection.target == target:
                return connection
        raise ConnectionNotFoundError(source, target)

    def has_connection(self, source: int, target: int) -> bool:
        """Return ``True`` if the connection ``source -> target`` exists."""
        position = self._index.get(source)
        if position is None:
            return False
        return any(c.target == target for c in self._adjacency[position])

    def outgoing_edges(self, facility_id: int) -> Tuple[Connection, ...]:
        """
        Return the outgoing connections of a facility, in insertion order.

        Each connection exposes its destination (``target``), weight
        (``distance``), ``time`` and ``description``.
        """
        return tuple(self._adjacency[self._position(facility_id)])

    def facilities(self) -> Tuple[Facility, ...]:
        """All facilities, in insertion order."""
        return tuple(self._facilities)

    def facility_ids(self) -> List[int]:
        """All facility identifiers, in insertion order."""
        return [facility.id for facility in self._facilities]

    def connections(self) -> List[Connection]:
        """All connections, grouped by source in facility insertion order."""
        return [connection for edges in self._adjacency for connection in edges]

    def number_of_connections(self) -> int:
        return sum(len(edges) for edges in self._adjacency)

    # -------------------------------------------------------------------------
    # Facility mutations
    # -------------------------------------------------------------------------
    def add_facility(self, facility: Facility) -> None:
        """
        Add a facility to the network.

        Raises
        ------
        TypeError
            If ``facility`` is not a `Facility`.
        InvalidOperationError
            If a facility with the same identifier already exists.
        """
        if not isinstance(facility, Facility):
            raise TypeError("'facility' must be a Facility instance.")
        if facility.id in self._index:
            raise InvalidOperationError(f"A health center with ID {facility.id} already exists.")

        self._index[facility.id] = len(self._facilities)
        self._facilities.append(facility)
        self._adjacency.append([])
        self._log(f"Health center {facility.id} ({facility.name}) added.")

    def remove_facility(self, facility_id: int) -> Facility:
        """
        Remove a facility and every connection starting or ending at it.

        Returns
        -------
        Facility
            The removed facility.

        Raises
        ------
        FacilityNotFoundError
            If no facility has this identifier. The network is left unchanged.
        """
        position = self._position(facility_id)
        facility = self._facilities.pop(position)
        outgoing = self._adjacency.pop(position)

        del self._index[facility_id]
        for i in range(position, len(self._facilities)):
            self._index[self._facilities[i].id] = i

        incoming = 0
        for i, edges in enumerate(self._adjacency):
            kept = [c for c in edges if c.target != facility_id]
            incoming += len(edges) - len(kept)
            self._adjacency[i] = kept

        self._log(
            f"Health center {facility_id} removed "
            f"({len(outgoing)} outgoing and {incoming} incoming connections removed)."
        )
        return facility

    def update_facility(self, facility_id: int, **changes: Any) -> Facility:
        """
        Replace attributes of a facility (name, region, lat, lon, capacity).

        The identifier is immutable. The new record is validated like any other.

        Returns
        -------
        Facility
            The updated facility.

        Raises
        ------
        FacilityNotFoundError
            If no facility has this identifier.
        InvalidOperationError
            If ``changes`` tries to modify the identifier.
        """
        position = self._position(facility_id)
        if "id" in changes:
            raise InvalidOperationError("The ID of a health center cannot be modified.")

        updated = replace(self._facilities[position], **changes)
        self._facilities[position] = updated
        self._log(f"Health center {facility_id} updated.")
        return updated

    # -------------------------------------------------------------------------
    # Connection mutations
    # -------------------------------------------------------------------------
    def add_connection(self, connection: Connection) -> None:
        """
        Add a directed connection.

        Raises
        ------
        TypeError
            If ``connection`` is not a `Connection`.
        FacilityNotFoundError
            If either endpoint does not exist.
        InvalidOperationError
            If a connection already exists for this ordered pair.
        """
        if not isinstance(connection, Connection):
            raise TypeError("'connection' must be a Connection instance.")

        position = self._position(connection.source)
        self._position(connection.target)

        if any(c.target == connection.target for c in self._adjacency[position]):
            raise InvalidOperationError(
                f"A connection from {connection.source} to {connection.target} already exists."
            )

        self._adjacency[position].append(connection)
        self._log(f"Connection {connection.source} -> {connection.target} added.")

    def remove_connection(self, source: int, target: int) -> Connection:
        """
        Remove the connection ``source -> target``.

        Returns
        -------
        Connection
            The removed connection.

        Raises
        ------
        FacilityNotFoundError
            If either endpoint does not exist.
        ConnectionNotFoundError
            If the connection does not exist.
        """
        connection = self.get_connection(source, target)
        self._adjacency[self._index[source]].remove(connection)
        self._log(f"Connection {source} -> {target} removed.")
        return connection

    def update_connection(self, source: int, target: int, /, **changes: Any) -> Connection:
        """
        Replace attributes of a connection (distance, time, description).

        The endpoints are immutable: remove and add the connection instead.

        Returns
        -------
        Connection
            The updated connection, at the same position among the outgoing edges.
        """
        current = self.get_connection(source, target)
        if "source" in changes or "target" in changes:
            raise InvalidOperationError("The endpoints of a connection cannot be modified.")

        updated = replace(current, **changes)
        edges = self._adjacency[self._index[source]]
        edges[edges.index(current)] = updated
        self._log(f"Connection {source} -> {target} updated.")
        return updated

    # -------------------------------------------------------------------------
    # Consistency
    # -------------------------------------------------------------------------
    def check_integrity(self) -> None:
        """
        Verify that the adjacency structure and the facility set agree.

        Raises
        ------
        NetworkIntegrityError
            If a connection references a missing facility, is stored under the wrong
            source, or duplicates another ordered pair.
        """
        if len(self._facilities) != len(self._adjacency):
            raise NetworkIntegrityError("Facility list and adjacency lists have different sizes.")

        for position, (facility, edges) in enumerate(zip(self._facilities, self._adjacency)):
            if self._index.get(facility.id) != position:
                raise NetworkIntegrityError(f"Index of health center {facility.id} is stale.")
            targets = set()
            for connection in edges:
                if connection.source != facility.id:
                    raise NetworkIntegrityError(
                        f"Connection {connection.source} -> {connection.target} "
                        f"stored under health center {facility.id}."
                    )
                if connection.target not in self._index:
                    raise NetworkIntegrityError(
                        f"Connection {connection.source} -> {connection.target} "
                        "references a missing health center."
                    )
                if connection.target in targets:
                    raise NetworkIntegrityError(
                        f"Duplicate connection {connection.source} -> {connection.target}."
                    )
                targets.add(connection.target)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------
    def facilities_table(self) -> pl.DataFrame:
        """Facilities as a Polars DataFrame (one row per facility, insertion order)."""
        return pl.DataFrame(
            {
                "id": [f.id for f in self._facilities],
                "name": [f.name for f in self._facilities],
                "region": [f.region for f in self._facilities],
                "lat": [float(f.lat) for f in self._facilities],
                "lon": [float(f.lon) for f in self._facilities],
                "capacity": [f.capacity for f in self._facilities],
            },
            schema={
                "id": pl.Int64,
                "name": pl.Utf8,
                "region": pl.Utf8,
                "lat": pl.Float64,
                "lon": pl.Float64,
                "capacity": pl.Int64,
            },
        )

    def connections_table(self) -> pl.DataFrame:
        """Connections as a Polars DataFrame (grouped by source, insertion order)."""
        connections = self.connections()
        return pl.DataFrame(
            {
                "source": [c.source for c in connections],
                "target": [c.target for c in connections],
                "distance": [float(c.distance) for c in connections],
                "time": [c.time for c in connections],
                "description": [c.description for c in connections],
            },
            schema={
                "source": pl.Int64,
                "target": pl.Int64,
                "distance": pl.Float64,
                "time": pl.Int64,
                "description": pl.Utf8,
            },
        )

    def to_networkx(self) -> nx.DiGraph:
        """
        Return a NetworkX DiGraph copy of the network.

        Nodes carry ``name``, ``region``, ``lat``, ``lon`` and ``capacity``;
        edges carry ``distance``, ``time`` and ``description``.
        """
        graph = nx.DiGraph()
        for f in self._facilities:
            graph.add_node(f.id, name=f.name, region=f.region, lat=f.lat, lon=f.lon, capacity=f.capacity)
        for c in self.connections():
            graph.add_edge(c.source, c.target, distance=c.distance, time=c.time, description=c.description)
        return graph

    def summary(self) -> Dict[str, int]:
        """
        Structural counts of the network.

        Returns
        -------
        dict
            ``facilities``, ``connections``, ``isolated`` (facilities without any
            connection) and ``components`` (weakly connected components).
        """
        graph = self.to_networkx()
        return {
            "facilities": graph.number_of_nodes(),
            "connections": graph.number_of_edges(),
            "isolated": sum(1 for _ in nx.isolates(graph)),
            "components": nx.number_weakly_connected_components(graph) if len(graph) else 0,
        }

    def copy(self, param: Optional[Union[dict, ParamConfig]] = None) -> HealthNetwork:
        """Return an independent copy (records are immutable and shared)."""
        other = type(self)(param if param is not None else self.config)
        other._facilities = list(self._facilities)
        other._adjacency = [list(edges) for edges in self._adjacency]
        other._index = dict(self._index)
        return other
