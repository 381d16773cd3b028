# -*- coding: utf-8 -*-
"""
Text reports of the health network and of the analysis results.

Every function here returns a string ready to be printed; nothing is printed
or written to disk. Column layouts follow the console tables of the health
center management tool:

- `format_facilities`, `format_connections`, `format_relationships` for the network.
- `format_traversal`, `format_path`, `format_distance_matrix`, `format_cycle`,
  `format_spanning_tree`, `format_routing` for the analysis results.

The relationship rows (`relationship_rows`, `relationships_table`) are also
used by `healthnet.pre.storage.NetworkStorage.export_relationships`.

Distances use ``ParamConfig.decimals`` and ``ParamConfig.distance_unit``; the
distance matrix uses ``ParamConfig.matrix_decimals``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, TYPE_CHECKING

import polars as pl

from healthnet.analysis.results import Outcome
from healthnet.utils.config import ParamConfig
from healthnet.utils.constant import NO_CONNECTION, RELATIONSHIP_COLUMNS
from healthnet.utils.utils import format_distance
from healthnet.utils.utils import format_path as join_path

if TYPE_CHECKING:  # noqa: F401
    from healthnet.analysis.results import (
        AllPairsResult,
        CycleResult,
        Hop,
        PathResult,
        RoutingResult,
        SpanningTreeResult,
        TraversalResult,
    )
    from healthnet.pre.network import HealthNetwork

__all__ = [
    "RelationshipRow",
    "relationship_rows",
    "relationships_table",
    "format_facilities",
    "format_connections",
    "format_relationships",
    "format_traversal",
    "format_path",
    "format_distance_matrix",
    "format_cycle",
    "format_spanning_tree",
    "format_routing",
]


def _config(config: Optional[ParamConfig]) -> ParamConfig:
    return config if config is not None else ParamConfig()


def _lines(*lines: str) -> str:
    return "\n".join(line.rstrip() for line in lines)


def _unit_header(config: ParamConfig) -> str:
    return f"Distance ({config.distance_unit})"


# -----------------------------------------------------------------------------
# Relationships
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RelationshipRow:
    """
    One line of the relationship table.

    ``target`` is ``None`` for a health center without outgoing connections;
    the row then carries zero distance and time and ``"-"`` as description.
    """
    facility_id: int
    facility_name: str
    target: Optional[int] = None
    target_name: Optional[str] = None
    distance: float = 0.0
    time: int = 0
    description: str = "-"

    @property
    def isolated(self) -> bool:
        return self.target is None

    def to_record(self, decimals: int = 2) -> Tuple[str, ...]:
        """Row as text, in the order of ``RELATIONSHIP_COLUMNS``."""
        if self.isolated:
            return (str(self.facility_id), self.facility_name, NO_CONNECTION, "0", "0", "-")
        return (
            str(self.facility_id),
            self.facility_name,
            str(self.target),
            f"{self.distance:.{decimals}f}",
            str(self.time),
            self.description,
        )


def relationship_rows(network: HealthNetwork) -> List[RelationshipRow]:
    """
    Relationship rows of the network, facilities in insertion order.

    One row per outgoing connection, or a single isolated row when the
    facility has none.
    """
    rows: List[RelationshipRow] = []
    for facility in network.facilities():
        edges = network.outgoing_edges(facility.id)
        if not edges:
            rows.append(RelationshipRow(facility.id, facility.name))
            continue
        for connection in edges:
            rows.append(
                RelationshipRow(
                    facility_id=facility.id,
                    facility_name=facility.name,
                    target=connection.target,
                    target_name=network.get_facility(connection.target).name,
                    distance=connection.distance,
                    time=connection.time,
                    description=connection.description,
                )
            )
    return rows


def relationships_table(network: HealthNetwork) -> pl.DataFrame:
    """
    Relationship rows as a Polars DataFrame with the export headers.

    ``Connected To`` is null for isolated health centers.
    """
    rows = relationship_rows(network)
    id_col, name_col, target_col, distance_col, time_col, description_col = RELATIONSHIP_COLUMNS
    return pl.DataFrame(
        {
            id_col: [row.facility_id for row in rows],
            name_col: [row.facility_name for row in rows],
            target_col: [row.target for row in rows],
            distance_col: [float(row.distance) for row in rows],
            time_col: [row.time for row in rows],
            description_col: [row.description for row in rows],
        },
        schema={
            id_col: pl.Int64,
            name_col: pl.Utf8,
            target_col: pl.Int64,
            distance_col: pl.Float64,
            time_col: pl.Int64,
            description_col: pl.Utf8,
        },
    )


def format_relationships(network: HealthNetwork, config: Optional[ParamConfig] = None) -> str:
    config = _config(config)
    if not len(network):
        return "No health centers found."

    lines = [
        f"{'ID':<5} | {'Name':<25} | {'Connected To':<10} | {_unit_header(config):<15} | {'Time (min)':<15} | Description",
        "-" * 100,
    ]
    for row in relationship_rows(network):
        if row.isolated:
            lines.append(f"{row.facility_id:<5} | {row.facility_name:<25} | {NO_CONNECTION:<10} | {'-':<15} | {'-':<15} | -")
        else:
            distance = f"{row.distance:.{config.decimals}f}"
            lines.append(
                f"{row.facility_id:<5} | {row.facility_name:<25} | {row.target:<10} | "
                f"{distance:<15} | {row.time:<15} | {row.description}"
            )
    return _lines(*lines)


# -----------------------------------------------------------------------------
# Network tables
# -----------------------------------------------------------------------------
def format_facilities(network: HealthNetwork) -> str:
    """Table of the health centers (coordinates with 4 decimals)."""
    if not len(network):
        return "No health centers found."

    lines = [
        f"{'ID':<5} | {'Name':<25} | {'District':<15} | {'Latitude':<10} | {'Longitude':<10} | {'Capacity':<10}",
        "-" * 85,
    ]
    for f in network.facilities():
        lines.append(
            f"{f.id:<5} | {f.name:<25} | {f.region:<15} | {f.lat:<10.4f} | {f.lon:<10.4f} | {f.capacity:<10}"
        )
    return _lines(*lines)


def format_connections(network: HealthNetwork, config: Optional[ParamConfig] = None) -> str:
    """Table of the connections, grouped by source facility."""
    config = _config(config)
    connections = network.connections()
    if not connections:
        return "No connections found."

    lines = [
        f"{'From ID':<10} | {'To ID':<10} | {_unit_header(config):<15} | {'Time (min)':<15} | Description",
        "-" * 100,
    ]
    for c in connections:
        distance = f"{c.distance:.{config.decimals}f}"
        lines.append(f"{c.source:<10} | {c.target:<10} | {distance:<15} | {c.time:<15} | {c.description}")
    return _lines(*lines)


# -----------------------------------------------------------------------------
# Analysis results
# -----------------------------------------------------------------------------
def format_traversal(network: HealthNetwork, result: TraversalResult) -> str:
    lines = [f"BFS Traversal starting from health center {result.origin}:"]
    for facility_id in result.order:
        f = network.get_facility(facility_id)
        lines.append(f"Health Center {f.id}: {f.name} ({f.region})")
    return _lines(*lines)


def _hop_table(hops: Tuple[Hop, ...], config: ParamConfig) -> List[str]:
    lines = [
        f"{'From':<10} | {'To':<10} | {_unit_header(config):<15} | Description",
        "-" * 80,
    ]
    for hop in hops:
        distance = f"{hop.distance:.{config.decimals}f}"
        lines.append(f"{hop.source:<10} | {hop.target:<10} | {distance:<15} | {hop.description}")
    return lines


def format_path(result: PathResult, config: Optional[ParamConfig] = None) -> str:
    """
    Shortest path report: total distance, node sequence and hop details.

    Works for the results of `dijkstra` and of `AllPairsResult.path`.
    """
    config = _config(config)
    if not result.found:
        return f"No path exists from health center {result.origin} to {result.destination}."

    return _lines(
        f"Shortest path from {result.origin} to {result.destination}:",
        f"Total distance: {format_distance(result.distance, config.decimals, config.distance_unit)}",
        f"Path: {join_path(result.path)}",
        "",
        "Detailed path information:",
        *_hop_table(result.hops, config),
    )


def format_distance_matrix(result: AllPairsResult, config: Optional[ParamConfig] = None) -> str:
    """
    All-pairs distance matrix.

    Unreachable pairs show ``INF``, the diagonal shows ``0``.
    """
    config = _config(config)
    if not result.ids:
        return "No health centers found."

    n = len(result.ids)
    header = f"{'From->To':<15} | " + "".join(f"{target:<8} | " for target in result.ids)
    lines = [header, "-" * (15 + n * 12)]
    for i, source in enumerate(result.ids):
        cells = []
        for j in range(n):
            value = float(result.distances[i, j])
            if i == j:
                cells.append(f"{'0':<8} | ")
            elif math.isinf(value):
                cells.append(f"{'INF':<8} | ")
            else:
                cells.append(f"{value:<8.{config.matrix_decimals}f} | ")
        lines.append(f"{source:<15} | " + "".join(cells))
    return _lines(*lines)


def format_cycle(result: CycleResult) -> str:
    if not result:
        return "No cycle detected in the network."
    return f"Cycle detected: {join_path(result.cycle)}"


def format_spanning_tree(result: SpanningTreeResult, config: Optional[ParamConfig] = None) -> str:
    """
    Spanning tree edges, connectivity warning when some facilities are left
    out, and total distance.
    """
    config = _config(config)
    lines = [
        f"Minimum Spanning Tree starting from health center {result.root}:",
        f"{'From':<10} | {'To':<10} | {_unit_header(config):<15}",
        "-" * 40,
    ]
    for edge in result.edges:
        lines.append(f"{edge.source:<10} | {edge.target:<10} | {edge.distance:<15.{config.decimals}f}")

    if result.status is Outcome.DISCONNECTED:
        lines += [
            "",
            "Warning: The network is not fully connected.",
            f"Only {result.covered} out of {result.facility_count} health centers are in the spanning tree.",
        ]

    total = format_distance(result.total_distance, config.decimals, config.distance_unit)
    lines += ["", f"Total spanning tree distance: {total}"]
    return _lines(*lines)


def format_routing(result: RoutingResult, config: Optional[ParamConfig] = None) -> str:
    """Emergency routing report for the three possible outcomes."""
    config = _config(config)

    if result.status is Outcome.ORIGIN_SATISFIES:
        return (
            f"The current health center (ID: {result.origin}) already has sufficient "
            f"capacity ({result.facility.capacity})."
        )
    if result.status is Outcome.NO_MATCH:
        return f"No health center with capacity >= {result.min_capacity} found."

    f = result.facility
    return _lines(
        f"Nearest health center with capacity >= {result.min_capacity}:",
        f"ID: {f.id}",
        f"Name: {f.name}",
        f"District: {f.region}",
        f"Capacity: {f.capacity}",
        f"Distance: {format_distance(result.distance, config.decimals, config.distance_unit)}",
        "",
        f"Route from {result.origin} to {f.id}:",
        f"Path: {join_path(result.path)}",
        "",
        "Detailed route information:",
        *_hop_table(result.hops, config),
    )
