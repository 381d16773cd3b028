# -*- coding: utf-8 -*-
"""
Analysis subpackage : traversal, shortest paths, cycles, spanning tree and routing.

Each algorithm is a pure function taking a `HealthNetwork` and returning a
frozen result object. For console-driven use, the class `Graph` binds a
network to a configuration and runs them with status messages.
"""

from __future__ import annotations

from .graph import Graph
from .traversal import bfs
from .shortest_path import dijkstra, floyd_warshall
from .cycles import detect_cycle
from .spanning_tree import prim_mst
from .routing import nearest_with_capacity
from .results import (
    Outcome,
    Hop,
    PathResult,
    RoutingResult,
    TraversalResult,
    CycleResult,
    SpanningTreeResult,
    AllPairsResult,
)

__all__ = [
    "Graph",
    "bfs",
    "dijkstra",
    "floyd_warshall",
    "detect_cycle",
    "prim_mst",
    "nearest_with_capacity",
    "Outcome",
    "Hop",
    "PathResult",
    "RoutingResult",
    "TraversalResult",
    "CycleResult",
    "SpanningTreeResult",
    "AllPairsResult",
]
