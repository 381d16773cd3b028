# -*- coding: utf-8 -*-
"""
Graph facade over the analysis algorithms.

This module defines the class `Graph`, a thin wrapper binding a
`healthnet.pre.network.HealthNetwork` to a `ParamConfig`. It runs the
algorithms of `healthnet.analysis` on the bound network and reports progress
on the console when ``main_print`` is set.
"""

from __future__ import annotations

import time
from typing import Dict, Union, TYPE_CHECKING

from healthnet.analysis.cycles import detect_cycle
from healthnet.analysis.routing import nearest_with_capacity
from healthnet.analysis.shortest_path import dijkstra, floyd_warshall
from healthnet.analysis.spanning_tree import prim_mst
from healthnet.analysis.traversal import bfs
from healthnet.utils.config import resolve_config
from healthnet.utils.utils import format_distance, format_path

if TYPE_CHECKING:  # noqa: F401
    from healthnet.analysis.results import (
        AllPairsResult,
        CycleResult,
        PathResult,
        RoutingResult,
        SpanningTreeResult,
        TraversalResult,
    )
    from healthnet.pre.network import HealthNetwork
    from healthnet.utils.config import ParamConfig

__all__ = ["Graph"]


# -----------------------------------------------------------------------------
# Class: Graph
# -----------------------------------------------------------------------------
class Graph:
    """
    Analysis entry point for a health network.

    Attributes
    ----------
    network : HealthNetwork
        The network analysed. It is read, never modified.
    config : ParamConfig
        Dataclass with validated configuration parameters.
    main_print : bool
        Controls console output, determined by configuration parameters or
        execution context.

    Methods
    -------
    bfs(origin)
        Breadth-first reachability from a facility.
    shortest_path(origin, destination)
        Dijkstra between two facilities.
    all_pairs()
        Floyd–Warshall over every pair of facilities.
    find_cycle()
        Detect one directed cycle.
    minimum_spanning_tree(root)
        Prim's spanning tree from a facility.
    emergency_route(origin, min_capacity)
        Nearest facility with enough capacity.
    summary()
        Structural counts of the network.

    Notes
    -----
    Nothing is kept between calls: every method runs on the network as it is
    at call time.
    """

    def __init__(self, network: HealthNetwork, param: Union[dict, ParamConfig, None] = None) -> None:
        """
        Parameters
        ----------
        network : HealthNetwork
            The network to analyse.
        param : dict or ParamConfig, optional
            Configuration parameters. Defaults to the configuration of ``network``.
        """
        self.network = network
        self.config = resolve_config(param if param is not None else network.config)
        self.main_print = self.config.main_print or (__name__ == "__main__")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.network!r})"

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    def _distance(self, value: float) -> str:
        return format_distance(value, self.config.decimals, self.config.distance_unit)

    # -------------------------------------------------------------------------
    # Algorithms
    # -------------------------------------------------------------------------
    def bfs(self, origin: int) -> TraversalResult:
        """Facilities reachable from ``origin`` in breadth-first order."""
        result = bfs(self.network, origin)
        self._log(f"\nBFS from {origin}: {len(result)} health center(s) reached.")
        return result

    def shortest_path(self, origin: int, destination: int) -> PathResult:
        """Shortest path between two facilities (Dijkstra)."""
        result = dijkstra(self.network, origin, destination)
        if result.found:
            self._log(
                f"\nShortest path {origin} -> {destination}: {self._distance(result.distance)} "
                f"({format_path(result.path)})."
            )
        else:
            self._log(f"\nNo path exists from {origin} to {destination}.")
        return result

    def all_pairs(self) -> AllPairsResult:
        """All-pairs shortest distances (Floyd–Warshall), recomputed on each call."""
        start_time = time.time()
        result = floyd_warshall(self.network)
        self._log(
            f"\nAll-pairs distances computed for {len(self.network)} health center(s) "
            f"in {time.time() - start_time:.3f} seconds."
        )
        return result

    def find_cycle(self) -> CycleResult:
        """One directed cycle of the network, if any."""
        result = detect_cycle(self.network)
        if result:
            self._log(f"\nCycle detected: {format_path(result.cycle)}.")
        else:
            self._log("\nNo cycle detected.")
        return result

    def minimum_spanning_tree(self, root: int) -> SpanningTreeResult:
        """Minimum spanning tree from ``root`` (Prim)."""
        result = prim_mst(self.network, root)
        self._log(
            f"\nSpanning tree from {root}: {len(result.edges)} connection(s), "
            f"total {self._distance(result.total_distance)}."
        )
        if not result.is_connected:
            self._log(
                "Warning: The network is not fully connected.\n"
                f"Only {result.covered} out of {result.facility_count} health centers are in the spanning tree."
            )
        return result

    def emergency_route(self, origin: int, min_capacity: int) -> RoutingResult:
        """Nearest facility from ``origin`` with ``capacity >= min_capacity``."""
        result = nearest_with_capacity(self.network, origin, min_capacity)
        if result.found:
            self._log(
                f"\nNearest health center with capacity >= {min_capacity}: "
                f"{result.facility.name} (ID {result.facility.id}), {self._distance(result.distance)}."
            )
        else:
            self._log(f"\nNo reachable health center has capacity >= {min_capacity}.")
        return result

    def summary(self) -> Dict[str, int]:
        """Structural counts of the bound network (see `HealthNetwork.summary`)."""
        return self.network.summary()
