# -*- coding: utf-8 -*-
"""
Tests of the text reports.
"""

from healthnet.analysis import (
    detect_cycle,
    dijkstra,
    floyd_warshall,
    nearest_with_capacity,
    prim_mst,
    bfs,
)
from healthnet.post.report import (
    format_connections,
    format_cycle,
    format_distance_matrix,
    format_facilities,
    format_path,
    format_relationships,
    format_routing,
    format_spanning_tree,
    format_traversal,
    relationship_rows,
    relationships_table,
)
from healthnet.pre import HealthNetwork
from healthnet.utils import ParamConfig


class TestNetworkTables:

    def test_facilities(self, scenario):
        lines = format_facilities(scenario).splitlines()
        assert lines[0].startswith("ID    | Name")
        assert lines[1] == "-" * 85
        assert lines[2].startswith("1     | A ")
        assert "-1.9400" in lines[2]
        assert len(lines) == 5

    def test_empty(self):
        assert format_facilities(HealthNetwork()) == "No health centers found."
        assert format_connections(HealthNetwork()) == "No connections found."
        assert format_relationships(HealthNetwork()) == "No health centers found."

    def test_connections(self, scenario):
        text = format_connections(scenario)
        assert "Distance (km)" in text
        assert "10.00" in text
        assert text.splitlines()[-1].endswith("Ring road")

    def test_relationships(self, district):
        text = format_relationships(district)
        assert "Remote Post" in text
        assert text.splitlines()[-1].startswith("107   | Remote Post")
        assert text.splitlines()[-1].endswith("| -")


class TestRelationshipRows:

    def test_rows(self, district):
        rows = relationship_rows(district)
        assert len(rows) == 9
        assert rows[0].target_name == "Remera Clinic"
        assert rows[-1].isolated
        assert rows[-1].to_record() == ("107", "Remote Post", "None", "0", "0", "-")

    def test_table(self, district):
        table = relationships_table(district)
        assert table.columns[0] == "Health Center ID"
        assert table.height == 9
        assert table["Connected To"].null_count() == 2


class TestResults:

    def test_traversal(self, scenario):
        text = format_traversal(scenario, bfs(scenario, 1))
        assert text.splitlines() == [
            "BFS Traversal starting from health center 1:",
            "Health Center 1: A (Central)",
            "Health Center 2: B (Central)",
            "Health Center 3: C (Central)",
        ]

    def test_path(self, scenario):
        lines = format_path(dijkstra(scenario, 1, 3)).splitlines()
        assert lines[0] == "Shortest path from 1 to 3:"
        assert lines[1] == "Total distance: 15.00 km"
        assert lines[2] == "Path: 1 -> 2 -> 3"
        assert [cell.strip() for cell in lines[-1].split("|")] == ["2", "3", "5.00", "Ring road"]

    def test_path_unreachable(self, scenario):
        assert format_path(dijkstra(scenario, 3, 1)) == "No path exists from health center 3 to 1."

    def test_path_precision_from_config(self, scenario):
        config = ParamConfig(decimals=1, distance_unit="mi")
        assert "Total distance: 15.0 mi" in format_path(dijkstra(scenario, 1, 3), config)

    def test_distance_matrix(self, scenario):
        lines = format_distance_matrix(floyd_warshall(scenario)).splitlines()
        assert [cell.strip() for cell in lines[0].split("|")][:4] == ["From->To", "1", "2", "3"]
        assert lines[2].split("|")[3].strip() == "15.0"
        assert lines[4].split("|")[1].strip() == "INF"
        assert lines[4].split("|")[3].strip() == "0"

    def test_cycle(self, scenario, district):
        assert format_cycle(detect_cycle(scenario)) == "No cycle detected in the network."
        assert format_cycle(detect_cycle(district)) == "Cycle detected: 101 -> 102 -> 103 -> 101"

    def test_spanning_tree_connected(self, scenario):
        text = format_spanning_tree(prim_mst(scenario, 1))
        assert "Warning" not in text
        assert text.splitlines()[-1] == "Total spanning tree distance: 15.00 km"

    def test_spanning_tree_disconnected(self, district):
        text = format_spanning_tree(prim_mst(district, 101))
        assert "Warning: The network is not fully connected." in text
        assert "Only 6 out of 7 health centers are in the spanning tree." in text

    def test_routing(self, scenario):
        found = format_routing(nearest_with_capacity(scenario, 1, 10))
        assert "Name: B" in found
        assert "Distance: 10.00 km" in found
        assert "Path: 1 -> 2" in found

        origin = format_routing(nearest_with_capacity(scenario, 1, 5))
        assert origin == "The current health center (ID: 1) already has sufficient capacity (5)."

        none = format_routing(nearest_with_capacity(scenario, 1, 500))
        assert none == "No health center with capacity >= 500 found."
