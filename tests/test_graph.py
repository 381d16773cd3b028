# -*- coding: utf-8 -*-
"""
Tests of the `Graph` facade: console output, configuration and fresh results.
"""

import pytest

from conftest import make_facility
from healthnet.analysis import Graph, Outcome, dijkstra
from healthnet.pre import Connection
from healthnet.utils.errors import FacilityNotFoundError


@pytest.fixture
def graph(district):
    return Graph(district, {"main_print": True})


def test_runs_every_algorithm(graph, capsys):
    assert graph.bfs(101).order[:3] == (101, 102, 103)
    assert graph.shortest_path(101, 106).distance == pytest.approx(15.0)
    assert graph.find_cycle().cycle == (101, 102, 103, 101)
    assert graph.minimum_spanning_tree(101).status is Outcome.DISCONNECTED
    assert graph.emergency_route(101, 30).facility.id == 106
    assert graph.summary()["isolated"] == 1

    out = capsys.readouterr().out
    assert "BFS from 101: 6 health center(s) reached." in out
    assert "Cycle detected: 101 -> 102 -> 103 -> 101." in out
    assert "Warning: The network is not fully connected." in out


def test_silent_by_default(district, capsys):
    graph = Graph(district)
    graph.shortest_path(101, 107)
    graph.emergency_route(101, 1000)
    assert capsys.readouterr().out == ""


def test_all_pairs_follows_connection_changes(scenario):
    graph = Graph(scenario)
    assert graph.all_pairs().distance(1, 3) == pytest.approx(15.0)

    scenario.remove_connection(1, 2)
    result = graph.all_pairs()
    expected = dijkstra(scenario, 1, 3)
    assert expected.path == (1, 3)
    assert result.distance(1, 3) == pytest.approx(expected.distance)
    assert result.path(1, 3).path == expected.path

    scenario.update_connection(1, 3, distance=7.5)
    assert graph.all_pairs().distance(1, 3) == pytest.approx(7.5)


def test_all_pairs_after_facility_replaced(scenario):
    graph = Graph(scenario)
    graph.all_pairs()

    scenario.remove_facility(2)
    scenario.add_facility(make_facility(4))
    scenario.add_connection(Connection(1, 4, 3.0, 5, "Bypass"))

    result = graph.all_pairs()
    assert result.ids == (1, 3, 4)
    assert result.distance(1, 4) == pytest.approx(3.0)
    assert result.path(1, 4).path == (1, 4)

def test_errors_propagate(graph):
    with pytest.raises(FacilityNotFoundError):
        graph.shortest_path(101, 999)


def test_config_inherited_from_network(district):
    assert Graph(district).config is district.config
