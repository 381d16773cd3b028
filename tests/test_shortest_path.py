# -*- coding: utf-8 -*-
"""
Tests of Dijkstra's single-pair shortest path.
"""

import math

import pytest

from conftest import make_facility
from healthnet.analysis import Outcome, dijkstra
from healthnet.pre import Connection, HealthNetwork
from healthnet.utils.errors import FacilityNotFoundError, InvalidOperationError


class TestDijkstra:

    def test_scenario(self, scenario):
        result = dijkstra(scenario, 1, 3)
        assert result.status is Outcome.FOUND
        assert result.found
        assert result.distance == pytest.approx(15.0)
        assert result.path == (1, 2, 3)

    def test_hop_details(self, scenario):
        result = dijkstra(scenario, 1, 3)
        assert [(h.source, h.target) for h in result.hops] == [(1, 2), (2, 3)]
        assert [h.description for h in result.hops] == ["Main road", "Ring road"]
        assert result.total_time == 15 + 8
        assert sum(h.distance for h in result.hops) == pytest.approx(result.distance)

    def test_after_removing_intermediate(self, scenario):
        scenario.remove_facility(2)
        result = dijkstra(scenario, 1, 3)
        assert result.distance == pytest.approx(20.0)
        assert result.path == (1, 3)

    def test_direction_matters(self, scenario):
        result = dijkstra(scenario, 3, 1)
        assert result.status is Outcome.UNREACHABLE
        assert not result.found
        assert math.isinf(result.distance)
        assert result.path == ()
        assert result.hops == ()

    def test_isolated_destination(self, district):
        assert dijkstra(district, 101, 107).status is Outcome.UNREACHABLE

    def test_longer_network(self, district):
        result = dijkstra(district, 101, 106)
        # 101 -> 102 -> 103 -> 105 -> 106 = 4 + 6.5 + 2 + 2.5
        assert result.distance == pytest.approx(15.0)
        assert result.path == (101, 102, 103, 105, 106)

    def test_same_endpoints(self, scenario):
        with pytest.raises(InvalidOperationError):
            dijkstra(scenario, 2, 2)

    @pytest.mark.parametrize("origin, destination", [(1, 99), (99, 1)])
    def test_unknown_endpoint(self, scenario, origin, destination):
        with pytest.raises(FacilityNotFoundError):
            dijkstra(scenario, origin, destination)

    def test_fresh_result_per_call(self, scenario):
        first = dijkstra(scenario, 1, 3)
        second = dijkstra(scenario, 1, 3)
        assert first == second
        assert first is not second

    def test_equal_distances_tie(self):
        network = HealthNetwork.from_records(
            [make_facility(i) for i in (1, 2, 3, 4)],
            [
                Connection(1, 3, 1.0, 1),
                Connection(1, 2, 1.0, 1),
                Connection(2, 4, 1.0, 1),
                Connection(3, 4, 1.0, 1),
            ],
        )
        result = dijkstra(network, 1, 4)
        assert result.distance == pytest.approx(2.0)
        # node 2 is settled before node 3 (heap ordered by distance then id)
        assert result.path == (1, 2, 4)
