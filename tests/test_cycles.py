# -*- coding: utf-8 -*-
"""
Tests of directed cycle detection.
"""

from conftest import make_facility
from healthnet.analysis import detect_cycle
from healthnet.pre import Connection, Facility, HealthNetwork


def _walks_edges(network, cycle):
    return all(network.has_connection(a, b) for a, b in zip(cycle, cycle[1:]))


def test_acyclic_scenario(scenario):
    result = detect_cycle(scenario)
    assert not result
    assert result.has_cycle is False
    assert result.cycle == ()


def test_district_cycle(district):
    result = detect_cycle(district)
    assert result
    assert result.cycle == (101, 102, 103, 101)
    assert _walks_edges(district, result.cycle)


def test_cycle_not_through_first_root():
    network = HealthNetwork.from_records(
        [make_facility(i) for i in (1, 2, 3, 4)],
        [
            Connection(1, 2, 1.0, 1),
            Connection(2, 3, 1.0, 1),
            Connection(3, 4, 1.0, 1),
            Connection(4, 2, 1.0, 1),
        ],
    )
    result = detect_cycle(network)
    assert result.cycle == (2, 3, 4, 2)
    assert result.cycle[0] == result.cycle[-1]


def test_two_node_cycle():
    network = HealthNetwork.from_records(
        [make_facility(1), make_facility(2)],
        [Connection(1, 2, 1.0, 1), Connection(2, 1, 1.0, 1)],
    )
    assert detect_cycle(network).cycle == (1, 2, 1)


def test_diamond_is_not_a_cycle():
    network = HealthNetwork.from_records(
        [make_facility(i) for i in (1, 2, 3, 4)],
        [
            Connection(1, 2, 1.0, 1),
            Connection(1, 3, 1.0, 1),
            Connection(2, 4, 1.0, 1),
            Connection(3, 4, 1.0, 1),
        ],
    )
    assert not detect_cycle(network)


def test_long_chain_beyond_recursion_limit():
    n = 5000
    facilities = [Facility(i, f"Center {i}", "Chain", 0.0, 0.0, 1) for i in range(1, n + 1)]
    connections = [Connection(i, i + 1, 1.0, 1) for i in range(1, n)]
    network = HealthNetwork.from_records(facilities, connections)
    assert not detect_cycle(network)

    network.add_connection(Connection(n, 1, 1.0, 1))
    result = detect_cycle(network)
    assert len(result.cycle) == n + 1


def test_empty_network():
    assert not detect_cycle(HealthNetwork())
