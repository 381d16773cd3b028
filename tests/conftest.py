# -*- coding: utf-8 -*-
"""
Shared fixtures for the healthnet test-suite.

- ``scenario``  : three health centers, the reference example of the package.
- ``district``  : a small multi-district network with a cycle and an isolated center.
- ``random_network`` : factory of seeded random networks (≤ 8 centers).
"""

from __future__ import annotations

import random

import pytest

from healthnet.pre import Connection, Facility, HealthNetwork


def make_facility(facility_id: int, capacity: int = 10, *, name: str = None, region: str = "Central") -> Facility:
    return Facility(
        id=facility_id,
        name=name or f"Center {facility_id}",
        region=region,
        lat=-1.95 + facility_id / 100,
        lon=30.06 + facility_id / 100,
        capacity=capacity,
    )


@pytest.fixture
def scenario() -> HealthNetwork:
    """Facilities 1 "A" (5), 2 "B" (50), 3 "C" (10); 1→2 (10), 2→3 (5), 1→3 (20)."""
    facilities = [
        make_facility(1, 5, name="A"),
        make_facility(2, 50, name="B"),
        make_facility(3, 10, name="C"),
    ]
    connections = [
        Connection(1, 2, 10.0, 15, "Main road"),
        Connection(2, 3, 5.0, 8, "Ring road"),
        Connection(1, 3, 20.0, 25, "Highway"),
    ]
    return HealthNetwork.from_records(facilities, connections)


@pytest.fixture
def district() -> HealthNetwork:
    """
    Seven centers over three districts.

    101 -> 102 -> 103 -> 101 form a cycle, 104 and 105 hang off 103,
    106 is only reachable from 105 and 107 is isolated.
    """
    facilities = [
        make_facility(101, 20, name="Kigali Hospital", region="Gasabo"),
        make_facility(102, 8, name="Remera Clinic", region="Gasabo"),
        make_facility(103, 12, name="Kicukiro Center", region="Kicukiro"),
        make_facility(104, 40, name="Nyarugenge Hospital", region="Nyarugenge"),
        make_facility(105, 6, name="Gikondo Post", region="Kicukiro"),
        make_facility(106, 60, name="Referral Hospital", region="Nyarugenge"),
        make_facility(107, 15, name="Remote Post", region="Gasabo"),
    ]
    connections = [
        Connection(101, 102, 4.0, 10, "KG 11 Ave"),
        Connection(102, 103, 6.5, 14, ""),
        Connection(103, 101, 3.0, 7, "Airport road"),
        Connection(103, 104, 9.0, 20, "KN 3 Rd"),
        Connection(103, 105, 2.0, 5, ""),
        Connection(105, 106, 2.5, 6, "Gikondo, industrial zone"),
        Connection(104, 106, 1.0, 3, ""),
    ]
    return HealthNetwork.from_records(facilities, connections)


def build_random_network(seed: int, *, max_nodes: int = 8, density: float = 0.35) -> HealthNetwork:
    rng = random.Random(seed)
    n = rng.randint(1, max_nodes)
    ids = rng.sample(range(1, 100), n)
    facilities = [make_facility(i, rng.randint(1, 100)) for i in ids]
    connections = [
        Connection(a, b, float(rng.randint(1, 20)), rng.randint(1, 60))
        for a in ids
        for b in ids
        if a != b and rng.random() < density
    ]
    return HealthNetwork.from_records(facilities, connections)


@pytest.fixture
def random_network():
    return build_random_network
