# -*- coding: utf-8 -*-
"""
Tests of the facility and connection records.
"""

import math

import pytest

from healthnet.pre import Connection, Facility
from healthnet.utils.errors import InvalidOperationError


class TestFacility:

    def test_valid_facility(self):
        f = Facility(1, "Central Hospital", "Gasabo", -1.9441, 30.0619, 120)
        assert f.coordinates == (-1.9441, 30.0619)
        assert f.capacity == 120

    @pytest.mark.parametrize("field, value", [
        ("id", "1"),
        ("id", True),
        ("capacity", 2.5),
        ("lat", "north"),
    ])
    def test_wrong_types(self, field, value):
        kwargs = dict(id=1, name="A", region="R", lat=0.0, lon=0.0, capacity=1)
        kwargs[field] = value
        with pytest.raises(TypeError):
            Facility(**kwargs)

    @pytest.mark.parametrize("field, value", [
        ("name", "   "),
        ("region", ""),
        ("lat", 90.5),
        ("lon", -181.0),
        ("lat", math.nan),
        ("capacity", 0),
        ("capacity", -3),
    ])
    def test_out_of_range(self, field, value):
        kwargs = dict(id=1, name="A", region="R", lat=0.0, lon=0.0, capacity=1)
        kwargs[field] = value
        with pytest.raises(ValueError):
            Facility(**kwargs)

    def test_frozen(self):
        f = Facility(1, "A", "R", 0.0, 0.0, 1)
        with pytest.raises(AttributeError):
            f.capacity = 10


class TestConnection:

    def test_valid_connection(self):
        c = Connection(1, 2, 12.5, 20, "Main road")
        assert c.key == (1, 2)
        assert c.description == "Main road"

    def test_default_description(self):
        assert Connection(1, 2, 1.0, 1).description == ""

    def test_self_loop_rejected(self):
        with pytest.raises(InvalidOperationError):
            Connection(4, 4, 1.0, 1)

    @pytest.mark.parametrize("distance, time", [(0.0, 5), (-2.0, 5), (3.0, 0), (3.0, -1)])
    def test_non_positive_weights(self, distance, time):
        with pytest.raises(ValueError):
            Connection(1, 2, distance, time)

    def test_integer_distance_accepted(self):
        assert Connection(1, 2, 7, 3).distance == 7

    def test_time_must_be_integer(self):
        with pytest.raises(TypeError):
            Connection(1, 2, 3.0, 4.5)
