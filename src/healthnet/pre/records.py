# -*- coding: utf-8 -*-
"""
Validated records of the health network: **Facility** and **Connection**.

Both are frozen dataclasses checked in ``__post_init__``. This is the
boundary of the package: once a record exists, its fields are known to be
well typed and within range, and the algorithms never re-check them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Tuple

from healthnet.utils.constant import LAT_BOUNDS, LON_BOUNDS
from healthnet.utils.errors import InvalidOperationError

__all__ = ["Facility", "Connection"]


def _check_int(name: str, value: Any) -> None:
    # bool is an int subclass, never a valid identifier or quantity here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{name}' must be an integer, got {type(value).__name__}.")


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{name}' must be a number, got {type(value).__name__}.")
    if not math.isfinite(value):
        raise ValueError(f"'{name}' must be a finite number.")


def _check_text(name: str, value: Any, *, allow_empty: bool = False) -> None:
    if not isinstance(value, str):
        raise TypeError(f"'{name}' must be a string, got {type(value).__name__}.")
    if not allow_empty and not value.strip():
        raise ValueError(f"'{name}' cannot be empty.")


# -----------------------------------------------------------------------------
# Class: Facility
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Facility:
    """
    A health center: a node of the network.

    Attributes
    ----------
    id : int
        Unique identifier, assigned by the caller (not necessarily contiguous).
    name : str
        Display name.
    region : str
        Region (district) label.
    lat : float
        Latitude in degrees, within [-90, 90].
    lon : float
        Longitude in degrees, within [-180, 180].
    capacity : int
        Capacity of the health center, strictly positive.
    """

    id: int
    name: str
    region: str
    lat: float
    lon: float
    capacity: int

    def __post_init__(self) -> None:
        _check_int("id", self.id)
        _check_text("name", self.name)
        _check_text("region", self.region)
        _check_number("lat", self.lat)
        _check_number("lon", self.lon)
        _check_int("capacity", self.capacity)

        if not LAT_BOUNDS[0] <= self.lat <= LAT_BOUNDS[1]:
            raise ValueError(f"Latitude must be between {LAT_BOUNDS[0]:g} and {LAT_BOUNDS[1]:g}.")
        if not LON_BOUNDS[0] <= self.lon <= LON_BOUNDS[1]:
            raise ValueError(f"Longitude must be between {LON_BOUNDS[0]:g} and {LON_BOUNDS[1]:g}.")
        if self.capacity <= 0:
            raise ValueError("Capacity must be greater than 0.")

    @property
    def coordinates(self) -> Tuple[float, float]:
        """``(lat, lon)`` pair, the order expected by Folium."""
        return (self.lat, self.lon)


# -----------------------------------------------------------------------------
# Class: Connection
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Connection:
    """
    A directed connection between two health centers.

    Attributes
    ----------
    source : int
        Identifier of the origin facility.
    target : int
        Identifier of the destination facility.
    distance : float
        Distance in kilometers, strictly positive. Weight used by every algorithm.
    time : int
        Travel time in minutes, strictly positive. Carried, not used for path costs.
    description : str
        Free text (road name, transport mode...). May be empty.

    Notes
    -----
    A connection is identified by its ``(source, target)`` pair. Self-loops are
    rejected here; duplicate pairs are rejected by the store.
    """

    source: int
    target: int
    distance: float
    time: int
    description: str = ""

    def __post_init__(self) -> None:
        _check_int("source", self.source)
        _check_int("target", self.target)
        _check_number("distance", self.distance)
        _check_int("time", self.time)
        _check_text("description", self.description, allow_empty=True)

        if self.source == self.target:
            raise InvalidOperationError("Source and destination cannot be the same.")
        if self.distance <= 0:
            raise ValueError("Distance must be greater than 0.")
        if self.time <= 0:
            raise ValueError("Time must be greater than 0.")

    @property
    def key(self) -> Tuple[int, int]:
        """The ``(source, target)`` pair identifying the connection."""
        return (self.source, self.target)
