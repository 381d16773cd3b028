# -*- coding: utf-8 -*-
"""
Exception types raised by healthnet.

Only caller mistakes and store defects are raised. Ordinary search outcomes
(unreachable destination, no facility with enough capacity, disconnected
spanning tree) are reported through ``healthnet.analysis.results.Outcome``.
"""

from __future__ import annotations

__all__ = [
    "HealthNetError",
    "FacilityNotFoundError",
    "ConnectionNotFoundError",
    "InvalidOperationError",
    "NetworkIntegrityError",
]


class HealthNetError(Exception):
    """Base class for all healthnet errors."""


class FacilityNotFoundError(HealthNetError, LookupError):
    """No facility exists for the given identifier."""

    def __init__(self, facility_id: int) -> None:
        self.facility_id = facility_id
        super().__init__(f"No health center with ID {facility_id} exists.")


class ConnectionNotFoundError(HealthNetError, LookupError):
    """No connection exists for the given ordered pair."""

    def __init__(self, source: int, target: int) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No connection from {source} to {target} exists.")


class InvalidOperationError(HealthNetError, ValueError):
    """The request is well formed but not allowed (self-loop, duplicate, same endpoints...)."""


class NetworkIntegrityError(HealthNetError, RuntimeError):
    """A store invariant is broken: a connection references a missing facility."""
