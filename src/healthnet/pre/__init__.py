# -*- coding: utf-8 -*-
"""
Pre-processing subpackage: records, graph store and persistence.

This subpackage re-exports user-facing classes so they can be imported directly:

- classes `Facility`, `Connection` – validated records of the network
- class `HealthNetwork` – the graph store owning facilities and connections
- class `NetworkStorage` – read and write the network as CSV files
"""

from __future__ import annotations

from .records import Facility, Connection
from .network import HealthNetwork
from .storage import NetworkStorage

__all__ = [
    "Facility",
    "Connection",
    "HealthNetwork",
    "NetworkStorage",
]
