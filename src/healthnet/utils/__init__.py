# -*- coding: utf-8 -*-
"""
Internal utilities (constants, config, errors, mapping helpers, misc).

This subpackage is intentionally not a user-facing API surface, apart from the
configuration containers and the exception types.
Import what you need from concrete modules, for example:

    from healthnet.utils.constant import FACILITY_COLUMNS
"""

from __future__ import annotations

from healthnet.utils.config import ParamConfig, MapConfig
from healthnet.utils.errors import (
    HealthNetError,
    FacilityNotFoundError,
    ConnectionNotFoundError,
    InvalidOperationError,
    NetworkIntegrityError,
)

__all__: list[str] = [
    "ParamConfig",
    "MapConfig",
    "HealthNetError",
    "FacilityNotFoundError",
    "ConnectionNotFoundError",
    "InvalidOperationError",
    "NetworkIntegrityError",
]
