# -*- coding: utf-8 -*-
"""
Core constants and simple lookups for healthnet.

This module centralizes:

- the column headers of the facility, connection and relationship files.
- the geographic bounds accepted for facility coordinates.
- the background tiles offered on the network map.

Notes
-----
* The CSV headers are part of the public contract: files written by one
  version must be readable by the next.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

__all__ = [
    "FACILITY_COLUMNS",
    "CONNECTION_COLUMNS",
    "RELATIONSHIP_COLUMNS",
    "LAT_BOUNDS",
    "LON_BOUNDS",
    "NO_CONNECTION",
    "DCT_VALID_TILES",
]


# -----------------------------------------------------------------------------
# File layouts
# -----------------------------------------------------------------------------

# It is essential that the keys remain unchanged (record field names).
# Values are the headers written in the CSV files.
FACILITY_COLUMNS: Dict[str, str] = {
    "id": "ID",
    "name": "Name",
    "region": "District",
    "lat": "Latitude",
    "lon": "Longitude",
    "capacity": "Capacity",
}
""" Record field → CSV header for the facilities file. """

CONNECTION_COLUMNS: Dict[str, str] = {
    "source": "FromID",
    "target": "ToID",
    "distance": "DistanceKM",
    "time": "TimeMinutes",
    "description": "Description",
}
""" Record field → CSV header for the connections file. """

RELATIONSHIP_COLUMNS: List[str] = [
    "Health Center ID",
    "Health Center Name",
    "Connected To",
    "Distance (km)",
    "Time (min)",
    "Description",
]
""" Headers of the relationship export. """

# Placeholder written in the relationship export for isolated facilities
NO_CONNECTION = "None"


# -----------------------------------------------------------------------------
# Coordinates
# -----------------------------------------------------------------------------
LAT_BOUNDS: Tuple[float, float] = (-90.0, 90.0)
LON_BOUNDS: Tuple[float, float] = (-180.0, 180.0)


# -----------------------------------------------------------------------------
# Map backgrounds
# -----------------------------------------------------------------------------
DCT_VALID_TILES: Dict[str, str] = {
    "OpenStreetMap": "OpenStreetMap",
    "CartoDB Positron": "CartoDB Positron",
    "CartoDB Voyager": "CartoDB Voyager",
    "CartoDB DarkMatter": "CartoDB DarkMatter",
    "Esri Streets": "Esri WorldStreetMap",
    "Esri Topography": "Esri WorldTopoMap",
    "Esri Satellite": "Esri WorldImagery",
}
""" Tile name accepted in `MapConfig.map_tiles` → xyzservices provider name passed to Folium. """
