# -*- coding: utf-8 -*-
"""
Settings objects shared across healthnet.

- `ParamConfig` holds what the storage, the analysis and the reports need:
  console output, data files and report precision.
- `MapConfig` holds the display and export options of `NetworkMap`.

Both offer ``describe()`` to print their current values. Classes taking a
``param`` argument go through `resolve_config`, so a plain ``dict`` works
as well as a ready-made `ParamConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

__all__ = ["ParamConfig", "MapConfig", "resolve_config"]

_FIELD_TYPES = {
    "main_print": (bool,),
    "distance_unit": (str,),
    "decimals": (int,),
    "matrix_decimals": (int,),
    "data_dir": (str, type(None)),
    "facilities_file": (str,),
    "connections_file": (str,),
    "relationships_file": (str,),
    "create_if_missing": (bool,),
}

_CSV_FIELDS = ("facilities_file", "connections_file", "relationships_file")


# -----------------------------------------------------------------------------
# ParamConfig
# -----------------------------------------------------------------------------
@dataclass
class ParamConfig:
    """
    Parameters of a healthnet session.

    Build it with keyword arguments (``ParamConfig(**param)`` for a dict), or
    hand the dict straight to a healthnet class, which converts and validates it.

    Examples
    --------
    >>> config = ParamConfig(main_print=True, data_dir="data")
    >>> storage = NetworkStorage({"data_dir": "data"})

    Attributes
    ----------
    main_print : bool
        Print progress messages and warnings of the analysis to the console.
    distance_unit : str
        Label written after distances in reports.
    decimals : int
        Decimals of distances in reports.
    matrix_decimals : int
        Decimals of the cells of the distance matrix report.
    data_dir : str, optional
        Folder of the CSV files. ``None`` means the working directory.
    facilities_file, connections_file, relationships_file : str
        CSV file names, each ending in ``.csv``.
    create_if_missing : bool
        Create a missing data file with only its header row.
    required_fields : List[str]
        Fields that must not be ``None``. Filled in by the class using the config.
    """

    main_print: bool = False
    distance_unit: str = "km"
    decimals: int = 2
    matrix_decimals: int = 1
    data_dir: Optional[str] = None
    facilities_file: str = "health_centers.csv"
    connections_file: str = "connections.csv"
    relationships_file: str = "relationship_table.csv"
    create_if_missing: bool = True

    required_fields: List[str] = field(default_factory=list)

    def validate(self) -> ParamConfig:
        """
        Check required fields, types and values. Returns ``self``.

        Raises
        ------
        ValueError
            For a missing required field or an out-of-range value.
        TypeError
            For a field of the wrong type.
        """
        self.validate_for_class(self.required_fields)

        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            # bool passes isinstance(int)
            wrong_bool = isinstance(value, bool) and bool not in expected
            if wrong_bool or not isinstance(value, expected):
                raise TypeError(
                    f"Parameter '{name}' expects {' or '.join(t.__name__ for t in expected)}, "
                    f"got {type(value).__name__}."
                )

        if min(self.decimals, self.matrix_decimals) < 0:
            raise ValueError("'decimals' and 'matrix_decimals' must be non-negative.")
        if not self.distance_unit.strip():
            raise ValueError("'distance_unit' cannot be empty.")

        bad_files = [name for name in _CSV_FIELDS if not getattr(self, name).lower().endswith(".csv")]
        if bad_files:
            raise ValueError(f"File names must end with '.csv': {', '.join(bad_files)}.")

        return self

    def validate_for_class(self, required_fields: List[str]) -> None:
        """Raise ``ValueError`` naming every field of ``required_fields`` left at ``None``."""
        missing = [name for name in required_fields if getattr(self, name, None) is None]
        if missing:
            raise ValueError(f"Missing required parameters: {', '.join(missing)}")

    def describe(self) -> None:
        print("\nParamConfig:")
        rows = [
            ("Data folder", self.data_dir or "."),
            ("Health centers file", self.facilities_file),
            ("Connections file", self.connections_file),
            ("Relationships file", self.relationships_file),
            ("Create missing files", self.create_if_missing),
            ("Distance unit", self.distance_unit),
            ("Decimals (report / matrix)", f"{self.decimals} / {self.matrix_decimals}"),
            ("Console output", self.main_print),
        ]
        for label, value in rows:
            print(f" - {label:<27}: {value}")


def resolve_config(
    param: Union[dict, ParamConfig, None],
    *,
    required_fields: Optional[List[str]] = None,
) -> ParamConfig:
    """
    Turn ``param`` into a validated `ParamConfig`.

    A dict (or ``None``, meaning defaults) is converted and validated. An
    existing `ParamConfig` is returned as is, once ``required_fields`` are checked.

    Raises
    ------
    TypeError
        If ``param`` is of any other type.
    """
    required_fields = required_fields or []

    if isinstance(param, ParamConfig):
        param.validate_for_class(required_fields)
        return param

    if param is None or isinstance(param, dict):
        return ParamConfig(**(param or {}), required_fields=required_fields).validate()

    raise TypeError("Parameter 'param' must be a dictionary or a ParamConfig object.")


# -----------------------------------------------------------------------------
# MapConfig
# -----------------------------------------------------------------------------
@dataclass
class MapConfig:
    """
    Options of the health network map.

    Attributes
    ----------
    map_tiles : List[str]
        Background tiles, keys of ``DCT_VALID_TILES``. The first one is displayed.
    zoom_start : int, optional
        Fixed zoom. ``None`` fits the map to the health centers.
    location : tuple of float, optional
        Map centre ``(lat, lon)``, only used with ``zoom_start``.
    file_name : str
        HTML file name, without extension.
    save_to_desktop : bool
        Write the file to ``~/Desktop``.
    custom_path : str, optional
        Folder to write the file to, checked before ``save_to_desktop``.
    open_browser : bool
        Open the written file in the browser.
    include_connections : bool
        Draw every connection, not only the highlighted route.
    facility_color, connection_color, route_color : str
        Folium colors of the markers, the connections and the route.
    """

    map_tiles: List[str] = field(default_factory=lambda: ["CartoDB Voyager", "OpenStreetMap"])
    zoom_start: Optional[int] = None
    location: Optional[Tuple[float, float]] = None
    file_name: str = "health_network"
    save_to_desktop: bool = False
    custom_path: Optional[str] = None
    open_browser: bool = True
    include_connections: bool = True

    facility_color: str = "darkblue"
    connection_color: str = "gray"
    route_color: str = "red"

    def describe(self) -> None:
        print("\nMapConfig:")
        if self.custom_path:
            target = self.custom_path
        elif self.save_to_desktop:
            target = "Desktop"
        else:
            target = "temporary file"
        rows = [
            ("Output", f"{self.file_name}.html ({target})"),
            ("Open in browser", self.open_browser),
            ("Tiles", ", ".join(self.map_tiles)),
            ("View", "auto-fit" if self.zoom_start is None else f"zoom {self.zoom_start} at {self.location or 'centre'}"),
            ("Connections layer", self.include_connections),
            ("Colors", f"{self.facility_color} / {self.connection_color} / {self.route_color}"),
        ]
        for label, value in rows:
            print(f" - {label:<18}: {value}")
