# -*- coding: utf-8 -*-
"""
CSV persistence of the health network.

This module defines the class `NetworkStorage`, which reads and writes the two
files describing a network (facilities and connections) and exports the
relationship table. File locations come from `ParamConfig`.

Expected files
--------------
- Facilities: ``ID,Name,District,Latitude,Longitude,Capacity``
- Connections: ``FromID,ToID,DistanceKM,TimeMinutes,Description``

Loading is tolerant: a row that cannot be parsed, or that describes an invalid
record, is skipped with a warning and the remaining rows are loaded.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

import polars as pl

from healthnet.pre.network import HealthNetwork
from healthnet.pre.records import Connection, Facility
from healthnet.utils.config import ParamConfig, resolve_config
from healthnet.utils.constant import CONNECTION_COLUMNS, FACILITY_COLUMNS, RELATIONSHIP_COLUMNS
from healthnet.utils.utils import resolve_data_file

__all__ = ["NetworkStorage"]


# Target dtypes of the record fields, applied after reading every column as text
_FACILITY_DTYPES: Dict[str, pl.DataType] = {
    "id": pl.Int64,
    "name": pl.Utf8,
    "region": pl.Utf8,
    "lat": pl.Float64,
    "lon": pl.Float64,
    "capacity": pl.Int64,
}

_CONNECTION_DTYPES: Dict[str, pl.DataType] = {
    "source": pl.Int64,
    "target": pl.Int64,
    "distance": pl.Float64,
    "time": pl.Int64,
    "description": pl.Utf8,
}


# -----------------------------------------------------------------------------
# Class: NetworkStorage
# -----------------------------------------------------------------------------
class NetworkStorage:
    """
    Reads and writes a `HealthNetwork` as CSV files.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    main_print : bool
        Indicates whether execution information should be printed to the console.
    facilities_path, connections_path, relationships_path : pathlib.Path
        Resolved file locations.
    skipped : list of str
        Warnings collected during the last ``read_csv()``.

    Methods
    -------
    read_csv():
        Load the network from the facilities and connections files.
    to_csv(network):
        Save the network to the facilities and connections files.
    export_relationships(network):
        Write the relationship table of the network.

    Examples
    --------
    >>> storage = NetworkStorage({"data_dir": "data", "main_print": True})
    >>> network = storage.read_csv()
    >>> storage.to_csv(network)
    """

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        """
        Parameters
        ----------
        param : dict or ParamConfig, optional
            Configuration parameters. Uses ``data_dir``, ``facilities_file``,
            ``connections_file``, ``relationships_file`` and ``create_if_missing``.
        """
        self.config = resolve_config(param)
        self.main_print = self.config.main_print

        self.facilities_path = resolve_data_file(self.config.facilities_file, self.config.data_dir)
        self.connections_path = resolve_data_file(self.config.connections_file, self.config.data_dir)
        self.relationships_path = resolve_data_file(self.config.relationships_file, self.config.data_dir)
        self.skipped: List[str] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(facilities='{self.facilities_path}', "
            f"connections='{self.connections_path}')"
        )

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    def _warn(self, message: str) -> None:
        # Skipped rows are always reported
        self.skipped.append(message)
        print(f"Warning: {message}")

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------
    def _load_table(self, path: Path, columns: Dict[str, str], dtypes: Dict[str, pl.DataType]) -> pl.DataFrame:
        """
        Read one CSV file into a typed table with the record field names.

        Every column is read as text, stripped and cast non-strictly: a value
        that cannot be converted becomes null, which marks the row as malformed.
        A ``line`` column keeps the line number of each row in the file.
        """
        headers = list(columns.values())

        if not path.exists() or path.stat().st_size == 0:
            if not self.config.create_if_missing:
                raise FileNotFoundError(f"The file '{path}' does not exist.")
            path.parent.mkdir(parents=True, exist_ok=True)
            pl.DataFrame(schema={header: pl.Utf8 for header in headers}).write_csv(path)
            self._log(f"File '{path}' created with headers only.")

        try:
            raw = pl.read_csv(path, infer_schema_length=0, truncate_ragged_lines=True)
        except pl.exceptions.PolarsError as e:
            raise ValueError(f"Error reading CSV file '{path}': {e}") from e

        missing = [header for header in headers if header not in raw.columns]
        if missing:
            raise ValueError(f"Missing required columns in '{path.name}': {', '.join(missing)}")

        renamed = {header: field for field, header in columns.items()}
        return (
            raw.select(headers)
            .rename(renamed)
            .with_row_index("line", offset=2)
            .with_columns(
                [
                    pl.col(field).str.strip_chars().cast(dtype, strict=False)
                    for field, dtype in dtypes.items()
                ]
            )
        )

    def _read_facilities(self, network: HealthNetwork) -> None:
        table = self._load_table(self.facilities_path, FACILITY_COLUMNS, _FACILITY_DTYPES)

        for row in table.iter_rows(named=True):
            line = row.pop("line")
            if any(value is None for value in row.values()):
                self._warn(f"Error parsing line {line} of '{self.facilities_path.name}', skipped.")
                continue
            try:
                network.add_facility(Facility(**row))
            except (TypeError, ValueError) as e:
                self._warn(f"Invalid health center on line {line}: {e} Skipped.")

    def _read_connections(self, network: HealthNetwork) -> None:
        table = self._load_table(self.connections_path, CONNECTION_COLUMNS, _CONNECTION_DTYPES)
        table = table.with_columns(pl.col("description").fill_null(""))

        for row in table.iter_rows(named=True):
            line = row.pop("line")
            if any(value is None for value in row.values()):
                self._warn(f"Error parsing line {line} of '{self.connections_path.name}', skipped.")
                continue
            if not (network.exists(row["source"]) and network.exists(row["target"])):
                self._warn(
                    "Connection references non-existent health center(s): "
                    f"{row['source']} -> {row['target']}"
                )
                continue
            try:
                network.add_connection(Connection(**row))
            except (TypeError, ValueError) as e:
                self._warn(f"Invalid connection on line {line}: {e} Skipped.")

    def read_csv(self, network: Optional[HealthNetwork] = None) -> HealthNetwork:
        """
        Load the network from the facilities and connections files.

        Parameters
        ----------
        network : HealthNetwork, optional
            An empty network to fill. A new one sharing this configuration is
            created if ``None``.

        Returns
        -------
        HealthNetwork
            The loaded network. Skipped rows are listed in ``self.skipped``.

        Raises
        ------
        FileNotFoundError
            If a file is missing and ``create_if_missing`` is False.
        ValueError
            If a file cannot be parsed as CSV or lacks a required column,
            or if ``network`` is not empty.
        """
        if network is None:
            network = HealthNetwork(self.config)
        elif len(network):
            raise ValueError("The network to fill must be empty.")

        self.skipped = []
        self._read_facilities(network)
        self._read_connections(network)

        self._log(
            f"\nNetwork loaded: {len(network)} health center(s), "
            f"{network.number_of_connections()} connection(s)."
        )
        if self.skipped:
            self._log(f"{len(self.skipped)} row(s) skipped.")
        return network

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------
    def to_csv(self, network: HealthNetwork) -> None:
        """
        Save the network to the facilities and connections files.

        Latitudes and longitudes are written with 4 decimals, distances with 2.
        Existing files are overwritten.
        """
        self.facilities_path.parent.mkdir(parents=True, exist_ok=True)
        self.connections_path.parent.mkdir(parents=True, exist_ok=True)

        network.facilities_table().rename(FACILITY_COLUMNS).write_csv(
            self.facilities_path, float_precision=4
        )
        network.connections_table().rename(CONNECTION_COLUMNS).write_csv(
            self.connections_path, float_precision=2
        )

        self._log(
            f"Network saved: '{self.facilities_path}' ({len(network)} rows), "
            f"'{self.connections_path}' ({network.number_of_connections()} rows)."
        )

    def export_relationships(self, network: HealthNetwork) -> Path:
        """
        Write the relationship table of the network.

        One row per connection, and one ``None`` row per isolated health center.

        Returns
        -------
        pathlib.Path
            Location of the written file.
        """
        from healthnet.post.report import relationship_rows

        records = [row.to_record(self.config.decimals) for row in relationship_rows(network)]
        table = pl.DataFrame(
            records,
            schema={header: pl.Utf8 for header in RELATIONSHIP_COLUMNS},
            orient="row",
        )
        self.relationships_path.parent.mkdir(parents=True, exist_ok=True)
        table.write_csv(self.relationships_path)

        self._log(f"\nRelationship table has been saved to '{self.relationships_path}'.")
        return self.relationships_path
