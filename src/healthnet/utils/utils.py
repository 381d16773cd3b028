# -*- coding: utf-8 -*-
"""
General-purpose utilities for healthnet.

Used by the reports, the CSV storage and the map popups:

- `format_path` and `format_distance` render paths and distances as text.
- `resolve_data_file` locates a CSV file inside the configured data folder.
- `wrap_text_at_space` breaks long popup text into HTML lines.
"""

from __future__ import annotations

import math
import textwrap
from pathlib import Path
from typing import Iterable, Optional, Union

__all__ = [
    "format_path",
    "format_distance",
    "resolve_data_file",
    "wrap_text_at_space",
]


# -----------------------------------------------------------------------------
# Text rendering
# -----------------------------------------------------------------------------
def format_path(path: Iterable[int]) -> str:
    """
    Join facility identifiers with arrows.

    Examples
    --------
    >>> format_path([1, 2, 3])
    '1 -> 2 -> 3'
    """
    return " -> ".join(map(str, path))


def format_distance(value: float, decimals: int = 2, unit: Optional[str] = None) -> str:
    """
    Format a distance with a fixed number of decimals, ``INF`` when infinite.

    Parameters
    ----------
    value : float
        Distance to format.
    decimals : int, optional
        Number of decimals. Default is 2.
    unit : str, optional
        Unit appended after a space (e.g. ``"km"``). Not appended to ``INF``.

    Returns
    -------
    str
        The formatted distance.

    Examples
    --------
    >>> format_distance(15, unit="km")
    '15.00 km'
    >>> format_distance(float("inf"))
    'INF'
    """
    if math.isinf(value):
        return "INF"
    text = f"{value:.{decimals}f}"
    return f"{text} {unit}" if unit else text


# -----------------------------------------------------------------------------
# Data files
# -----------------------------------------------------------------------------
def resolve_data_file(file_name: str, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Build the path of a data file from its name and an optional folder.

    Parameters
    ----------
    file_name : str
        Name of the file (e.g., ``"health_centers.csv"``). A path is also accepted.
    data_dir : str or pathlib.Path, optional
        Folder containing the file. Relative to the working directory if ``None``.

    Returns
    -------
    pathlib.Path
        The file path (with '~' expanded).

    Raises
    ------
    ValueError
        If ``data_dir`` exists but is not a directory.
    """
    if data_dir is None:
        return Path(file_name).expanduser()

    folder = Path(data_dir).expanduser()
    if folder.exists() and not folder.is_dir():
        raise ValueError(f"The data folder '{folder}' is not a directory.")
    return folder / file_name


# -----------------------------------------------------------------------------
# Popup text
# -----------------------------------------------------------------------------
def wrap_text_at_space(text: str, max_line_length: int) -> str:
    """
    Break ``text`` on spaces into lines of at most ``max_line_length`` characters,
    joined with ``<br>``. Words longer than a line are kept whole.

    Examples
    --------
    >>> wrap_text_at_space("Gikondo, industrial zone", 10)
    'Gikondo,<br>industrial<br>zone'
    """
    lines = textwrap.wrap(
        text,
        width=max_line_length,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "<br>".join(lines)
