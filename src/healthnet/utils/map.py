# -*- coding: utf-8 -*-
"""
Folium helpers used by `healthnet.post.map.NetworkMap`.

- `show_map` writes a map to an HTML file and opens it in the browser.
- `auto_fit_map` creates a map framing a set of facility coordinates.
- `setup_tiles` adds the background tile layers, checked against the known providers.

Notes
-----
* Tile names are the keys of ``healthnet.utils.constant.DCT_VALID_TILES``.
"""

from __future__ import annotations

import os
import tempfile
import webbrowser
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import folium
import numpy as np

from healthnet.utils.constant import DCT_VALID_TILES

__all__ = ["show_map", "auto_fit_map", "setup_tiles"]


# -----------------------------------------------------------------------------
# Saving
# -----------------------------------------------------------------------------
def _target_file(file_name: str, save_to_desktop: bool, custom_path: Optional[str]) -> Optional[Path]:
    # None means a temporary file
    if custom_path:
        folder = Path(custom_path).expanduser()
        if not folder.is_dir() or not os.access(folder, os.W_OK):
            raise ValueError(f"The path '{custom_path}' does not exist or is not writable.")
        return folder / f"{file_name}.html"
    if save_to_desktop:
        return Path.home() / "Desktop" / f"{file_name}.html"
    return None


def show_map(
    map_object: folium.Map,
    *,
    file_name: str = "health_network",
    save_to_desktop: bool = False,
    custom_path: Optional[str] = None,
    open_browser: bool = True,
) -> Path:
    """
    Write a Folium map to an HTML file and open it in the default browser.

    Parameters
    ----------
    map_object : folium.Map
        The map to save.
    file_name : str, optional
        Base name of the HTML file, without extension.
    save_to_desktop : bool, optional
        Save into ``~/Desktop``.
    custom_path : str, optional
        Save into this existing folder. Takes precedence over ``save_to_desktop``.
    open_browser : bool, optional
        Open the saved file. A temporary file (no folder requested) is always opened.

    Returns
    -------
    pathlib.Path
        Location of the HTML file.

    Raises
    ------
    ValueError
        If ``file_name`` has an extension, or ``custom_path`` is not a writable folder.
    RuntimeError
        If the file cannot be written.
    """
    if Path(file_name).suffix:
        raise ValueError("The 'file_name' parameter should not include an extension.")

    target = _target_file(file_name, save_to_desktop, custom_path)
    is_temporary = target is None
    if is_temporary:
        with tempfile.NamedTemporaryFile(prefix=f"{file_name}_", suffix=".html", delete=False) as tmp:
            target = Path(tmp.name)

    try:
        map_object.save(str(target))
    except OSError as e:
        raise RuntimeError(f"Failed to save map to '{target}': {e}") from e

    print("Map saved as a temporary file." if is_temporary else f"Map saved to: {target}")

    if is_temporary or open_browser:
        webbrowser.open(target.resolve().as_uri())
    return target


# -----------------------------------------------------------------------------
# Framing
# -----------------------------------------------------------------------------
def auto_fit_map(
    points: Sequence[Tuple[float, float]],
    *,
    location: Optional[Tuple[float, float]] = None,
    zoom_start: Optional[int] = None,
    tiles: bool = False,
) -> folium.Map:
    """
    Create a Folium map framing ``(lat, lon)`` points.

    Without ``zoom_start`` the map is fitted to the bounding box of the points.
    With ``zoom_start`` it is centred on ``location``, or on the middle of the
    bounding box when no location is given.

    Parameters
    ----------
    points : sequence of (float, float)
        Facility coordinates.
    location : tuple of float, optional
        Map centre. Needs ``zoom_start``.
    zoom_start : int, optional
        Fixed zoom level.
    tiles : bool, optional
        Start with the OpenStreetMap base layer. Off by default, tile layers are
        normally added with `setup_tiles`.

    Raises
    ------
    ValueError
        If ``location`` comes without ``zoom_start``, or if the points are
        empty or not finite.

    Notes
    -----
    A single point gives an empty bounding box and Leaflet then zooms in to its
    maximum; pass ``zoom_start`` for one-facility networks.
    """
    if location is not None and zoom_start is None:
        raise ValueError("If `location` is specified, `zoom_start` must also be provided.")

    coords = np.asarray(points, dtype=float)
    if coords.size == 0:
        raise ValueError("No coordinates provided. Cannot generate a map.")
    if coords.ndim != 2 or coords.shape[1] != 2 or not np.isfinite(coords).all():
        raise ValueError("Coordinates must be finite (lat, lon) pairs.")

    south_west = coords.min(axis=0)
    north_east = coords.max(axis=0)

    if zoom_start is not None and location is None:
        location = tuple(float(v) for v in (south_west + north_east) / 2)

    m = folium.Map(location=location, zoom_start=zoom_start, tiles="OpenStreetMap" if tiles else None)
    if zoom_start is None:
        m.fit_bounds([south_west.tolist(), north_east.tolist()])
    return m


# -----------------------------------------------------------------------------
# Background tiles
# -----------------------------------------------------------------------------
def setup_tiles(mymap: folium.Map, *, map_tiles: Optional[List[str]] = None) -> folium.Map:
    """
    Add background tile layers to ``mymap``; only the first one is shown.

    ``map_tiles`` defaults to ``["CartoDB Voyager"]``. Every name is checked
    before any layer is added, so an invalid list leaves the map untouched.

    Raises
    ------
    ValueError
        If a name is not a key of ``DCT_VALID_TILES``.
    """
    names = list(map_tiles) if map_tiles else ["CartoDB Voyager"]

    unknown = [name for name in names if name not in DCT_VALID_TILES]
    if unknown:
        raise ValueError(f"Invalid tile layer: '{unknown[0]}'. Choose from {list(DCT_VALID_TILES)}.")

    for position, name in enumerate(names):
        folium.TileLayer(
            DCT_VALID_TILES[name],
            name=name,
            overlay=False,
            control=True,
            show=position == 0,
        ).add_to(mymap)
    return mymap
