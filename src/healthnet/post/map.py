# -*- coding: utf-8 -*-
"""
Interactive Folium maps of the health network.

This module defines the class `NetworkMap`, which renders a `HealthNetwork`
on a Leaflet map:

- a marker layer with one marker per health center (popup: id, name, district, capacity),
- a polyline layer with the connections (tooltip: distance, time, description),
- optionally a highlighted route layer for a shortest path or emergency route.

Display and export options come from `MapConfig`; saving and opening the HTML
file is delegated to `healthnet.utils.map.show_map`.
"""

from __future__ import annotations

from typing import Optional, Union, TYPE_CHECKING

import folium
from folium.plugins import Fullscreen

from healthnet.utils.config import MapConfig, resolve_config
from healthnet.utils.map import auto_fit_map, setup_tiles, show_map
from healthnet.utils.utils import format_distance, format_path, wrap_text_at_space

if TYPE_CHECKING:  # noqa: F401
    from healthnet.analysis.results import PathResult, RoutingResult
    from healthnet.pre.network import HealthNetwork
    from healthnet.utils.config import ParamConfig

__all__ = ["NetworkMap"]


# -----------------------------------------------------------------------------
# Class: NetworkMap
# -----------------------------------------------------------------------------
class NetworkMap:
    """
    Folium map of a health network.

    Attributes
    ----------
    network : HealthNetwork
        The network drawn, read only.
    map_config : MapConfig
        Display and export options.
    config : ParamConfig
        Dataclass with validated configuration parameters (console output, units).
    main_print : bool
        Indicates whether execution information should be printed to the console.

    Methods
    -------
    build(path=None):
        Create the `folium.Map` with its layers.
    show(path=None):
        Build the map, save it as HTML and open it according to `MapConfig`.

    Examples
    --------
    >>> route = dijkstra(network, 1, 3)
    >>> NetworkMap(network, MapConfig(open_browser=False)).show(route)
    """

    def __init__(
        self,
        network: HealthNetwork,
        map_config: Optional[MapConfig] = None,
        param: Union[dict, ParamConfig, None] = None,
    ) -> None:
        if map_config is not None and not isinstance(map_config, MapConfig):
            raise TypeError("Parameter 'map_config' must be a MapConfig object.")

        self.network = network
        self.map_config = map_config if map_config is not None else MapConfig()
        self.config = resolve_config(param if param is not None else network.config)
        self.main_print = self.config.main_print

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    def _distance(self, value: float) -> str:
        return format_distance(value, self.config.decimals, self.config.distance_unit)

    # -------------------------------------------------------------------------
    # Layers
    # -------------------------------------------------------------------------
    def _facility_layer(self) -> folium.FeatureGroup:
        layer = folium.FeatureGroup(name="Health centers", show=True, control=True)
        for f in self.network.facilities():
            popup_html = (
                f"<b>{wrap_text_at_space(f.name, 30)}</b><br>"
                f"ID: {f.id}<br>"
                f"District: {f.region}<br>"
                f"Capacity: {f.capacity}"
            )
            folium.Marker(
                location=f.coordinates,
                popup=folium.Popup(popup_html, max_width=250),
                tooltip=f"{f.id} - {f.name}",
                icon=folium.Icon(color=self.map_config.facility_color, icon="plus-sign"),
            ).add_to(layer)
        return layer

    def _connection_layer(self) -> folium.FeatureGroup:
        layer = folium.FeatureGroup(name="Connections", show=True, control=True)
        for c in self.network.connections():
            source = self.network.get_facility(c.source)
            target = self.network.get_facility(c.target)
            tooltip = f"{c.source} -> {c.target}: {self._distance(c.distance)}, {c.time} min"
            if c.description:
                tooltip += f"<br>{wrap_text_at_space(c.description, 40)}"
            folium.PolyLine(
                locations=[source.coordinates, target.coordinates],
                color=self.map_config.connection_color,
                weight=2,
                opacity=0.7,
                tooltip=tooltip,
            ).add_to(layer)
        return layer

    def _route_layer(self, path: Union[PathResult, RoutingResult]) -> folium.FeatureGroup:
        layer = folium.FeatureGroup(name="Route", show=True, control=True)
        locations = [self.network.get_facility(facility_id).coordinates for facility_id in path.path]
        folium.PolyLine(
            locations=locations,
            color=self.map_config.route_color,
            weight=5,
            opacity=0.9,
            tooltip=f"{format_path(path.path)} ({self._distance(path.distance)})",
        ).add_to(layer)
        return layer

    # -------------------------------------------------------------------------
    # Map
    # -------------------------------------------------------------------------
    def build(self, path: Optional[Union[PathResult, RoutingResult]] = None) -> folium.Map:
        """
        Create the Folium map of the network.

        Parameters
        ----------
        path : PathResult or RoutingResult, optional
            A route to highlight. Ignored when it holds fewer than two facilities
            (no path found, or origin already satisfying the request).

        Returns
        -------
        folium.Map
            The map, not saved.

        Raises
        ------
        ValueError
            If the network has no health center, or if a tile name is unknown.
        """
        if not len(self.network):
            raise ValueError("The network has no health center. Nothing to map.")

        self._log("Creating base map...")
        m = auto_fit_map(
            [f.coordinates for f in self.network.facilities()],
            location=self.map_config.location,
            zoom_start=self.map_config.zoom_start,
            tiles=False,
        )
        setup_tiles(m, map_tiles=self.map_config.map_tiles)

        if self.map_config.include_connections and self.network.number_of_connections():
            self._log("Adding connection layer...")
            m.add_child(self._connection_layer(), name="polylines_connections")

        if path is not None and len(path.path) > 1:
            self._log("Adding route layer...")
            m.add_child(self._route_layer(path), name="polylines_route")

        self._log("Adding health center layer...")
        m.add_child(self._facility_layer(), name="markers_facilities")

        folium.LayerControl().add_to(m)
        Fullscreen(
            position="topleft",
            title="Full screen",
            title_cancel="Exit",
            force_separate_button=True,
        ).add_to(m)
        return m

    def show(self, path: Optional[Union[PathResult, RoutingResult]] = None) -> folium.Map:
        """
        Build the map, then save and open it according to `MapConfig`.

        Returns
        -------
        folium.Map
            The saved map.
        """
        m = self.build(path)

        self._log("Saving map...")
        show_map(
            m,
            file_name=self.map_config.file_name,
            save_to_desktop=self.map_config.save_to_desktop,
            custom_path=self.map_config.custom_path,
            open_browser=self.map_config.open_browser,
        )
        return m
