# -*- coding: utf-8 -*-
"""
Post-processing subpackage: text reports and interactive maps.

This subpackage re-exports the main user-facing class:

- class `NetworkMap` – build Folium maps of the network, with an optional highlighted route.

The text formatters (`format_path`, `format_spanning_tree`, ...) and the
relationship rows live in `healthnet.post.report` and are imported from there.
"""

from __future__ import annotations

from .map import NetworkMap
# Text reports: from .report import format_path, ...  # import explicitly if needed

__all__ = ["NetworkMap"]
