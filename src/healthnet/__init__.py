# -*- coding: utf-8 -*-
"""
`healthnet`: model and analyze a network of health centers, then map it.

This top-level package exposes three user-facing subpackages:

- `healthnet.pre`       – records, graph store and CSV persistence
- `healthnet.analysis`  – traversal, shortest paths, cycles, spanning tree and emergency routing
- `healthnet.post`      – text reports and map visualization
"""

from __future__ import annotations

__all__ = ["pre", "analysis", "post", "__version__"]

__version__ = "1.0.0"
