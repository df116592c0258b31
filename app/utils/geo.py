# path: osm-feature-extractor/app/utils/geo.py

from __future__ import annotations

import math
from typing import Any, List, Optional

from app.models.feature_models import Point


# Roughly 5-6 m at mid latitudes
LINE_BUFFER_OFFSET_DEG = 0.00005


def _finite_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    return number if math.isfinite(number) else None


def overpass_to_points(geometry: Any) -> List[Point]:
    """
    Relabel Overpass {lat, lon} nodes as {lat, lng}, preserving order.
    Nodes without finite numeric coordinates are dropped.
    """
    if not isinstance(geometry, list):
        return []
    points = []
    for node in geometry:
        if not isinstance(node, dict):
            continue
        lat, lon = _finite_float(node.get("lat")), _finite_float(node.get("lon"))
        if lat is None or lon is None:
            continue
        points.append(Point(lat=lat, lng=lon))
    return points


def line_to_polygon(coordinates: List[Point], offset: float = LINE_BUFFER_OFFSET_DEG) -> List[Point]:
    """
    Turn a line into a thin closed ring: the original points, then the same
    points in reverse shifted by `offset` on both axes, then the first point again.

    This is a shifted duplicate, not a true buffer (no normals, no mitering).
    """
    if len(coordinates) < 2:
        return coordinates

    ring = [Point(lat=p.lat, lng=p.lng) for p in coordinates]
    for p in reversed(coordinates):
        ring.append(Point(lat=p.lat + offset, lng=p.lng + offset))
    ring.append(Point(lat=ring[0].lat, lng=ring[0].lng))
    return ring
