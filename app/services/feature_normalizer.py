# path: osm-feature-extractor/app/services/feature_normalizer.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.models.feature_models import (
    FeatureCollection,
    FeatureGeometry,
    FeatureMetadata,
    NormalizedFeature,
)
from app.utils.geo import line_to_polygon, overpass_to_points

logger = logging.getLogger(__name__)


DEFAULT_SOURCE = "OpenStreetMap via Overpass API"
UNKNOWN_CATEGORY = "unknown"
UNNAMED_FEATURE = "Unnamed feature"

# First matching tag wins
CATEGORY_RULES: List[Tuple[str, str]] = [
    ("building", "building"),
    ("highway", "road"),
    ("waterway", "water"),
    ("power", "utility"),
    ("landuse", "landuse"),
    ("boundary", "boundary"),
]


def _capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def _highway_name(tags: Dict[str, str], value: str) -> str:
    return tags.get("ref") or f"{_capitalize_first(value)} Road"


def _building_name(tags: Dict[str, str], value: str) -> str:
    if value == "yes":
        return "Building"
    return f"{_capitalize_first(value)} Building"


def _waterway_name(tags: Dict[str, str], value: str) -> str:
    return _capitalize_first(value)


def _power_name(tags: Dict[str, str], value: str) -> str:
    return f"Power {value}"


NAME_RULES: List[Tuple[str, Callable[[Dict[str, str], str], str]]] = [
    ("name", lambda tags, value: value),
    ("highway", _highway_name),
    ("building", _building_name),
    ("waterway", _waterway_name),
    ("power", _power_name),
]


def element_tags(element: Dict[str, Any]) -> Dict[str, str]:
    tags = element.get("tags")
    if not isinstance(tags, dict):
        return {}
    return {str(k): str(v) for k, v in tags.items() if v is not None}


def classify_element(tags: Dict[str, str]) -> str:
    for key, category in CATEGORY_RULES:
        if tags.get(key):
            return category
    return UNKNOWN_CATEGORY


def derive_feature_name(tags: Dict[str, str]) -> str:
    for key, rule in NAME_RULES:
        value = tags.get(key)
        if value:
            return rule(tags, value)
    return UNNAMED_FEATURE


def build_geometry(element: Dict[str, Any], category: str, forcepolygon: bool = False) -> FeatureGeometry:
    coordinates = overpass_to_points(element.get("geometry"))

    if element.get("type") != "way":
        # Relations and anything else are passed through untouched
        return FeatureGeometry(type="Complex", coordinates=coordinates)
    if category == "building":
        # Building ways come back already closed
        return FeatureGeometry(type="Polygon", coordinates=coordinates)
    if forcepolygon:
        return FeatureGeometry(type="Polygon", coordinates=line_to_polygon(coordinates))
    return FeatureGeometry(type="LineString", coordinates=coordinates)


def normalize_element(element: Any, forcepolygon: bool = False) -> Optional[NormalizedFeature]:
    """Returns None for anything that cannot become a feature."""
    if not isinstance(element, dict) or element.get("geometry") is None:
        return None

    tags = element_tags(element)
    category = classify_element(tags)
    return NormalizedFeature(
        id=f"{element.get('type')}/{element.get('id')}",
        type=category,
        name=derive_feature_name(tags),
        geometry=build_geometry(element, category, forcepolygon),
        properties=tags,
    )


def utc_timestamp() -> str:
    # 2024-05-01T12:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_overpass_response(
    payload: Any,
    forcepolygon: bool = False,
    source: str = DEFAULT_SOURCE,
) -> FeatureCollection:
    """
    Reshape an Overpass JSON payload into a FeatureCollection.

    Total over its input: a missing or malformed element list yields an empty
    collection, elements without geometry are skipped, missing tags default
    to {}. Output order follows the input element order.
    """
    elements = payload.get("elements") if isinstance(payload, dict) else None
    if not isinstance(elements, list):
        elements = []

    features: List[NormalizedFeature] = []
    for element in elements:
        feature = normalize_element(element, forcepolygon=forcepolygon)
        if feature is not None:
            features.append(feature)

    logger.info(
        "normalized %d/%d elements (forcepolygon=%s)",
        len(features),
        len(elements),
        forcepolygon,
    )
    return FeatureCollection(
        metadata=FeatureMetadata(count=len(features), timestamp=utc_timestamp(), source=source),
        features=features,
    )
