# path: osm-feature-extractor/app/services/query_builder.py

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple

from app.models.feature_models import FeatureType, Point


# token -> (element kind, tag predicate)
FEATURE_TYPE_SELECTORS: Dict[str, Tuple[str, str]] = {
    FeatureType.highway.value: ("way", '["highway"]'),
    FeatureType.building.value: ("way", '["building"]'),
    FeatureType.waterway.value: ("way", '["waterway"]'),
    FeatureType.power.value: ("way", '["power"="line"]'),
    FeatureType.landuse.value: ("way", '["landuse"]'),
    FeatureType.boundary.value: ("relation", '["boundary"="administrative"]'),
}


def _format_coord(value: float) -> str:
    # 32.0 -> "32", 32.26 -> "32.26", 1e-05 -> "0.00001"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def poly_filter_string(polygon: Sequence[Point]) -> str:
    """Space separated "lat lng" pairs, in input order. The ring is not closed for you."""
    return " ".join(f"{_format_coord(p.lat)} {_format_coord(p.lng)}" for p in polygon)


def _distinct_tokens(feature_types: Iterable) -> List[str]:
    seen: List[str] = []
    for t in feature_types:
        token = t.value if isinstance(t, FeatureType) else str(t)
        if token not in seen:
            seen.append(token)
    return seen


def build_overpass_query(polygon: Sequence[Point], feature_types: Iterable) -> str:
    poly = poly_filter_string(polygon)

    clauses = []
    for token in _distinct_tokens(feature_types):
        selector = FEATURE_TYPE_SELECTORS.get(token)
        if selector is None:
            raise ValueError(f"Unsupported feature type: {token}")
        kind, predicate = selector
        clauses.append(f'{kind}{predicate}(poly:"{poly}");')

    if not clauses:
        raise ValueError("At least one feature type is required")

    return "[out:json];(" + "".join(clauses) + ");out geom;"
