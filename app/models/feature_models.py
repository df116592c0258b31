# path: osm-feature-extractor/app/models/feature_models.py

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError


class FeatureType(str, Enum):
    highway = "highway"
    building = "building"
    waterway = "waterway"
    power = "power"
    landuse = "landuse"
    boundary = "boundary"


VALID_FEATURE_TYPES: List[str] = [t.value for t in FeatureType]

GeometryType = Literal["Polygon", "LineString", "Complex"]


def _request_error(message: str) -> PydanticCustomError:
    # Message goes through the context so user input is never treated as a template
    return PydanticCustomError("invalid_feature_request", "{reason}", {"reason": message})


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


class Point(BaseModel):
    lat: float
    lng: float


class FeatureRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    polygon: List[Point]
    feature_types: List[FeatureType] = Field(alias="featureTypes")
    forcepolygon: bool = False

    @model_validator(mode="before")
    @classmethod
    def check_request(cls, data: Any):
        # Checks run in a fixed order and only the first failure is reported.
        if not isinstance(data, dict):
            raise _request_error("Request body must be a JSON object")

        polygon = data.get("polygon")
        if not isinstance(polygon, list):
            raise _request_error("Polygon coordinates are required as an array")
        if len(polygon) < 3:
            raise _request_error("Polygon must have at least 3 points")
        for point in polygon:
            if isinstance(point, Point):
                continue
            if not isinstance(point, dict) or not (_is_number(point.get("lat")) and _is_number(point.get("lng"))):
                raise _request_error("Each polygon point must have lat and lng properties")
            if not (-90.0 <= point["lat"] <= 90.0) or not (-180.0 <= point["lng"] <= 180.0):
                raise _request_error("Polygon point coordinates are out of range")

        feature_types = data.get("featureTypes", data.get("feature_types"))
        if not isinstance(feature_types, list):
            raise _request_error("Feature types are required as an array")
        if not feature_types:
            raise _request_error("At least one feature type is required")
        for token in feature_types:
            value = token.value if isinstance(token, FeatureType) else token
            if value not in VALID_FEATURE_TYPES:
                raise _request_error(
                    f"Invalid feature type: {token}. Valid types are: {', '.join(VALID_FEATURE_TYPES)}"
                )

        if "forcepolygon" in data and not isinstance(data["forcepolygon"], bool):
            raise _request_error("forcepolygon must be a boolean value (true or false)")
        return data


class FeatureGeometry(BaseModel):
    type: GeometryType
    coordinates: List[Point]


class NormalizedFeature(BaseModel):
    id: str
    type: str
    name: str
    geometry: FeatureGeometry
    properties: Dict[str, str] = Field(default_factory=dict)


class FeatureMetadata(BaseModel):
    count: int = Field(ge=0)
    timestamp: str
    source: str


class FeatureCollection(BaseModel):
    metadata: FeatureMetadata
    features: List[NormalizedFeature]

    @model_validator(mode="after")
    def validate_count(self):
        if self.metadata.count != len(self.features):
            raise ValueError("metadata.count must equal len(features)")
        return self


class ErrorResponse(BaseModel):
    error: str


class ServerErrorResponse(BaseModel):
    error: str
    details: str
