import pytest
from pydantic import ValidationError

from app.models.feature_models import VALID_FEATURE_TYPES, FeatureRequest, FeatureType


def _polygon():
    return [
        {"lat": 32.26, "lng": -97.79},
        {"lat": 32.26, "lng": -97.78},
        {"lat": 32.27, "lng": -97.78},
        {"lat": 32.26, "lng": -97.79},
    ]


def _first_error(payload):
    with pytest.raises(ValidationError) as info:
        FeatureRequest.model_validate(payload)
    return info.value.errors()[0]["msg"]


def test_valid_request_parses():
    req = FeatureRequest.model_validate({"polygon": _polygon(), "featureTypes": ["highway", "boundary"]})
    assert req.feature_types == [FeatureType.highway, FeatureType.boundary]
    assert req.forcepolygon is False
    assert req.polygon[0].lng == -97.79


def test_forcepolygon_true():
    req = FeatureRequest.model_validate({"polygon": _polygon(), "featureTypes": ["power"], "forcepolygon": True})
    assert req.forcepolygon is True


def test_zero_coordinates_are_accepted():
    polygon = [{"lat": 0, "lng": 0}, {"lat": 0, "lng": 1}, {"lat": 1, "lng": 0}]
    req = FeatureRequest.model_validate({"polygon": polygon, "featureTypes": ["building"]})
    assert req.polygon[0].lat == 0.0


@pytest.mark.parametrize(
    "payload,message",
    [
        ([], "Request body must be a JSON object"),
        ({"featureTypes": ["highway"]}, "Polygon coordinates are required as an array"),
        ({"polygon": "0 0 1 1", "featureTypes": ["highway"]}, "Polygon coordinates are required as an array"),
        ({"polygon": _polygon()[:2], "featureTypes": ["highway"]}, "Polygon must have at least 3 points"),
        (
            {"polygon": [{"lat": 1, "lng": 1}, {"lat": 1}, {"lat": 2, "lng": 2}], "featureTypes": ["highway"]},
            "Each polygon point must have lat and lng properties",
        ),
        (
            {"polygon": [{"lat": "1", "lng": 1}] * 3, "featureTypes": ["highway"]},
            "Each polygon point must have lat and lng properties",
        ),
        (
            {"polygon": [{"lat": 91, "lng": 1}] * 3, "featureTypes": ["highway"]},
            "Polygon point coordinates are out of range",
        ),
        ({"polygon": _polygon()}, "Feature types are required as an array"),
        ({"polygon": _polygon(), "featureTypes": []}, "At least one feature type is required"),
        (
            {"polygon": _polygon(), "featureTypes": ["highway", "foo"]},
            "Invalid feature type: foo. Valid types are: highway, building, waterway, power, landuse, boundary",
        ),
        (
            {"polygon": _polygon(), "featureTypes": ["highway"], "forcepolygon": "yes"},
            "forcepolygon must be a boolean value (true or false)",
        ),
    ],
)
def test_first_failing_check_is_reported(payload, message):
    assert _first_error(payload) == message


def test_polygon_error_wins_over_feature_type_error():
    assert _first_error({"polygon": [], "featureTypes": ["foo"]}) == "Polygon must have at least 3 points"


def test_valid_types_listed_in_order():
    assert VALID_FEATURE_TYPES == ["highway", "building", "waterway", "power", "landuse", "boundary"]


def test_oversized_coordinate_is_rejected_as_missing():
    polygon = [{"lat": 10**400, "lng": 1}, {"lat": 1, "lng": 1}, {"lat": 2, "lng": 2}]
    assert _first_error({"polygon": polygon, "featureTypes": ["highway"]}) == (
        "Each polygon point must have lat and lng properties"
    )
