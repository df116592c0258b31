# path: osm-feature-extractor/app/api/routes/features.py

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.feature_models import (
    ErrorResponse,
    FeatureCollection,
    FeatureRequest,
    ServerErrorResponse,
)
from app.services.feature_service import extract_features
from app.services.overpass_client import OverpassClient, get_overpass_client

router = APIRouter(prefix="/api", tags=["features"])


@router.post(
    "/features",
    response_model=FeatureCollection,
    summary="Extract OSM features inside a polygon",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ServerErrorResponse, "description": "Upstream or server error"},
    },
)
def get_features(
    request: FeatureRequest,
    client: OverpassClient = Depends(get_overpass_client),
) -> FeatureCollection:
    # Validation already happened on FeatureRequest; upstream errors go to the ServiceError handler.
    return extract_features(request, client)
