# path: osm-feature-extractor/app/services/feature_service.py

from __future__ import annotations

import logging

from app.core.config import settings
from app.models.feature_models import FeatureCollection, FeatureRequest
from app.services.feature_normalizer import normalize_overpass_response
from app.services.overpass_client import OverpassClient
from app.services.query_builder import build_overpass_query

logger = logging.getLogger(__name__)


def extract_features(request: FeatureRequest, client: OverpassClient) -> FeatureCollection:
    """
    validated request -> Overpass query -> raw elements -> FeatureCollection.

    Upstream failures propagate as UpstreamError; nothing partial is returned.
    """
    query = build_overpass_query(request.polygon, request.feature_types)
    logger.info(
        "extracting %s in %d-point polygon",
        ",".join(t.value for t in request.feature_types),
        len(request.polygon),
    )
    logger.debug("overpass query: %s", query)

    payload = client.interpret(query)
    return normalize_overpass_response(
        payload,
        forcepolygon=request.forcepolygon,
        source=settings.data_source,
    )
