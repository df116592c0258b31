# path: osm-feature-extractor/app/services/overpass_client.py

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from app.core.config import settings
from app.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class OverpassClient:
    """
    One POST per query to an Overpass interpreter. No retries, no caching.
    """

    def __init__(
        self,
        url: str,
        timeout_s: float,
        user_agent: str,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self.timeout_s = timeout_s
        self.user_agent = user_agent
        self._transport = transport

    def interpret(self, query: str) -> Any:
        headers = {
            "User-Agent": self.user_agent,
            "Content-Type": "application/x-www-form-urlencoded",
        }
        logger.info("[Overpass] POST %s (%d chars)", self.url, len(query))

        try:
            with httpx.Client(timeout=self.timeout_s, transport=self._transport) as client:
                resp = client.post(self.url, content=query.encode("utf-8"), headers=headers)
        except httpx.TimeoutException as exc:
            logger.error("[Overpass] timeout after %ss", self.timeout_s)
            raise UpstreamError(f"Overpass API timeout after {self.timeout_s}s", str(exc)) from exc
        except httpx.RequestError as exc:
            logger.error("[Overpass] unreachable: %s", exc)
            raise UpstreamError(f"Overpass API unreachable: {exc}", str(exc)) from exc

        if resp.status_code != 200:
            preview = (resp.text or "").strip().replace("\n", " ")[:300]
            logger.error("[Overpass] HTTP %d: %s", resp.status_code, preview)
            raise UpstreamError(f"Overpass API HTTP {resp.status_code}", preview)

        try:
            return resp.json()
        except ValueError as exc:
            preview = (resp.text or "").strip().replace("\n", " ")[:300]
            raise UpstreamError("Overpass API returned a non-JSON body", preview) from exc


def get_overpass_client() -> OverpassClient:
    return OverpassClient(
        url=settings.overpass_url,
        timeout_s=settings.overpass_timeout_s,
        user_agent=settings.overpass_user_agent,
    )
