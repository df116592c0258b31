# path: osm-feature-extractor/app/core/exceptions.py

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """
    Base error rendered by the HTTP layer as {"error": ..., "details": ...}.
    """

    def __init__(
        self,
        message: str,
        code: int = 500,
        payload: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.payload = payload or {}
        super().__init__(self.message)


class UpstreamError(ServiceError):
    """
    The Overpass interpreter was unreachable, failed, or answered with garbage.
    """

    def __init__(self, message: str, original_error: str = ""):
        super().__init__(
            message=message,
            code=500,
            payload={"original_error": str(original_error)},
        )
