# path: osm-feature-extractor/app/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from app.api.routes.features import router as features_router
from app.core.config import settings
from app.core.exceptions import ServiceError, UpstreamError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="OSM Feature Extractor API",
    description="API for extracting features from OpenStreetMap using Overpass API",
    version="1.0.0",
    docs_url="/api-docs",
    openapi_url="/api-docs.json",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


FETCH_ERROR = "An error occurred while fetching features"
MISSING_POLYGON = "Polygon coordinates are required as an array"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        message = "Invalid request"
    elif errors[0].get("type") == "missing" and tuple(errors[0].get("loc", ())) == ("body",):
        # No body at all reads as an empty object, so the polygon check fails first
        message = MISSING_POLYGON
    else:
        message = errors[0]["msg"]
    logger.warning("Rejected %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    logger.error("ServiceError: %s | Payload: %s", exc.message, exc.payload)
    if isinstance(exc, UpstreamError):
        error = FETCH_ERROR
    else:
        error = exc.message
    return JSONResponse(
        status_code=exc.code,
        content={"error": error, "details": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": FETCH_ERROR, "details": str(exc)},
    )


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/api-docs")


app.include_router(features_router)


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on port %d", settings.app_port)
    logger.info("API documentation available at http://localhost:%d/api-docs", settings.app_port)
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, log_level="info")
