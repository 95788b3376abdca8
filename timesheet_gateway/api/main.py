import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from timesheet_gateway import __version__
from timesheet_gateway.api.routers import activities, auth
from timesheet_gateway.api.schemas import HealthStatus
from timesheet_gateway.config import allowed_origins


logger = logging.getLogger(__name__)


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Report errors as {message} like the rest of the API."""
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error in {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


async def health_check() -> HealthStatus:
    """Return health status of the API."""
    return HealthStatus(status="healthy", version=__version__)


def create_app(origins: Optional[list[str]] = None) -> FastAPI:
    app = FastAPI(title="Field Timesheet Gateway", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins is not None else allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Shared /api router
    api = APIRouter(prefix="/api")
    api.add_api_route("/health", health_check, methods=["GET"])
    api.include_router(auth.router)
    api.include_router(activities.router)

    app.include_router(api)
    return app


app = create_app()
