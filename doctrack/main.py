"""ASGI entry point: ``uvicorn doctrack.main:app``.

Only assembles the app. Employee, document type and document behaviour
lives in ``doctrack.application``; HTTP error mapping lives in
``doctrack.core.exception_handlers``.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from doctrack.api.v1 import api_router
from doctrack.core.config import get_settings
from doctrack.core.exception_handlers import register_exception_handlers
from doctrack.core.lifespan import create_lifespan
from doctrack.core.limiter import limiter
from doctrack.middleware import RequestIDMiddleware

API_PREFIX = "/api/v1"


def _origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app() -> FastAPI:
    """Build the application from the current settings.

    Settings are read here rather than at import so tests can adjust the
    environment first.
    """
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(application)

    # Added last runs first: the request id exists before CORS sees the request.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_origins(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    application.include_router(api_router, prefix=API_PREFIX)
    return application


app = create_app()
