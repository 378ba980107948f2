"""FastAPI application for the travel catalog REST API.

This package provides REST endpoints for:
- Health checks
- Catalog browsing (accommodations, packages, excursions)
- Mock payment verification/processing
- Mock SGR seat availability

Every response body is the APIResponse envelope
(``{success, data | error, timestamp}``), including framework errors.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from travel_api import __version__
from travel_api.exceptions import register_exception_handlers
from travel_api.middleware.correlation import CorrelationIdMiddleware
from travel_api.routes.accommodation import router as accommodation_router
from travel_api.routes.excursions import router as excursions_router
from travel_api.routes.health import router as health_router
from travel_api.routes.packages import router as packages_router
from travel_api.routes.payments import router as payments_router
from travel_api.routes.sgr import router as sgr_router
from travel_api.routes.transport import router as transport_router
from travel_api.settings import ApiSettings, get_settings
from travel_shared.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration to use. Defaults to the environment.

    Returns:
        Configured FastAPI app with all routers under ``settings.api_prefix``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Travel Catalog API",
        description=(
            "REST API for accommodations, packages, excursions, transport search, "
            "payments and SGR availability"
        ),
        version=__version__,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    # Register exception handlers for consistent error envelopes
    register_exception_handlers(app)

    for router in (
        health_router,
        accommodation_router,
        packages_router,
        excursions_router,
        payments_router,
        sgr_router,
        transport_router,
    ):
        app.include_router(router, prefix=settings.api_prefix)

    logger.info(
        f"Travel Catalog API {__version__} configured "
        f"(environment={settings.environment}, prefix={settings.api_prefix or '/'})"
    )
    return app


app = create_app()

# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "travel_api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["backend/api/src", "backend/shared/src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
