import time
import uuid

from fastapi import APIRouter, FastAPI, Request
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware

from harbor.api.deps import HarborServices, build_services
from harbor.api.errors import register_exception_handlers
from harbor.api.routes import harbor, resources, ships
from harbor.core.config import settings
from harbor.core.observability import (
    get_logger,
    set_correlation_id,
    setup_structured_logging,
)

logger = get_logger(__name__)

api_router = APIRouter()
api_router.include_router(resources.router)
api_router.include_router(ships.router)
api_router.include_router(harbor.router)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware for request correlation and timing logs."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time

        response.headers["X-Correlation-ID"] = correlation_id
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_seconds=round(duration, 6),
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


def create_app(services: HarborServices | None = None) -> FastAPI:
    """
    Build the harbor API application.

    Args:
        services: Pre-built services, e.g. for tests. When omitted they are
            built from settings for the configured storage backend.
    """
    setup_structured_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        generate_unique_id_function=custom_generate_unique_id,
    )
    app.state.services = services or build_services()
    app.add_middleware(ObservabilityMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_V1_STR)

    logger.info("application_created", environment=settings.ENVIRONMENT)
    return app
