import logging
import time
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request

from tinylink.api import health, shortener
from tinylink.api.errors import register_exception_handlers
from tinylink.core.config import Settings, settings as default_settings
from tinylink.core.logging_config import configure_logging
from tinylink.core.tracing import REQUEST_ID_HEADER, resolve_request_id, route_template
from tinylink.db.registry import Registry
from tinylink.services import metrics
from tinylink.utils.encoding import generate_short_code

logger = logging.getLogger("tinylink")


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[Registry] = None,
    code_generator: Optional[Callable[[], str]] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="In-memory URL Shortener Service",
        version=settings.VERSION,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else Registry()
    app.state.code_generator = code_generator or generate_short_code
    app.state.started_at = time.monotonic()

    register_exception_handlers(app, expose_details=not settings.is_production)

    # fixed routes first so e.g. /health is never treated as a short code
    app.include_router(health.router)
    app.include_router(shortener.router)

    @app.middleware("http")
    async def tracing_middleware(request: Request, call_next):
        request_id = resolve_request_id(request)
        request.state.request_id = request_id
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration = time.perf_counter() - start
            metrics.observe_request(request.method, route_template(request), status_code, duration)
            logger.info(
                "%s %s -> %d in %.1fms request_id=%s",
                request.method, request.url.path, status_code, duration * 1000, request_id,
            )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    return app


app = create_app()


def run():
    logger.info(
        "%s server starting on port %s (environment=%s, health=%s/health, metrics=%s/metrics)",
        default_settings.PROJECT_NAME,
        default_settings.PORT,
        default_settings.ENVIRONMENT,
        default_settings.BASE_URL,
        default_settings.BASE_URL,
    )
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
