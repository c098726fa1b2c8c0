import logging

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from lingua_relay.api.router import api_router
from lingua_relay.core.config import get_settings
from lingua_relay.core.errors import register_exception_handlers


def _configure_logging(level_name: str) -> None:
    """Ensure application logs propagate with the requested verbosity."""
    level = getattr(logging, level_name.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
    root_logger.setLevel(level)


def create_app() -> FastAPI:
    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version="0.1.0",
    )

    app.state.cors_allow_origin = settings.cors_allow_origin
    register_exception_handlers(app)

    @app.middleware("http")
    async def apply_allow_origin(request: Request, call_next: RequestResponseEndpoint) -> Response:
        # Every reply, errors included, is readable cross-origin.
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", settings.cors_allow_origin)
        return response

    app.include_router(api_router)

    @app.get("/", tags=["health"])
    async def root() -> dict[str, str]:
        return {"service": settings.app_name, "environment": settings.app_env}

    return app
