from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.i18n import split
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import get_settings
from server.lifespan import lifespan

logger = get_module_logger()


async def request_context_middleware(request: Request, call_next):
    """Bind correlation ID, path and path locale to every log of a request."""
    with bind_request_context(
        correlation_id=request.headers.get("X-Correlation-ID"),
        request_path=request.url.path,
        request_method=request.method,
        path_locale=split(request.url.path).locale.value,
    ):
        response = await call_next(request)
        return response


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()

    app = FastAPI(lifespan=lifespan)
    setup_rate_limiter(app)

    allow_origins = ["*"] if settings.is_production else settings.server.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)

    app.include_router(api_router)
    return app


handler = create_app()
