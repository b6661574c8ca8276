from contextlib import asynccontextmanager

from fastapi import FastAPI

from greenlight.api.health import router as health_router
from greenlight.api.movies import router as movies_router
from greenlight.core.container import AppContainer
from greenlight.core.logging import configure_logging
from greenlight.core.responder import register_error_handlers
from greenlight.core.settings import VERSION, Settings, get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AppContainer = app.state.container
    configure_logging(container.settings.log_level)
    container.logger.info(
        "starting server",
        extra={"environment": container.settings.environment, "port": container.settings.port},
    )
    yield
    container.logger.info("server stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.container = AppContainer(settings)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(movies_router)
    return app
