# schools_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from schools_api.api.health import router as health_router
from schools_api.api.schools import router as schools_router
from schools_api.config import Settings, get_settings
from schools_api.errors import register_error_handlers
from schools_api.log import setup_logging
from schools_api.middleware import RequestTracingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger = app.state.logger
    logger.info(
        "Server listening on port %s (data file: %s)",
        settings.port,
        settings.data_file_path,
    )
    yield
    logger.info("HTTP server closed")


def create_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logger = logger or setup_logging(settings.log_level)

    app = FastAPI(
        title="Schools API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.logger = logger

    app.add_middleware(RequestTracingMiddleware, logger=logger)
    register_error_handlers(app, logger)

    # /health must be registered before the /{guid} catch-all
    app.include_router(health_router)
    app.include_router(schools_router)

    return app


app = create_app()
