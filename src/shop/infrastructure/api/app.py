"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from shop.infrastructure.api.category_routes import router as category_router
from shop.infrastructure.api.exception_handlers import register_exception_handlers
from shop.infrastructure.api.item_routes import router as item_router
from shop.infrastructure.api.member_routes import router as member_router
from shop.infrastructure.api.order_api_routes import router as order_api_router
from shop.infrastructure.api.order_routes import router as order_router
from shop.infrastructure.api.simple_order_routes import router as simple_order_router
from shop.infrastructure.log_config import configure_logging
from shop.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from shop.infrastructure.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; the schema is created if it does not exist yet."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    engine = build_engine(settings)
    create_schema(engine)

    app = FastAPI(title=settings.api_title)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_exception_handlers(app)
    for router in (
        member_router,
        item_router,
        category_router,
        order_router,
        order_api_router,
        simple_order_router,
    ):
        app.include_router(router)

    logger.info("%s ready on %s", settings.api_title, engine.url.render_as_string(hide_password=True))
    return app
