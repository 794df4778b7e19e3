"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from slycms.config import Settings
from slycms.infrastructure.database import build_engine, build_session_factory, init_schema
from slycms.infrastructure.rendering.markdown_renderer import MarkdownItRenderer
from slycms.infrastructure.rendering.templates import PageTemplates
from slycms.presentation.errors import register_exception_handlers
from slycms.presentation.router import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — ensure the schema exists, dispose the engine on exit."""
    settings: Settings = app.state.settings
    await init_schema(app.state.engine)
    logger.info(
        "Serving site '%s' from %s (static root: %s)",
        settings.site_name,
        settings.database_path,
        settings.static_root,
    )

    yield

    # Shutdown
    await app.state.engine.dispose()


def create_app(settings: Settings) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Templates are compiled here, so a broken custom layout fails startup
    with TemplateLoadError instead of failing every request later.
    """
    templates = PageTemplates.load(settings.template_file)
    engine = build_engine(settings)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.templates = templates
    app.state.renderer = MarkdownItRenderer()
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_exception_handlers(app)
    app.include_router(router)

    return app
