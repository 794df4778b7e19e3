"""FastAPI dependency injection — wires infrastructure to application layer.

Everything here reads from ``app.state``, populated once by ``create_app``.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from slycms.config import Settings
from slycms.application.interfaces import MarkdownRenderer
from slycms.application.services import ArticleService, PageService, ProfileService
from slycms.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyProfileRepository,
)
from slycms.infrastructure.rendering.templates import PageTemplates
from slycms.infrastructure.storage.static_file_gateway import StaticFileGateway


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


def get_page_templates(request: Request) -> PageTemplates:
    return request.app.state.templates


def get_markdown_renderer(request: Request) -> MarkdownRenderer:
    return request.app.state.renderer


async def get_article_service(
    settings: Settings = Depends(get_settings),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session_factory)
    yield ArticleService(
        repository,
        max_title_bytes=settings.max_title_bytes,
        max_contents_bytes=settings.max_contents_bytes,
    )


async def get_profile_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[ProfileService, None]:
    """Provides a ProfileService instance with its repository wired up."""
    yield ProfileService(SQLAlchemyProfileRepository(session_factory))


async def get_page_service(
    settings: Settings = Depends(get_settings),
    templates: PageTemplates = Depends(get_page_templates),
    renderer: MarkdownRenderer = Depends(get_markdown_renderer),
) -> AsyncGenerator[PageService, None]:
    """Provides a PageService bound to the startup-built renderer and templates."""
    yield PageService(
        renderer=renderer,
        templates=templates,
        site_name=settings.site_name,
    )


async def get_static_file_gateway(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[StaticFileGateway, None]:
    yield StaticFileGateway(root=settings.static_root)
