"""Article endpoints — a single portal handing every request to the ContentRouter."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from slycms.application.services import ArticleService, PageService
from slycms.infrastructure.dependencies import get_article_service, get_page_service
from slycms.presentation.content_router import ContentRouter
from slycms.presentation.request_body import read_text_body

router = APIRouter(prefix="/articles", tags=["Articles"])

# Starlette would answer unlisted methods itself; the ContentRouter decides instead.
PORTAL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "TRACE"]


@router.api_route("/{resource_path:path}", methods=PORTAL_METHODS)
async def articles_portal(
    request: Request,
    resource_path: str,
    articles: ArticleService = Depends(get_article_service),
    pages: PageService = Depends(get_page_service),
) -> Response:
    """Serve, create, replace or delete an article, by method and extension."""
    body = await read_text_body(request) if request.method in ("POST", "PUT") else ""
    content_router = ContentRouter(articles, pages)
    return await content_router.dispatch(request.method, f"/articles/{resource_path}", body)
