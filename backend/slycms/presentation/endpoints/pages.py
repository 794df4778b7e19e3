"""Index page — every article as a rendered list."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from slycms.application.services import ArticleService, PageService
from slycms.infrastructure.dependencies import get_article_service, get_page_service

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse)
async def index_page(
    articles: ArticleService = Depends(get_article_service),
    pages: PageService = Depends(get_page_service),
) -> HTMLResponse:
    """Render the article index, oldest article first."""
    return HTMLResponse(pages.index_page(await articles.list_articles()))
