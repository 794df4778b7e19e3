"""HTTP-level tests for article content negotiation and CRUD."""

import re
from datetime import datetime

import pytest

from slycms.application.interfaces import MarkdownRenderer
from slycms.application.services import ArticleService
from slycms.infrastructure.database.repositories import SQLAlchemyArticleRepository
from slycms.infrastructure.dependencies import get_article_service
from slycms.infrastructure.rendering.markdown_renderer import MarkdownItRenderer

URL_PATTERN = re.compile(r"^/articles/(\d{14})\.html$")


async def _post(client, body: str) -> dict:
    response = await client.post("/articles/", content=body.encode("utf-8"))
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_post_creates_article(client):
    response = await client.post("/articles/", content=b"# Hello\nworld")

    assert response.status_code == 201
    data = response.json()
    assert data["Title"] == "Hello"
    assert data["Contents"] == "# Hello\nworld"
    match = URL_PATTERN.match(data["URL"])
    assert match is not None
    created_at = datetime.fromisoformat(data["CreatedAt"].replace("Z", "+00:00"))
    assert created_at.tzinfo is not None
    assert created_at.strftime("%Y%m%d%H%M%S") == match.group(1)


@pytest.mark.asyncio
async def test_get_unknown_key_is_404(client):
    response = await client.get("/articles/20170821010101.html")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_name_without_dot_is_generic_error(client):
    response = await client.get("/articles/badname")
    assert response.status_code == 500
    assert response.text == "Sorry."


@pytest.mark.asyncio
async def test_get_html_renders_page(client):
    created = await _post(client, "# Hello\nworld")
    response = await client.get(created["URL"])
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h1>Hello</h1>" in response.text
    assert "<p>world</p>" in response.text


@pytest.mark.asyncio
async def test_get_html_with_trailing_slash(client):
    created = await _post(client, "# Slash\n")
    response = await client.get(created["URL"] + "/")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_get_md_returns_raw_markup(client):
    created = await _post(client, "# Hello\nworld")
    response = await client.get(created["URL"].replace(".html", ".md"))
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "# Hello\nworld"


@pytest.mark.asyncio
async def test_get_other_extension_is_404(client):
    created = await _post(client, "# Hello\nworld")
    response = await client.get(created["URL"].replace(".html", ".json"))
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_post_without_newline_is_generic_error(client):
    response = await client.post("/articles/", content=b"single line")
    assert response.status_code == 500
    assert response.text == "Sorry."


@pytest.mark.asyncio
async def test_put_replaces_title_and_contents(client):
    created = await _post(client, "# Before\nold")
    response = await client.put(created["URL"], content=b"# After\nnew")
    assert response.status_code == 200
    data = response.json()
    assert data["Title"] == "After"
    assert data["Contents"] == "# After\nnew"
    assert data["URL"] == created["URL"]
    assert data["CreatedAt"] == created["CreatedAt"]

    raw = await client.get(created["URL"].replace(".html", ".md"))
    assert raw.text == "# After\nnew"


@pytest.mark.asyncio
async def test_put_accepts_any_extension(client):
    created = await _post(client, "# Before\n")
    response = await client.put(created["URL"].replace(".html", ".md"), content=b"# After\n")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_put_unknown_key_is_404(client):
    response = await client.put("/articles/20170821010101.html", content=b"# x\n")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_returns_deleted_record(client):
    created = await _post(client, "# Bye\nnow")
    response = await client.delete(created["URL"])
    assert response.status_code == 200
    assert response.json() == created

    assert (await client.get(created["URL"])).status_code == 404
    assert (await client.delete(created["URL"])).status_code == 404
    assert (await client.put(created["URL"], content=b"# Again\n")).status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["PATCH", "OPTIONS", "HEAD"])
async def test_unsupported_method_is_not_found(client, method):
    response = await client.request(method, "/articles/20170821010101.html")
    assert response.status_code == 404
    if method != "HEAD":
        assert response.text == "404 page not found"


@pytest.mark.asyncio
async def test_same_second_post_is_a_conflict(app, client):
    fixed = datetime(2017, 8, 21, 1, 1, 1)

    async def fixed_clock_service():
        yield ArticleService(SQLAlchemyArticleRepository(app.state.session_factory), clock=lambda: fixed)

    app.dependency_overrides[get_article_service] = fixed_clock_service
    try:
        first = await client.post("/articles/", content=b"# One\n")
        second = await client.post("/articles/", content=b"# Two\n")
    finally:
        app.dependency_overrides.clear()

    assert first.status_code == 201
    assert first.json()["URL"] == "/articles/20170821010101.html"
    assert second.status_code == 409


@pytest.mark.asyncio
async def test_index_lists_articles(client):
    created = await _post(client, "# Listed\nbody")
    for path in ("/", "/index.html"):
        response = await client.get(path)
        assert response.status_code == 200
        assert f'<a href="{created["URL"]}">Listed</a>' in response.text


@pytest.mark.asyncio
async def test_empty_index_renders(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert "<title>test - index</title>" in response.text


class CountingRenderer(MarkdownRenderer):
    def __init__(self) -> None:
        self.calls = 0

    def render(self, markup: str) -> str:
        self.calls += 1
        return "<p>counted</p>"


@pytest.mark.asyncio
async def test_pages_share_the_startup_renderer(app, client):
    assert isinstance(app.state.renderer, MarkdownItRenderer)
    counting = CountingRenderer()
    app.state.renderer = counting

    created = await _post(client, "# Shared\nbody")
    first = await client.get(created["URL"])
    second = await client.get("/")

    assert "<p>counted</p>" in first.text
    assert "<p>counted</p>" in second.text
    assert counting.calls == 2
