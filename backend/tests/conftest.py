"""Shared fixtures: per-test settings, a schema-initialized app and an HTTP client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from slycms.config import Settings
from slycms.infrastructure.database import init_schema
from slycms.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        site_name="test",
        database_path=str(tmp_path / "sly.db"),
        static_root=str(tmp_path / "static"),
    )


@pytest_asyncio.fixture
async def app(settings: Settings):
    application = create_app(settings)
    # ASGITransport does not run the lifespan, so create the tables here
    await init_schema(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
