"""Command-line entry point — ``slycms -db sly.db [-init] [-template layout.html]``."""

import asyncio
import logging
from pathlib import Path

import typer
import uvicorn

from slycms.config import Settings
from slycms.domain.exceptions import StorageError
from slycms.infrastructure.database import build_engine, init_schema
from slycms.infrastructure.logging.log_config import setup_logging
from slycms.infrastructure.rendering.templates import TemplateLoadError
from slycms.main import create_app

logger = logging.getLogger(__name__)

app = typer.Typer(name="slycms", help="Minimal markdown content server.", add_completion=False)


async def _initialize(settings: Settings) -> None:
    engine = build_engine(settings)
    try:
        await init_schema(engine)
    finally:
        await engine.dispose()


@app.command()
def serve(
    db: str = typer.Option("sly.db", "-db", "--db", help="SQLite3 DB file path."),
    init: bool = typer.Option(False, "-init", "--init", help="Create the schema and exit."),
    template: Path | None = typer.Option(
        None, "-template", "--template", help="Custom HTML layout template file."
    ),
    host: str | None = typer.Option(None, "--host", help="Listen address."),
    port: int | None = typer.Option(None, "--port", help="Listen port."),
) -> None:
    """Serve the site, or initialize its database with -init."""
    overrides: dict[str, object] = {"database_path": db}
    if template is not None:
        overrides["template_file"] = str(template)
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    settings = Settings(**overrides)
    setup_logging(settings)

    if init:
        try:
            asyncio.run(_initialize(settings))
        except StorageError as exc:
            logger.critical("Schema creation failed: %s", exc)
            raise typer.Exit(code=1)
        logger.info("DB: %s initialized", settings.database_path)
        return

    try:
        application = create_app(settings)
    except TemplateLoadError as exc:
        logger.critical("%s", exc)
        raise typer.Exit(code=1)

    # uvicorn logs and exits non-zero itself when the listener cannot bind
    uvicorn.run(application, host=settings.host, port=settings.port)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
