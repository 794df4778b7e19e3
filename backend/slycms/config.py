from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Built once at startup (see ``slycms.cli``) and handed to
    ``create_app``; nothing reads settings from module globals.
    """

    app_title: str = "slycms"
    app_version: str = "0.1.0"
    site_name: str = "sly"

    # Storage
    database_path: str = "sly.db"
    static_root: str = "static"

    # Rendering — optional custom layout template replacing the built-in one
    template_file: str | None = None

    # Document limits, in UTF-8 bytes
    max_title_bytes: int = 50
    max_contents_bytes: int = 50_000

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 80

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn and its access/error children
    log_level_http: str = "INFO"             # request handling in slycms.presentation

    model_config = {
        "env_prefix": "SLY_",
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.database_path}"
