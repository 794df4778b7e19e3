"""Per-category log levels, applied once at startup by the CLI."""

import logging
import sys

from slycms.config import Settings

# Settings field → loggers whose level it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "aiosqlite"),
    "log_level_uvicorn": ("uvicorn",),
    "log_level_http": ("slycms.presentation",),
}


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; -init and tests run without them
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)

    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)


def _parse_level(raw: str) -> int:
    """Map a level name onto its logging constant; unknown names mean INFO."""
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO
