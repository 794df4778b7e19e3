"""Static file gateway — confined read/write under a single root directory.

Every requested path goes through the same sanitization before it touches
the filesystem:

    1. strip a leading ``/static/`` prefix
    2. canonicalize against a virtual ``/`` so ``.`` and ``..`` collapse
       and can never climb above it
    3. join the result onto the configured static root

Canonicalizing *before* joining is what keeps ``..`` segments inside the
root: ``/static/../../etc/passwd`` resolves to ``<root>/etc/passwd``.
"""

import logging
import mimetypes
import posixpath
from dataclasses import dataclass
from pathlib import Path

from slycms.domain.exceptions import EntityNotFoundError, MalformedPathError, StorageError

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/static/"


@dataclass
class StoredFile:
    """Result of writing a static file to disk."""

    path: Path
    url: str
    size: int
    created: bool


@dataclass
class StaticFile:
    """A static file resolved for reading."""

    path: Path
    mime_type: str


def canonicalize(requested: str) -> str:
    """Return ``requested`` as a clean relative path with no ``..`` left.

    The prefix is removed first, then the path is normalized as if it were
    absolute, so leading ``..`` segments are dropped rather than followed.
    """
    relative = requested.replace("\\", "/")
    if relative.startswith(STATIC_PREFIX):
        relative = relative[len(STATIC_PREFIX):]
    cleaned = posixpath.normpath("/" + relative)
    return cleaned.lstrip("/")


class StaticFileGateway:
    """Infrastructure adapter for files served from and written to the static root."""

    def __init__(self, root: str):
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, requested: str) -> Path:
        """Map a request path onto a file path inside the static root.

        Raises:
            MalformedPathError: if nothing is left after sanitization, i.e.
                the request addresses the root directory itself.
        """
        relative = canonicalize(requested)
        if not relative:
            raise MalformedPathError(requested, "no file name after sanitization")
        resolved = self._root.joinpath(*relative.split("/"))
        try:
            target = resolved.resolve()
        except (ValueError, OSError, RuntimeError) as exc:
            # Embedded NUL bytes, over-long names, symlink loops
            raise MalformedPathError(requested, f"unusable file name ({exc})") from exc
        # Symlinks inside the root may still point elsewhere
        if not target.is_relative_to(self._root):
            raise MalformedPathError(requested, "resolves outside the static root")
        return resolved

    # ── Read ────────────────────────────────────────────────────────

    async def read(self, requested: str) -> StaticFile:
        """Locate a file for serving. Raises EntityNotFoundError if missing."""
        path = self.resolve(requested)
        if not path.is_file():
            raise EntityNotFoundError("StaticFile", requested)
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return StaticFile(path=path, mime_type=mime_type)

    # ── Write ───────────────────────────────────────────────────────

    async def write(self, requested: str, content: bytes) -> StoredFile:
        """Create or overwrite a file below the root with ``content``.

        Parent directories are created as needed. The write is not atomic:
        a concurrent reader may observe a partially written file.
        """
        path = self.resolve(requested)
        if path.is_dir():
            raise MalformedPathError(requested, "is a directory")

        created = not path.exists()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise StorageError("static file write", exc) from exc

        relative = path.relative_to(self._root).as_posix()
        logger.info("Stored static file: %s (%d bytes)", path, len(content))

        return StoredFile(
            path=path,
            url=STATIC_PREFIX + relative,
            size=len(content),
            created=created,
        )
