"""Title extraction from raw markdown documents."""

from slycms.domain.exceptions import MalformedInputError

MAX_TITLE_BYTES = 50
HEADING_MARKER = "# "


def extract_title(text: str, max_bytes: int = MAX_TITLE_BYTES) -> str:
    """Derive a display title from the first line of ``text``.

    The first line must be terminated by ``\\n``; a document without any
    newline is rejected, single-line documents included. A leading ``"# "``
    heading marker is removed, then any trailing ``\\r``.

    The title is cut to ``max_bytes`` bytes of UTF-8. A multi-byte character
    straddling the limit is dropped whole, so the result may be a few bytes
    shorter than the limit but always decodes cleanly.
    """
    line, newline, _ = text.partition("\n")
    if not newline:
        raise MalformedInputError("document has no line terminator; cannot derive a title")

    line = line.removeprefix(HEADING_MARKER)
    line = line.rstrip("\r")

    encoded = line.encode("utf-8")
    if len(encoded) > max_bytes:
        line = encoded[:max_bytes].decode("utf-8", errors="ignore")
    return line
