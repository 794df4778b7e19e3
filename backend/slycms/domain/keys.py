"""Article keys — the 14-digit creation stamp that identifies an article.

The key is the article's creation instant rendered as ``YYYYMMDDHHMMSS`` in
whatever zone the timestamp carries (the process-local zone for
``datetime.now()``). No zone conversion happens in either direction, and
sub-second precision is discarded: two articles created within the same
second share a key.
"""

import re
from datetime import datetime

from slycms.domain.exceptions import InvalidKeyError

KEY_LAYOUT = "%Y%m%d%H%M%S"
KEY_LENGTH = 14

_KEY_PATTERN = re.compile(r"[0-9]{14}")


def encode(timestamp: datetime) -> str:
    """Render ``timestamp`` as its fixed-width article key."""
    return f"{timestamp.year:04d}{timestamp.strftime('%m%d%H%M%S')}"


def decode(key: str) -> datetime:
    """Parse an article key back into a naive datetime.

    Raises:
        InvalidKeyError: if ``key`` is not exactly 14 digits forming a
            valid calendar date and time.
    """
    if not _KEY_PATTERN.fullmatch(key):
        raise InvalidKeyError(key)
    try:
        parsed = datetime.strptime(key, KEY_LAYOUT)
    except ValueError as exc:
        raise InvalidKeyError(key) from exc
    if encode(parsed) != key:
        raise InvalidKeyError(key)
    return parsed


def article_url(key: str) -> str:
    return f"/articles/{key}.html"
