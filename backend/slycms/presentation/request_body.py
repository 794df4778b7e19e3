from fastapi import Request

from slycms.domain.exceptions import MalformedInputError


async def read_text_body(request: Request) -> str:
    """Return the raw request body as UTF-8 text."""
    raw = await request.body()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"request body is not valid UTF-8: {exc}") from exc
