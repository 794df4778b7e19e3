"""Error boundary — maps domain exceptions onto uniform HTTP responses.

Every failure is logged exactly once here. Clients never see exception
details: a missing resource or an unknown method is a plain 404, a
duplicate key a 409, and anything else the generic error page.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from slycms.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    SlyError,
    UnsupportedMethodError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "404 page not found"
CONFLICT_BODY = "Conflict."
ERROR_BODY = "Sorry."


async def _not_found(request: Request, exc: Exception) -> PlainTextResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)


async def _conflict(request: Request, exc: Exception) -> PlainTextResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(CONFLICT_BODY, status_code=status.HTTP_409_CONFLICT)


async def _error_page(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette resolves handlers along the exception's MRO, so the
    # SlyError entry only catches what the specific ones do not.
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(DuplicateEntityError, _conflict)
    app.add_exception_handler(UnsupportedMethodError, _not_found)
    app.add_exception_handler(SlyError, _error_page)
