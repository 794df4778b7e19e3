"""Static file gateway endpoints."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import FileResponse, JSONResponse

from slycms.application.schemas import StaticFileResponse
from slycms.infrastructure.dependencies import get_static_file_gateway
from slycms.infrastructure.storage.static_file_gateway import STATIC_PREFIX, StaticFileGateway

router = APIRouter(prefix="/static", tags=["Static"])


@router.get("/{file_path:path}")
async def read_static_file(
    file_path: str,
    gateway: StaticFileGateway = Depends(get_static_file_gateway),
) -> FileResponse:
    """Serve a file from the static root."""
    static_file = await gateway.read(STATIC_PREFIX + file_path)
    return FileResponse(path=static_file.path, media_type=static_file.mime_type)


@router.put("/{file_path:path}")
async def write_static_file(
    file_path: str,
    request: Request,
    gateway: StaticFileGateway = Depends(get_static_file_gateway),
) -> JSONResponse:
    """Create or overwrite a file under the static root with the request body."""
    stored = await gateway.write(STATIC_PREFIX + file_path, await request.body())
    body = StaticFileResponse(path=stored.url, size=stored.size).model_dump(by_alias=True)
    status_code = status.HTTP_201_CREATED if stored.created else status.HTTP_200_OK
    return JSONResponse(content=body, status_code=status_code)
