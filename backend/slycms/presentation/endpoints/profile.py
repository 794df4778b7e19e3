"""Profile endpoints — read and overwrite the singleton profile."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from slycms.application.schemas import ProfileResponse
from slycms.application.services import PageService, ProfileService
from slycms.infrastructure.dependencies import get_page_service, get_profile_service
from slycms.presentation.request_body import read_text_body

router = APIRouter(tags=["Profile"])


@router.get("/profile", response_class=HTMLResponse)
@router.get("/profile.html", response_class=HTMLResponse)
async def show_profile(
    service: ProfileService = Depends(get_profile_service),
    pages: PageService = Depends(get_page_service),
) -> HTMLResponse:
    """Render the profile as a page; 404 until the first save."""
    profile = await service.get_profile()
    return HTMLResponse(pages.profile_page(profile))


@router.get("/profile.md", response_class=PlainTextResponse)
async def show_profile_markdown(
    service: ProfileService = Depends(get_profile_service),
) -> PlainTextResponse:
    profile = await service.get_profile()
    return PlainTextResponse(profile.contents)


@router.put("/profile")
async def save_profile(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """Replace the profile with the request body, creating it on first use."""
    profile = await service.save_profile(await read_text_body(request))
    return JSONResponse(content=ProfileResponse.from_entity(profile).model_dump(by_alias=True))
