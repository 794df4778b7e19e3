"""Top-level router — aggregates every endpoint router at the site root."""

from fastapi import APIRouter

from slycms.presentation.endpoints.articles import router as articles_router
from slycms.presentation.endpoints.pages import router as pages_router
from slycms.presentation.endpoints.profile import router as profile_router
from slycms.presentation.endpoints.static_files import router as static_router

router = APIRouter()
router.include_router(pages_router)
router.include_router(articles_router)
router.include_router(profile_router)
router.include_router(static_router)
