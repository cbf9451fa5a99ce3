from fastapi import APIRouter

from . import auth, scripts, sections


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(scripts.router, prefix="/scripts", tags=["scripts"])
    router.include_router(sections.router, prefix="/sections", tags=["sections"])
    return router


__all__ = [
    "create_api_router",
]
