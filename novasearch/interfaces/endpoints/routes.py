from fastapi import APIRouter

from . import search_routes, status_routes


def create_api_routes() -> APIRouter:
    """Collect every API router"""

    api_router = APIRouter()
    api_router.include_router(status_routes.router)
    api_router.include_router(search_routes.router)

    return api_router


router = create_api_routes()
