from fastapi import APIRouter

from wasl_links.api.routes import links

api_router = APIRouter()
api_router.include_router(links.router, prefix="", tags=["links"])
