"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from bodymap.api import health, locate, regions, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(regions.router)
api_router.include_router(locate.router)
api_router.include_router(render.router)
