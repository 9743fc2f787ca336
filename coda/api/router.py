"""Master API router: mounts every endpoint router under /api."""

from __future__ import annotations

from fastapi import APIRouter

from coda.api import documents, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(documents.router)
