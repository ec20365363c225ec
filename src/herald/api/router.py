"""Master API router mounted at /api/v1."""

from fastapi import APIRouter
from herald.api.routes import health, webhooks

API_PREFIX = "/api/v1"

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(webhooks.router)
