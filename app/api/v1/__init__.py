"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import users
from app.core.config import settings

router = APIRouter()
router.include_router(users.router, prefix=settings.API_PREFIX, tags=["users"])
