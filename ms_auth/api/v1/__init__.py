"""API v1 routes."""

from fastapi import APIRouter

from ms_auth.api.v1 import auth, health

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
