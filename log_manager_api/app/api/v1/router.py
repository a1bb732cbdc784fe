"""
Top-level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.  When a new
domain is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import health, logs, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(logs.router, prefix="/logs", tags=["logs"])
router.include_router(health.router, prefix="/health", tags=["health"])
