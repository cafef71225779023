"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from admissions.api.v1.dependencies.
"""

from fastapi import APIRouter

from admissions.api.v1.endpoints import flow, health, steps, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(flow.router, prefix="/flow", tags=["flow"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(steps.router, prefix="/steps", tags=["steps"])
