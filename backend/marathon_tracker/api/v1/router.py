"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from marathon_tracker.api.v1.routes import course, runners

api_router = APIRouter()

api_router.include_router(runners.router, prefix="/runners", tags=["Runners"])
api_router.include_router(course.router, prefix="/course", tags=["Course"])
