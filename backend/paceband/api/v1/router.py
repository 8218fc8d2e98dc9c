"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from paceband.api.v1.routes import splits, export

api_router = APIRouter()

api_router.include_router(splits.router, prefix="/splits", tags=["Splits"])
api_router.include_router(export.router, prefix="/export", tags=["Export"])
