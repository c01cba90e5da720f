"""
Main API router
"""
from fastapi import APIRouter

from gms.api.v1.endpoints import organizations, locations

api_router = APIRouter()

api_router.include_router(organizations.router, prefix="/organizations", tags=["organizations"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
