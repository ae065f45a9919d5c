"""
Main API Router
Aggregates all API endpoints for v1
"""

from fastapi import APIRouter
from venue_registry.api.v1.endpoints import venues, health

api_router = APIRouter()

api_router.include_router(venues.router, prefix="/venues", tags=["Venues"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])
