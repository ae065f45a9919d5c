"""
Venue management endpoints
"""

from typing import Any, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from venue_registry.core.database import get_session
from venue_registry.core.security import get_current_user_id
from venue_registry.schemas.response import ErrorResponse, ListResponse, MessageResponse, SuccessResponse
from venue_registry.schemas.venue import VenueCreate, VenueDetail, VenueResponse, VenueUpdate
from venue_registry.services.venue_query import build_venue_query
from venue_registry.services.venue_service import VenueService

router = APIRouter(
    dependencies=[Depends(get_current_user_id)],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid parameters or body"},
        401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
        404: {"model": ErrorResponse, "description": "Venue not found"},
        500: {"model": ErrorResponse, "description": "Storage or internal failure"},
    }
)


def get_venue_service(db: AsyncSession = Depends(get_session)) -> VenueService:
    return VenueService(db)


@router.get("/", response_model=ListResponse[VenueResponse])
async def list_venues(
    name: Optional[str] = Query(None, description="Case-insensitive partial match on name"),
    city: Optional[str] = Query(None, description="Case-insensitive partial match on city"),
    state: Optional[str] = Query(None, description="Case-insensitive partial match on state"),
    country: Optional[str] = Query(None, description="Case-insensitive partial match on country"),
    capacity_min: Optional[str] = Query(None, description="Minimum capacity (inclusive)"),
    capacity_max: Optional[str] = Query(None, description="Maximum capacity (inclusive)"),
    sort_by: Optional[str] = Query(None, description="Field to sort by, default name"),
    sort_order: Optional[str] = Query(None, description="asc or desc, default asc"),
    page: Optional[str] = Query(None, description="Page number, default 1"),
    limit: Optional[str] = Query(None, description="Results per page, default 20"),
    service: VenueService = Depends(get_venue_service)
) -> Any:
    """
    Get venues with optional filtering, sorting and pagination
    """
    query = build_venue_query({
        "name": name,
        "city": city,
        "state": state,
        "country": country,
        "capacity_min": capacity_min,
        "capacity_max": capacity_max,
        "sort_by": sort_by,
        "sort_order": sort_order,
        "page": page,
        "limit": limit,
    })

    result = await service.list_venues(query)

    return ListResponse[VenueResponse](
        count=result.count,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        data=[VenueResponse.model_validate(venue) for venue in result.items]
    )


@router.get("/{venue_id}", response_model=SuccessResponse[VenueDetail])
async def get_venue(
    venue_id: str,
    service: VenueService = Depends(get_venue_service)
) -> Any:
    """
    Get a venue with its contacts, bookings, ratings and tags
    """
    venue = await service.get_venue(venue_id)
    return SuccessResponse[VenueDetail](data=VenueDetail.model_validate(venue))


@router.post("/", response_model=SuccessResponse[VenueResponse], status_code=status.HTTP_201_CREATED)
async def create_venue(
    payload: VenueCreate,
    service: VenueService = Depends(get_venue_service)
) -> Any:
    """
    Create a new venue
    """
    venue = await service.create_venue(payload.model_dump(exclude_unset=True))
    return SuccessResponse[VenueResponse](data=VenueResponse.model_validate(venue))


@router.put("/{venue_id}", response_model=SuccessResponse[VenueResponse])
@router.patch("/{venue_id}", response_model=SuccessResponse[VenueResponse])
async def update_venue(
    venue_id: str,
    payload: VenueUpdate,
    service: VenueService = Depends(get_venue_service)
) -> Any:
    """
    Partially update a venue; fields left out of the body are unchanged
    """
    venue = await service.update_venue(venue_id, payload.model_dump(exclude_unset=True))
    return SuccessResponse[VenueResponse](data=VenueResponse.model_validate(venue))


@router.delete("/{venue_id}", response_model=MessageResponse)
async def delete_venue(
    venue_id: str,
    service: VenueService = Depends(get_venue_service)
) -> Any:
    """
    Delete a venue along with its contacts, bookings, ratings and tag links
    """
    await service.delete_venue(venue_id)
    return MessageResponse(message=f"Venue with ID {venue_id} deleted successfully")
