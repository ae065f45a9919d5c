"""
Pydantic schemas for request and response validation
"""

from venue_registry.schemas.venue import (
    VenueAmenities,
    VenueCreate,
    VenueUpdate,
    VenueResponse,
    VenueDetail,
    ContactResponse,
    BookingResponse,
    RatingResponse,
    TagResponse
)
from venue_registry.schemas.response import (
    SuccessResponse,
    ListResponse,
    MessageResponse,
    ErrorResponse
)

__all__ = [
    "VenueAmenities",
    "VenueCreate",
    "VenueUpdate",
    "VenueResponse",
    "VenueDetail",
    "ContactResponse",
    "BookingResponse",
    "RatingResponse",
    "TagResponse",
    "SuccessResponse",
    "ListResponse",
    "MessageResponse",
    "ErrorResponse"
]
