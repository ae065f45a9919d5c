"""
Venue schemas for request/response models
"""

from typing import Any, Optional, List, Dict
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, computed_field, field_validator

from venue_registry.models.booking import BookingStatus
from venue_registry.models.venue import CAPACITY_MAX
from venue_registry.schemas.base import TimestampSchema, IDSchema


class VenueAmenities(BaseModel):
    model_config = ConfigDict(extra="forbid")

    parking: Optional[bool] = None
    sound_system: Optional[bool] = None
    in_house_engineer: Optional[bool] = None
    stage_lighting: Optional[bool] = None
    dressing_room: Optional[bool] = None
    bar: Optional[bool] = None
    food_service: Optional[bool] = None
    accessible: Optional[bool] = None
    wifi: Optional[bool] = None
    merchandise_space: Optional[bool] = None

    @field_validator("*", mode="before")
    @classmethod
    def flag_is_not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("amenity flags must be true or false")
        return value


class VenueCreate(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "The Grand Hall",
                "address": "12 Harbour Road",
                "city": "Portland",
                "state": "OR",
                "country": "USA",
                "zip_code": "97201",
                "capacity": 500,
                "email": "bookings@grandhall.com",
                "amenities": {"parking": True, "bar": True, "wifi": True}
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    capacity: Optional[int] = Field(None, ge=0, le=CAPACITY_MAX)
    website: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    description: Optional[str] = None
    amenities: Optional[VenueAmenities] = None
    load_in_info: Optional[str] = None
    parking_info: Optional[str] = None


class VenueUpdate(BaseModel):
    """Partial update; only fields sent by the client are applied"""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    capacity: Optional[int] = Field(None, ge=0, le=CAPACITY_MAX)
    website: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    description: Optional[str] = None
    amenities: Optional[VenueAmenities] = None
    load_in_info: Optional[str] = None
    parking_info: Optional[str] = None


class VenueResponse(IDSchema, TimestampSchema):
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    capacity: Optional[int] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    description: Optional[str] = None
    amenities: Optional[Dict[str, bool]] = None
    load_in_info: Optional[str] = None
    parking_info: Optional[str] = None


class ContactResponse(IDSchema, TimestampSchema):
    venue_id: str
    first_name: str
    last_name: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_primary: bool = False


class BookingResponse(IDSchema, TimestampSchema):
    venue_id: str
    event_name: Optional[str] = None
    event_date: Optional[datetime] = None
    status: BookingStatus
    fee: Optional[float] = None
    notes: Optional[str] = None


class RatingResponse(IDSchema, TimestampSchema):
    venue_id: str
    overall_rating: int
    title: Optional[str] = None
    comments: Optional[str] = None


class TagResponse(IDSchema):
    name: str


class VenueDetail(VenueResponse):
    contacts: List[ContactResponse] = []
    bookings: List[BookingResponse] = []
    ratings: List[RatingResponse] = []
    tags: List[TagResponse] = []

    @computed_field
    @property
    def rating_count(self) -> int:
        return len(self.ratings)

    @computed_field
    @property
    def average_rating(self) -> Optional[float]:
        if not self.ratings:
            return None
        total = sum(rating.overall_rating for rating in self.ratings)
        return round(total / len(self.ratings), 1)
