"""
Database models
"""

from venue_registry.models.venue import Venue, venue_tags, AMENITY_FLAGS, CAPACITY_MAX
from venue_registry.models.contact import Contact
from venue_registry.models.booking import Booking, BookingStatus
from venue_registry.models.rating import Rating
from venue_registry.models.tag import Tag

__all__ = [
    "Venue",
    "venue_tags",
    "AMENITY_FLAGS",
    "CAPACITY_MAX",
    "Contact",
    "Booking",
    "BookingStatus",
    "Rating",
    "Tag"
]
