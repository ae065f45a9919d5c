"""
Venue model
"""

from sqlalchemy import Column, String, Integer, Text, JSON, Table, ForeignKey, CheckConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from venue_registry.core.database import Base
from venue_registry.models.base import BaseModel

AMENITY_FLAGS = (
    "parking",
    "sound_system",
    "in_house_engineer",
    "stage_lighting",
    "dressing_room",
    "bar",
    "food_service",
    "accessible",
    "wifi",
    "merchandise_space",
)

# Largest value the 32-bit capacity column holds
CAPACITY_MAX = 2_147_483_647

# Many-to-many link between venues and tags
venue_tags = Table(
    "venue_tags",
    Base.metadata,
    Column("venue_id", String(36), ForeignKey("venues.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", String(36), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Venue(BaseModel):
    """
    Venue model for event locations
    """
    __tablename__ = "venues"
    __table_args__ = (
        CheckConstraint("capacity IS NULL OR capacity >= 0", name="ck_venues_capacity_non_negative"),
    )

    name = Column(String(255), nullable=False, index=True)
    address = Column(String(255))
    city = Column(String(100), index=True)
    state = Column(String(100))
    country = Column(String(100))
    zip_code = Column(String(20))
    capacity = Column(Integer)
    website = Column(String(255))
    phone = Column(String(20))
    email = Column(String(255))
    description = Column(Text)
    amenities = Column(JSON().with_variant(JSONB(), "postgresql"))
    load_in_info = Column(Text)
    parking_info = Column(Text)

    # Relationships; rows are removed by the venue service or ON DELETE CASCADE
    contacts = relationship("Contact", back_populates="venue", passive_deletes=True, order_by="Contact.created_at")
    bookings = relationship("Booking", back_populates="venue", passive_deletes=True, order_by="Booking.event_date")
    ratings = relationship("Rating", back_populates="venue", passive_deletes=True, order_by="Rating.created_at")
    tags = relationship("Tag", secondary=venue_tags, back_populates="venues", passive_deletes=True, order_by="Tag.name")

    def __repr__(self):
        return f"<Venue(id={self.id}, name={self.name}, city={self.city}, capacity={self.capacity})>"
