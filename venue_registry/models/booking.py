"""
Venue booking model
"""

from sqlalchemy import Column, String, ForeignKey, Enum, Numeric, DateTime, Text
from sqlalchemy.orm import relationship
import enum

from venue_registry.models.base import BaseModel


class BookingStatus(str, enum.Enum):
    INQUIRY = "inquiry"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Booking(BaseModel):
    """
    A performance or event booked at a venue
    """
    __tablename__ = "bookings"

    venue_id = Column(String(36), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    event_name = Column(String(255))
    event_date = Column(DateTime(timezone=True), index=True)
    status = Column(
        Enum(BookingStatus, values_callable=lambda e: [member.value for member in e]),
        default=BookingStatus.INQUIRY,
        nullable=False
    )
    fee = Column(Numeric(10, 2))
    notes = Column(Text)

    venue = relationship("Venue", back_populates="bookings")

    def __repr__(self):
        return f"<Booking(id={self.id}, venue_id={self.venue_id}, event={self.event_name}, status={self.status})>"
