"""
Venue contact model
"""

from sqlalchemy import Column, String, ForeignKey, Boolean
from sqlalchemy.orm import relationship

from venue_registry.models.base import BaseModel


class Contact(BaseModel):
    """
    A person reachable at a venue (booker, production manager, ...)
    """
    __tablename__ = "contacts"

    venue_id = Column(String(36), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100))
    title = Column(String(100))
    email = Column(String(255))
    phone = Column(String(20))
    is_primary = Column(Boolean, default=False, nullable=False)

    venue = relationship("Venue", back_populates="contacts")

    def __repr__(self):
        return f"<Contact(id={self.id}, venue_id={self.venue_id}, name={self.first_name} {self.last_name})>"
