"""
Tag model
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from venue_registry.models.base import BaseModel
from venue_registry.models.venue import venue_tags


class Tag(BaseModel):
    """
    Free-form label shared between venues
    """
    __tablename__ = "tags"

    name = Column(String(50), unique=True, nullable=False, index=True)

    venues = relationship("Venue", secondary=venue_tags, back_populates="tags")

    def __repr__(self):
        return f"<Tag(id={self.id}, name={self.name})>"
