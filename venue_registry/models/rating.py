"""
Venue rating model
"""

from sqlalchemy import Column, String, ForeignKey, Integer, Text, CheckConstraint
from sqlalchemy.orm import relationship

from venue_registry.models.base import BaseModel


class Rating(BaseModel):
    """
    A 1-5 rating left for a venue
    """
    __tablename__ = "ratings"
    __table_args__ = (
        CheckConstraint("overall_rating BETWEEN 1 AND 5", name="ck_ratings_overall_range"),
    )

    venue_id = Column(String(36), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    overall_rating = Column(Integer, nullable=False)
    title = Column(String(255))
    comments = Column(Text)

    venue = relationship("Venue", back_populates="ratings")

    def __repr__(self):
        return f"<Rating(id={self.id}, venue_id={self.venue_id}, overall={self.overall_rating})>"
