"""
Venue resource service
Listing, relation assembly and create/update/delete for venues
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from venue_registry.core.exceptions import NotFoundError, StorageError, ValidationError
from venue_registry.models.base import utcnow
from venue_registry.models.booking import Booking
from venue_registry.models.contact import Contact
from venue_registry.models.rating import Rating
from venue_registry.models.venue import AMENITY_FLAGS, CAPACITY_MAX, Venue, venue_tags
from venue_registry.services.venue_query import (
    SortOrder,
    VenueCountQuery,
    VenueQuery,
    compile_predicates,
)

logger = logging.getLogger(__name__)

# Server-assigned columns, never accepted from callers
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})

WRITABLE_FIELDS = frozenset({
    "name",
    "address",
    "city",
    "state",
    "country",
    "zip_code",
    "capacity",
    "website",
    "phone",
    "email",
    "description",
    "amenities",
    "load_in_info",
    "parking_info",
})


@dataclass
class VenuePage:
    """One page of venues plus the total matching count"""
    items: List[Venue] = field(default_factory=list)
    count: int = 0
    page: int = 1
    limit: int = 20

    @property
    def total_pages(self) -> int:
        return math.ceil(self.count / self.limit) if self.count else 0


class VenueService:
    """
    Venue operations bound to a single database session
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_venues(self, query: VenueQuery) -> VenuePage:
        """
        Fetch one page of venues and the total number of matches
        """
        sort_column = getattr(Venue, query.sort_by)
        ordering = sort_column.desc() if query.sort_order is SortOrder.DESC else sort_column.asc()

        stmt = (
            select(Venue)
            .where(*compile_predicates(query.predicates))
            .order_by(ordering, Venue.id.asc())
            .offset(query.offset)
            .limit(query.limit)
        )
        result = await self.session.execute(stmt)
        venues = list(result.scalars().all())

        count = await self.count_venues(query.count_query())

        return VenuePage(items=venues, count=count, page=query.page, limit=query.limit)

    async def count_venues(self, query: VenueCountQuery) -> int:
        stmt = select(func.count(Venue.id)).where(*compile_predicates(query.predicates))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_venue(self, venue_id: str) -> Venue:
        """
        Fetch a venue with its contacts, bookings, ratings and tags
        """
        stmt = (
            select(Venue)
            .options(
                selectinload(Venue.contacts),
                selectinload(Venue.bookings),
                selectinload(Venue.ratings),
                selectinload(Venue.tags)
            )
            .where(Venue.id == venue_id)
            .execution_options(populate_existing=True)
        )

        result = await self.session.execute(stmt)
        venue = result.scalar_one_or_none()

        if not venue:
            raise NotFoundError("Venue", venue_id)

        return venue

    async def create_venue(self, data: Dict[str, Any]) -> Venue:
        """
        Validate and persist a new venue
        """
        values = self._validate(data, creating=True)

        now = utcnow()
        venue = Venue(**values, created_at=now, updated_at=now)

        try:
            self.session.add(venue)
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Venue create failed: {exc}", exc_info=exc)
            raise StorageError() from exc
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(venue)
        logger.info(f"Venue created: {venue.id} ({venue.name})")
        return venue

    async def update_venue(self, venue_id: str, data: Dict[str, Any]) -> Venue:
        """
        Apply a partial patch; fields absent from data keep their stored value
        """
        values = self._validate(data, creating=False)

        try:
            venue = await self._get_for_update(venue_id)

            for key, value in values.items():
                setattr(venue, key, value)
            venue.updated_at = utcnow()

            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Venue update failed for {venue_id}: {exc}", exc_info=exc)
            raise StorageError() from exc
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(venue)
        logger.info(f"Venue updated: {venue.id} fields={sorted(values)}")
        return venue

    async def delete_venue(self, venue_id: str) -> None:
        """
        Delete a venue together with its contacts, bookings, ratings and tag links
        """
        try:
            await self._get_for_update(venue_id)

            for model in (Contact, Booking, Rating):
                await self.session.execute(
                    delete(model).where(model.venue_id == venue_id)
                )
            await self.session.execute(
                delete(venue_tags).where(venue_tags.c.venue_id == venue_id)
            )
            await self.session.execute(
                delete(Venue).where(Venue.id == venue_id)
            )

            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Venue delete failed for {venue_id}: {exc}", exc_info=exc)
            raise StorageError() from exc
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Venue deleted: {venue_id}")

    async def _get_for_update(self, venue_id: str) -> Venue:
        # Row lock keeps a concurrent delete out until this transaction ends
        stmt = (
            select(Venue)
            .where(Venue.id == venue_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        venue = result.scalar_one_or_none()

        if not venue:
            raise NotFoundError("Venue", venue_id)

        return venue

    @staticmethod
    def _validate(data: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        for key in data:
            if key in IMMUTABLE_FIELDS:
                raise ValidationError(f"{key} cannot be set by clients", field=key)
            if key not in WRITABLE_FIELDS:
                raise ValidationError(f"Unknown venue field: {key}", field=key)

        name: Optional[str] = data.get("name")
        if creating or "name" in data:
            if name is None or not str(name).strip():
                raise ValidationError("Venue name is required", field="name")

        capacity = data.get("capacity")
        if capacity is not None and (
            isinstance(capacity, bool) or not isinstance(capacity, int) or not 0 <= capacity <= CAPACITY_MAX
        ):
            raise ValidationError(f"capacity must be an integer between 0 and {CAPACITY_MAX}", field="capacity")

        amenities = data.get("amenities")
        if amenities is not None:
            if not isinstance(amenities, dict):
                raise ValidationError("amenities must map flag names to true or false", field="amenities")
            for flag, enabled in amenities.items():
                if flag not in AMENITY_FLAGS:
                    raise ValidationError(f"Unknown amenity: {flag}", field=f"amenities.{flag}")
                if not isinstance(enabled, bool):
                    raise ValidationError(f"Amenity {flag} must be true or false", field=f"amenities.{flag}")

        return dict(data)
