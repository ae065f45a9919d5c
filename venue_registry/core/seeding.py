"""
Demo data seeding for empty databases
"""
from datetime import timedelta
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from venue_registry.core.database import async_session
from venue_registry.models.base import utcnow
from venue_registry.models.booking import Booking, BookingStatus
from venue_registry.models.contact import Contact
from venue_registry.models.rating import Rating
from venue_registry.models.tag import Tag
from venue_registry.models.venue import Venue

logger = logging.getLogger(__name__)

DEMO_VENUES = [
    {
        "name": "The Grand Hall",
        "address": "12 Harbour Road",
        "city": "Portland",
        "state": "OR",
        "country": "USA",
        "zip_code": "97201",
        "capacity": 500,
        "email": "bookings@grandhall.com",
        "description": "Restored 1920s ballroom with a sprung floor",
        "amenities": {"parking": True, "sound_system": True, "bar": True, "accessible": True},
        "load_in_info": "Dock on the east side, 2 hour load-in window",
        "tags": ["ballroom", "all-ages"],
    },
    {
        "name": "Basement Club",
        "address": "77 Mill Street",
        "city": "Chicago",
        "state": "IL",
        "country": "USA",
        "capacity": 150,
        "description": "Intimate club room below a record store",
        "amenities": {"sound_system": True, "in_house_engineer": True, "bar": True},
        "tags": ["club", "21+"],
    },
    {
        "name": "Riverside Amphitheater",
        "city": "Austin",
        "state": "TX",
        "country": "USA",
        "capacity": 4000,
        "amenities": {"parking": True, "stage_lighting": True, "food_service": True, "merchandise_space": True},
        "parking_info": "Lots A and B open two hours before doors",
        "tags": ["outdoor", "all-ages"],
    },
]


async def seed_demo_data(session: AsyncSession) -> int:
    """Insert the demo venues and their related rows; returns venues created"""
    tags = {}
    now = utcnow()

    for spec in DEMO_VENUES:
        values = {key: value for key, value in spec.items() if key != "tags"}
        venue = Venue(**values, created_at=now, updated_at=now)

        for tag_name in spec["tags"]:
            if tag_name not in tags:
                tags[tag_name] = Tag(name=tag_name)
            venue.tags.append(tags[tag_name])

        venue.contacts.append(Contact(first_name="Alex", last_name="Rivera", title="Talent Buyer", is_primary=True))
        venue.bookings.append(Booking(
            event_name=f"Opening Night at {venue.name}",
            event_date=now + timedelta(days=30),
            status=BookingStatus.CONFIRMED,
            fee=Decimal("1500.00")
        ))
        venue.ratings.append(Rating(overall_rating=4, title="Great sound", comments="Helpful staff"))

        session.add(venue)

    await session.commit()
    return len(DEMO_VENUES)


async def seed_if_empty():
    """Seed demo venues only if the venues table is empty"""
    async with async_session() as session:
        result = await session.execute(select(Venue.id).limit(1))
        if result.scalar_one_or_none():
            logger.info("Database already contains venues, skipping seeding")
            return

        logger.info("Empty database detected, seeding demo venues")
        try:
            created = await seed_demo_data(session)
        except Exception as e:
            await session.rollback()
            logger.error(f"Seeding failed: {e}")
            raise

        logger.info(f"Seeded {created} demo venues")
