"""
Demo seeding tests
"""

import pytest
from sqlalchemy import select, func

from venue_registry.core.seeding import DEMO_VENUES, seed_demo_data
from venue_registry.models import Venue, Tag
from venue_registry.services.venue_service import VenueService


@pytest.mark.asyncio
async def test_seed_demo_data(db_session):
    created = await seed_demo_data(db_session)

    assert created == len(DEMO_VENUES)
    venue_total = await db_session.execute(select(func.count(Venue.id)))
    assert venue_total.scalar_one() == len(DEMO_VENUES)

    # "all-ages" is shared by two venues but stored once
    tag_total = await db_session.execute(select(func.count(Tag.id)))
    assert tag_total.scalar_one() == 5


@pytest.mark.asyncio
async def test_seeded_venue_has_relations(db_session):
    await seed_demo_data(db_session)
    result = await db_session.execute(select(Venue.id).where(Venue.name == "Basement Club"))
    venue_id = result.scalar_one()

    venue = await VenueService(db_session).get_venue(venue_id)

    assert len(venue.contacts) == 1
    assert len(venue.bookings) == 1
    assert len(venue.ratings) == 1
    assert sorted(tag.name for tag in venue.tags) == ["21+", "club"]
