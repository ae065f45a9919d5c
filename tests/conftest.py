"""
Test configuration and fixtures
FastAPI + SQLAlchemy async against an in-memory SQLite database
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from decimal import Decimal
from datetime import datetime, timedelta, timezone
import os

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

# Set test environment before the application reads its settings
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"

# Import all models BEFORE creating fixtures so create_all sees every table
from venue_registry.core.database import Base
from venue_registry.models import Venue, Contact, Booking, BookingStatus, Rating, Tag
from venue_registry.core.security import create_access_token


@pytest_asyncio.fixture(scope="function")
async def test_db():
    """Create a fresh in-memory database per test"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests"""
    async_session_maker = async_sessionmaker(
        test_db,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with the session dependency overridden"""
    from venue_registry.main import app
    from venue_registry.core.database import get_session

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Bearer token for an arbitrary authenticated caller"""
    token = create_access_token(data={"sub": "user-123"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def venue_payload():
    return {
        "name": "The Grand Hall",
        "address": "12 Harbour Road",
        "city": "Portland",
        "state": "OR",
        "country": "USA",
        "zip_code": "97201",
        "capacity": 500,
        "website": "https://grandhall.com",
        "phone": "+15035550100",
        "email": "bookings@grandhall.com",
        "description": "Restored ballroom",
        "amenities": {"parking": True, "bar": True, "wifi": False},
        "load_in_info": "East dock",
        "parking_info": "Street parking only"
    }


async def create_venues(db_session, rows):
    """Helper inserting venues directly, bypassing the API"""
    now = datetime.now(timezone.utc)
    venues = []
    for row in rows:
        venue = Venue(created_at=now, updated_at=now, **row)
        venues.append(venue)
        db_session.add(venue)

    await db_session.commit()
    for venue in venues:
        await db_session.refresh(venue)
    return venues


@pytest_asyncio.fixture
async def multiple_venues(db_session):
    """Create a spread of venues for filter and sort tests"""
    return await create_venues(db_session, [
        {"name": "The Grand Hall", "city": "Portland", "state": "OR", "country": "USA", "capacity": 500},
        {"name": "Hall of Mirrors", "city": "Paris", "country": "France", "capacity": 800},
        {"name": "Basement Club", "city": "Chicago", "state": "IL", "country": "USA", "capacity": 150},
        {"name": "Riverside Amphitheater", "city": "Austin", "state": "TX", "country": "USA", "capacity": 4000},
        {"name": "Small Hall", "city": "portland", "state": "ME", "country": "USA", "capacity": 90},
    ])


@pytest_asyncio.fixture
async def venue_with_relations(db_session):
    """Venue with one contact, booking, rating pair and two tags"""
    now = datetime.now(timezone.utc)
    venue = Venue(
        name="Crystal Ballroom",
        city="Portland",
        capacity=1500,
        created_at=now,
        updated_at=now,
        contacts=[Contact(first_name="Alex", last_name="Rivera", title="Talent Buyer", is_primary=True)],
        bookings=[Booking(
            event_name="Spring Showcase",
            event_date=now + timedelta(days=14),
            status=BookingStatus.CONFIRMED,
            fee=Decimal("2500.00")
        )],
        ratings=[
            Rating(overall_rating=5, title="Great room"),
            Rating(overall_rating=4, comments="Loud but fun"),
        ],
        tags=[Tag(name="ballroom"), Tag(name="all-ages")],
    )
    db_session.add(venue)
    await db_session.commit()
    await db_session.refresh(venue)
    return venue
