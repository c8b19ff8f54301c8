"""Pytest configuration and fixtures."""

import os

# Point the app at SQLite before shipregistry builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SHIP_TIMEZONE", "UTC")

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shipregistry.core.database import Base, get_db
from shipregistry.core.dates import to_epoch_millis
from shipregistry.main import app
from shipregistry.models.enums import ShipType
from shipregistry.models.ship import Ship  # noqa: F401  registers the table
from shipregistry.repositories.ship_repository import ShipRepository
from shipregistry.schemas.ship import ShipCreate
from shipregistry.services.ship_service import ShipService


def millis(year: int, month: int = 1, day: int = 1) -> int:
    return to_epoch_millis(datetime(year, month, day))


FLEET = [
    dict(name="Orion III", planet="Mars", ship_type=ShipType.MERCHANT,
         prod_date=datetime(2995, 3, 1), is_used=True, speed=0.82, crew_size=617),
    dict(name="Daedalus", planet="Jupiter", ship_type=ShipType.MILITARY,
         prod_date=datetime(3012, 7, 14), is_used=False, speed=0.94, crew_size=1347),
    dict(name="Eagle Transporter", planet="Earth", ship_type=ShipType.TRANSPORT,
         prod_date=datetime(2989, 1, 20), is_used=True, speed=0.79, crew_size=4527),
    dict(name="F-302", planet="Mercury", ship_type=ShipType.MILITARY,
         prod_date=datetime(3017, 11, 2), is_used=False, speed=0.39, crew_size=20),
    dict(name="Excelsior", planet="Jupiter", ship_type=ShipType.MERCHANT,
         prod_date=datetime(2971, 5, 9), is_used=False, speed=0.64, crew_size=6223),
    dict(name="Nostromo", planet="Mars", ship_type=ShipType.TRANSPORT,
         prod_date=datetime(2900, 8, 30), is_used=True, speed=0.11, crew_size=7),
]


@pytest.fixture
async def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # PostgreSQL LIKE is case-sensitive; make SQLite agree
    @event.listens_for(engine.sync_engine, "connect")
    def _case_sensitive_like(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def service(db_session):
    return ShipService(ShipRepository(db_session))


@pytest.fixture
def make_ship():
    """Factory for a valid ShipCreate; keyword arguments override fields."""
    def _make(**overrides):
        data = dict(
            name="Millennium",
            planet="Earth",
            ship_type=ShipType.TRANSPORT,
            prod_date=datetime(3000, 6, 15),
            is_used=False,
            speed=0.5,
            crew_size=100,
        )
        data.update(overrides)
        return ShipCreate(**data)
    return _make


@pytest.fixture
async def fleet(service):
    """Six stored ships with distinct names."""
    return [await service.save_ship(ShipCreate(**data)) for data in FLEET]


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
