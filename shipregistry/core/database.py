import logging

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shipregistry.core.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.SQL_ECHO)

# expire_on_commit=False keeps saved ships readable after the repository commits
SessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

Base = declarative_base()


async def get_db():
    """Request-scoped session: committed on success, rolled back on any error."""
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_models():
    """Create the ship table if it is missing."""
    # Importing the model registers it on Base.metadata
    from shipregistry.models.ship import Ship  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"✅ Tables ready: {', '.join(Base.metadata.tables)}")
