from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shipregistry.core.database import get_db
from shipregistry.repositories.ship_repository import ShipRepository
from shipregistry.schemas.ship import ShipFilter
from shipregistry.services.ship_service import ShipService


async def get_ship_service(db: AsyncSession = Depends(get_db)) -> ShipService:
    """
    One service per request, wired to the request's session.
    """
    return ShipService(ShipRepository(db))


def get_ship_filter(ship_filter: Annotated[ShipFilter, Query()]) -> ShipFilter:
    """
    Reads the listing/count query parameters (camelCase aliases) into a
    ShipFilter. Kept as its own dependency so the filter model is the only
    query parameter FastAPI sees here; paging parameters are ignored.
    """
    return ship_filter
