import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from shipregistry.api.deps import get_ship_filter, get_ship_service
from shipregistry.core.config import settings
from shipregistry.models.enums import ShipOrder
from shipregistry.schemas.ship import ShipCreate, ShipFilter, ShipResponse, ShipUpdate
from shipregistry.services.ship_service import ShipService, is_valid_id

logger = logging.getLogger(__name__)
router = APIRouter()


def ensure_valid_id(ship_id: int) -> None:
    if not is_valid_id(ship_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid ship id: {ship_id}")

# --- LIST SHIPS ---
@router.get("", response_model=List[ShipResponse])
async def get_ships(
    ship_filter: ShipFilter = Depends(get_ship_filter),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1),
    page_number: int = Query(0, alias="pageNumber", ge=0),
    order: ShipOrder = Query(ShipOrder.ID),
    service: ShipService = Depends(get_ship_service),
):
    return await service.find_all(ship_filter, page_size, page_number, order)

# --- COUNT SHIPS ---
# Declared before /{ship_id} so "count" is not read as an id
@router.get("/count", response_model=int)
async def count_ships(
    ship_filter: ShipFilter = Depends(get_ship_filter),
    service: ShipService = Depends(get_ship_service),
):
    return await service.count(ship_filter)

# --- GET SHIP ---
@router.get("/{ship_id}", response_model=ShipResponse)
async def get_ship(ship_id: int, service: ShipService = Depends(get_ship_service)):
    ensure_valid_id(ship_id)
    ship = await service.find_by_id(ship_id)
    if ship is None:
        raise HTTPException(status_code=404, detail="Ship not found")
    return ship

# --- CREATE SHIP ---
@router.post("", response_model=ShipResponse)
async def create_ship(ship_in: ShipCreate, service: ShipService = Depends(get_ship_service)):
    """Invalid fields surface as 400 through the ShipValidationError handler"""
    return await service.save_ship(ship_in)

# --- UPDATE SHIP ---
@router.post("/{ship_id}", response_model=ShipResponse)
async def update_ship(
    ship_id: int,
    ship_in: ShipUpdate,
    service: ShipService = Depends(get_ship_service),
):
    return await service.update_ship(ship_id, ship_in)

# --- DELETE SHIP ---
@router.delete("/{ship_id}")
async def delete_ship(ship_id: int, service: ShipService = Depends(get_ship_service)):
    ensure_valid_id(ship_id)
    if await service.find_by_id(ship_id) is None:
        raise HTTPException(status_code=404, detail="Ship not found")

    await service.remove_by_id(ship_id)
    return {"message": f"Ship {ship_id} deleted"}
