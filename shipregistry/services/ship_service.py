import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_DOWN
from typing import Optional, Union

from shipregistry.core.dates import EPOCH, production_year
from shipregistry.core.exceptions import ShipNotFoundError, ShipValidationError
from shipregistry.models.enums import ShipOrder
from shipregistry.models.ship import Ship
from shipregistry.repositories.ship_repository import ShipRepository
from shipregistry.schemas.ship import ShipBase, ShipFilter
from shipregistry.services.ship_filter import compile_filter

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 50
MIN_SPEED, MAX_SPEED = 0.01, 0.99
MIN_CREW_SIZE, MAX_CREW_SIZE = 1, 9999
MIN_YEAR, MAX_YEAR = 2800, 3019
# Ids are 64-bit signed integers in storage
MAX_ID = 2**63 - 1

# Fields a caller may change; id and rating are never taken from input
MUTABLE_FIELDS = ("name", "is_used", "crew_size", "planet", "prod_date", "ship_type", "speed")


def calculate_rating(speed: float, prod_date: datetime, is_used: bool) -> float:
    """
    rating = 80 * speed * k / (MAX_YEAR - year + 1), k = 0.5 for used ships.

    Rounded to two places with ties going down, on the exact binary value
    of the quotient.
    """
    k = 0.5 if is_used else 1.0
    year = production_year(prod_date)
    r = (80 * speed * k) / (MAX_YEAR - year + 1)
    return float(Decimal(r).quantize(Decimal("0.01"), rounding=ROUND_HALF_DOWN))


def validate_ship(ship: Optional[ShipBase]) -> Optional[str]:
    """Returns the first broken rule, or None when the ship is valid."""
    if ship is None:
        return "ship is required"
    if not ship.name or len(ship.name) > MAX_TEXT_LENGTH:
        return f"name must be 1-{MAX_TEXT_LENGTH} characters"
    if not ship.planet or len(ship.planet) > MAX_TEXT_LENGTH:
        return f"planet must be 1-{MAX_TEXT_LENGTH} characters"
    if ship.speed is None or not MIN_SPEED <= ship.speed <= MAX_SPEED:
        return f"speed must be within [{MIN_SPEED}, {MAX_SPEED}]"
    if ship.crew_size is None or not MIN_CREW_SIZE <= ship.crew_size <= MAX_CREW_SIZE:
        return f"crewSize must be within [{MIN_CREW_SIZE}, {MAX_CREW_SIZE}]"
    if ship.prod_date is None or ship.prod_date < EPOCH:
        return "prodDate must be a non-negative timestamp"
    if not MIN_YEAR <= production_year(ship.prod_date) <= MAX_YEAR:
        return f"prodDate year must be within [{MIN_YEAR}, {MAX_YEAR}]"
    return None


def is_valid_ship(ship: Optional[ShipBase]) -> bool:
    return validate_ship(ship) is None


def is_valid_id(ship_id) -> bool:
    return isinstance(ship_id, int) and not isinstance(ship_id, bool) and 0 < ship_id <= MAX_ID


def merge_ship(stored: Ship, patch: ShipBase) -> ShipBase:
    """Overlay the fields set in patch onto the stored ship."""
    merged = {}
    for field in MUTABLE_FIELDS:
        value = getattr(patch, field)
        merged[field] = value if value is not None else getattr(stored, field)
    return ShipBase(**merged)


class ShipService:
    def __init__(self, repository: ShipRepository):
        self.repository = repository

    async def find_by_id(self, ship_id: int) -> Optional[Ship]:
        if not is_valid_id(ship_id):
            return None
        return await self.repository.find_by_id(ship_id)

    async def find_all(
        self,
        ship_filter: Optional[ShipFilter],
        page_size: int,
        page_number: int,
        order: Union[ShipOrder, str] = ShipOrder.ID,
    ) -> list[Ship]:
        # Raises ValueError for an unknown order name
        order = ShipOrder(order)
        criteria = compile_filter(ship_filter)
        return await self.repository.find_page(criteria, page_size, page_number, order.field_name)

    async def count(self, ship_filter: Optional[ShipFilter]) -> int:
        return await self.repository.count(compile_filter(ship_filter))

    async def save_ship(self, ship_in: ShipBase) -> Ship:
        if ship_in is not None and ship_in.is_used is None:
            ship_in = ship_in.model_copy(update={"is_used": False})

        reason = validate_ship(ship_in)
        if reason:
            logger.warning(f"⚠️ Rejected new ship: {reason}")
            raise ShipValidationError(reason)

        ship = Ship(**{field: getattr(ship_in, field) for field in MUTABLE_FIELDS})
        ship.rating = calculate_rating(ship.speed, ship.prod_date, ship.is_used)

        ship = await self.repository.save(ship)
        logger.info(f"✅ Ship {ship.id} created (rating {ship.rating})")
        return ship

    async def update_ship(self, ship_id: int, ship_in: ShipBase) -> Ship:
        if not is_valid_id(ship_id):
            raise ShipValidationError(f"Invalid ship id: {ship_id}")

        stored = await self.repository.find_by_id(ship_id)
        if stored is None:
            raise ShipNotFoundError(ship_id)

        merged = merge_ship(stored, ship_in if ship_in is not None else ShipBase())
        reason = validate_ship(merged)
        if reason:
            logger.warning(f"⚠️ Rejected update of ship {ship_id}: {reason}")
            raise ShipValidationError(reason)

        # Only touch the persistent object once the merged values are known good
        for field in MUTABLE_FIELDS:
            setattr(stored, field, getattr(merged, field))
        stored.rating = calculate_rating(merged.speed, merged.prod_date, merged.is_used)

        ship = await self.repository.save(stored)
        logger.info(f"✅ Ship {ship.id} updated (rating {ship.rating})")
        return ship

    async def remove_by_id(self, ship_id: int) -> None:
        await self.repository.delete_by_id(ship_id)
        logger.info(f"🗑️ Ship {ship_id} deleted")
