import asyncio
import logging
import sys
import os
from datetime import datetime

# Ensure we can import from the 'shipregistry' directory
sys.path.append(os.getcwd())

from shipregistry.core.database import SessionLocal, init_models
from shipregistry.core.exceptions import ShipValidationError
from shipregistry.models.enums import ShipType
from shipregistry.repositories.ship_repository import ShipRepository
from shipregistry.schemas.ship import ShipCreate
from shipregistry.services.ship_service import ShipService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed")

SHIPS = [
    {"name": "Orion III", "planet": "Mars", "ship_type": ShipType.MERCHANT,
     "prod_date": datetime(2995, 3, 1), "is_used": True, "speed": 0.82, "crew_size": 617},
    {"name": "Daedalus", "planet": "Jupiter", "ship_type": ShipType.MILITARY,
     "prod_date": datetime(3012, 7, 14), "is_used": False, "speed": 0.94, "crew_size": 1347},
    {"name": "Eagle Transporter", "planet": "Earth", "ship_type": ShipType.TRANSPORT,
     "prod_date": datetime(2989, 1, 20), "is_used": True, "speed": 0.79, "crew_size": 4527},
    {"name": "F-302", "planet": "Mercury", "ship_type": ShipType.MILITARY,
     "prod_date": datetime(3017, 11, 2), "is_used": False, "speed": 0.39, "crew_size": 20},
    {"name": "Excelsior", "planet": "Jupiter", "ship_type": ShipType.MERCHANT,
     "prod_date": datetime(2971, 5, 9), "is_used": False, "speed": 0.64, "crew_size": 6223},
]

async def seed_database():
    logger.info("🌱 Seeding ships...")
    await init_models()

    async with SessionLocal() as db:
        service = ShipService(ShipRepository(db))

        existing = await service.count(None)
        if existing:
            logger.info(f"✅ Found {existing} ships already, nothing to do.")
            return

        for data in SHIPS:
            try:
                ship = await service.save_ship(ShipCreate(**data))
                logger.info(f"   🚀 {ship.name} ({ship.planet}) rating={ship.rating}")
            except ShipValidationError as e:
                logger.error(f"❌ Skipped {data['name']}: {e.message}")

    logger.info("🎉 Seeding complete")

if __name__ == "__main__":
    asyncio.run(seed_database())
