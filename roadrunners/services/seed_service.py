import logging
from typing import Any, Dict

from fastapi import HTTPException, status

from roadrunners.catalog_data import FLEET_CATALOG, MAP_POINTS_CATALOG, SEED_MARKER_KEY, TOURS_CATALOG
from roadrunners.database.kv_store import KVStore
from roadrunners.services.catalog_service import FleetService, MapPointService, TourService

logger = logging.getLogger(__name__)


class SeedService:
    """Loads the starter catalog once; later calls are no-ops."""

    def __init__(self, store: KVStore):
        self.store = store
        self.tours = TourService(store)
        self.fleet = FleetService(store)
        self.map_points = MapPointService(store)

    async def seed(self) -> Dict[str, Any]:
        if await self.store.get(SEED_MARKER_KEY):
            logger.info("Catalog already seeded, skipping")
            return {"message": "Already seeded"}

        try:
            tours = await self.tours.replace_all(TOURS_CATALOG)
            fleet = await self.fleet.replace_all(FLEET_CATALOG)
            map_points = await self.map_points.replace_all(MAP_POINTS_CATALOG)
            await self.store.set(SEED_MARKER_KEY, True)
        except Exception as e:
            logger.error(f"Seeding failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Seeding failed"
            )

        logger.info(f"Seeded {tours} tours, {fleet} fleet items and {map_points} map points")
        return {"message": "Seed complete", "tours": tours, "fleet": fleet, "mapPoints": map_points}
