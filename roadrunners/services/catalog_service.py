import logging
from typing import Any, Dict, List, Optional, Sequence, Type

from fastapi import HTTPException, status
from pydantic import BaseModel

from roadrunners.database.kv_store import KVStore
from roadrunners.schemas import (
    DurationBucketEnum,
    FleetCategoryEnum,
    FleetItem,
    MapPoint,
    MapPointTypeEnum,
    Tour,
    TourSortEnum,
)
from roadrunners.utils.geo import haversine_km

logger = logging.getLogger(__name__)

TOUR_PREFIX = "tour:"
TOURS_INDEX = "tours_list"
FLEET_PREFIX = "fleet:"
FLEET_INDEX = "fleet_list"
MAP_POINT_PREFIX = "map_point:"
MAP_POINTS_INDEX = "map_points_list"


class CatalogService:
    """
    Keyed catalog collection backed by the KV store.

    Each item lives under `<prefix><id>`; the index key holds the ordered list
    of ids and drives listing order.
    """

    def __init__(self, store: KVStore, item_prefix: str, index_key: str, id_field: str, label: str, model: Type[BaseModel]):
        self.store = store
        self.item_prefix = item_prefix
        self.index_key = index_key
        self.id_field = id_field
        self.label = label
        self.model = model

    def _key(self, item_id: str) -> str:
        return f"{self.item_prefix}{item_id}"

    async def _index(self) -> List[str]:
        ids = await self.store.get(self.index_key)
        if not isinstance(ids, list):
            return []
        return ids

    async def list_items(self) -> List[Dict[str, Any]]:
        try:
            ids = await self._index()
            return await self.store.mget([self._key(i) for i in ids])
        except Exception as e:
            logger.error(f"Failed to fetch {self.label} list: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to fetch {self.label}"
            )

    async def get_item(self, item_id: str) -> Dict[str, Any]:
        item = await self.store.get(self._key(item_id))
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.label.capitalize()} not found"
            )
        return item

    # Upsert; appends the id to the index the first time it is seen.
    # Index before item: mget skips ids whose item is missing
    async def save_item(self, item: BaseModel) -> Dict[str, Any]:
        record = item.to_record()
        item_id = record[self.id_field]
        try:
            ids = await self._index()
            if item_id not in ids:
                ids.append(item_id)
                await self.store.set(self.index_key, ids)
            await self.store.set(self._key(item_id), record)
        except Exception as e:
            logger.error(f"Failed to save {self.label} {item_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to save {self.label}"
            )
        logger.info(f"Saved {self.label} {item_id}")
        return record

    async def delete_item(self, item_id: str) -> None:
        try:
            removed = await self.store.delete(self._key(item_id))
            ids = await self._index()
            if item_id in ids:
                await self.store.set(self.index_key, [i for i in ids if i != item_id])
                removed = True
        except Exception as e:
            logger.error(f"Failed to delete {self.label} {item_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to delete {self.label}"
            )
        if not removed:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.label.capitalize()} not found"
            )
        logger.info(f"Deleted {self.label} {item_id}")

    # Writes a batch in one go and replaces the index with its ids
    async def replace_all(self, records: Sequence[Dict[str, Any]]) -> int:
        items = [self.model.model_validate(r).to_record() for r in records]
        for item in items:
            await self.store.set(self._key(item[self.id_field]), item)
        await self.store.set(self.index_key, [item[self.id_field] for item in items])
        return len(items)


def _duration_matches(duration: Optional[int], bucket: DurationBucketEnum) -> bool:
    if bucket == DurationBucketEnum.all:
        return True
    if duration is None:
        return False
    if bucket == DurationBucketEnum.short:
        return duration <= 8
    if bucket == DurationBucketEnum.medium:
        return 9 <= duration <= 12
    return duration >= 13


def _sort_key(sort: TourSortEnum):
    if sort in (TourSortEnum.price_asc, TourSortEnum.price_desc):
        return lambda t: t.get("price") or 0
    if sort in (TourSortEnum.duration_asc, TourSortEnum.duration_desc):
        return lambda t: t.get("duration") or 0
    return lambda t: (t.get("elevation") or {}).get("max") or 0


class TourService(CatalogService):

    def __init__(self, store: KVStore):
        super().__init__(store, TOUR_PREFIX, TOURS_INDEX, "slug", "tour", Tour)

    async def search_tours(
        self,
        difficulty: Optional[str] = None,
        terrain: Optional[str] = None,
        duration: DurationBucketEnum = DurationBucketEnum.all,
        q: Optional[str] = None,
        sort: TourSortEnum = TourSortEnum.default,
    ) -> List[Dict[str, Any]]:
        tours = await self.list_items()

        if difficulty and difficulty.upper() != "ALL":
            tours = [t for t in tours if (t.get("difficulty") or "").upper() == difficulty.upper()]
        if terrain and terrain.upper() != "ALL":
            tours = [t for t in tours if (t.get("terrain") or "").upper() == terrain.upper()]
        tours = [t for t in tours if _duration_matches(t.get("duration"), duration)]

        needle = (q or "").strip().lower()
        if needle:
            tours = [
                t for t in tours
                if any(needle in (t.get(f) or "").lower() for f in ("title", "subtitle", "terrain", "difficulty"))
            ]

        if sort != TourSortEnum.default:
            descending = sort in (TourSortEnum.price_desc, TourSortEnum.duration_desc, TourSortEnum.altitude)
            tours = sorted(tours, key=_sort_key(sort), reverse=descending)
        return tours


class FleetService(CatalogService):

    def __init__(self, store: KVStore):
        super().__init__(store, FLEET_PREFIX, FLEET_INDEX, "id", "fleet item", FleetItem)

    async def list_fleet(self, category: Optional[FleetCategoryEnum] = None) -> List[Dict[str, Any]]:
        items = await self.list_items()
        if category:
            items = [i for i in items if i.get("category") == category.value]
        return items


class MapPointService(CatalogService):

    def __init__(self, store: KVStore):
        super().__init__(store, MAP_POINT_PREFIX, MAP_POINTS_INDEX, "id", "map point", MapPoint)

    async def list_points(self, point_type: Optional[MapPointTypeEnum] = None) -> List[Dict[str, Any]]:
        points = await self.list_items()
        if point_type:
            points = [p for p in points if p.get("type") == point_type.value]
        return points

    # Closest pit-stops to (lat, lng), each annotated with distanceKm
    async def nearest(self, lat: float, lng: float, limit: int = 3, point_type: Optional[MapPointTypeEnum] = None) -> List[Dict[str, Any]]:
        points = await self.list_points(point_type)
        ranked = []
        for p in points:
            if p.get("lat") is None or p.get("lng") is None:
                continue
            distance = haversine_km(lat, lng, p["lat"], p["lng"])
            ranked.append({**p, "distanceKm": round(distance, 2)})
        ranked.sort(key=lambda p: p["distanceKm"])
        return ranked[:limit]
