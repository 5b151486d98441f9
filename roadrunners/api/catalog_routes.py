from fastapi import APIRouter, Depends, Query
from typing import Dict, Optional
import logging

from roadrunners.core.auth_dependencies import get_admin_user
from roadrunners.core.dependencies import (
    get_audit_service,
    get_fleet_service,
    get_map_point_service,
    get_seed_service,
    get_tour_service,
)
from roadrunners.schemas import (
    DurationBucketEnum,
    FleetCategoryEnum,
    FleetItem,
    MapPoint,
    MapPointTypeEnum,
    Tour,
    TourSortEnum,
)
from roadrunners.services.audit_service import AuditService
from roadrunners.services.catalog_service import FleetService, MapPointService, TourService
from roadrunners.services.seed_service import SeedService

router = APIRouter(tags=["Catalog"])

logger = logging.getLogger(__name__)


# ---- Tours ----

@router.get("/tours")
async def list_tours(
    difficulty: Optional[str] = Query(default=None, description="MODERATE, HARD, EXTREME or ALL"),
    terrain: Optional[str] = Query(default=None),
    duration: DurationBucketEnum = Query(default=DurationBucketEnum.all),
    q: Optional[str] = Query(default=None, description="Free-text search"),
    sort: TourSortEnum = Query(default=TourSortEnum.default),
    service: TourService = Depends(get_tour_service),
):
    tours = await service.search_tours(difficulty=difficulty, terrain=terrain, duration=duration, q=q, sort=sort)
    return {"tours": tours}


@router.get("/tours/{slug}")
async def get_tour(slug: str, service: TourService = Depends(get_tour_service)):
    tour = await service.get_item(slug)
    return {"tour": tour}


@router.post("/tours")
async def save_tour(
    tour: Tour,
    current_user: Dict = Depends(get_admin_user),
    service: TourService = Depends(get_tour_service),
    audit: AuditService = Depends(get_audit_service),
):
    record = await service.save_item(tour)
    await audit.record("tour_save", current_user.get("id"), tour.slug)
    return {"message": "Tour saved", "tour": record}


@router.delete("/tours/{slug}")
async def delete_tour(
    slug: str,
    current_user: Dict = Depends(get_admin_user),
    service: TourService = Depends(get_tour_service),
    audit: AuditService = Depends(get_audit_service),
):
    await service.delete_item(slug)
    await audit.record("tour_delete", current_user.get("id"), slug)
    return {"message": "Tour deleted"}


# ---- Fleet advisory ----

@router.get("/fleet")
async def list_fleet(
    category: Optional[FleetCategoryEnum] = Query(default=None),
    service: FleetService = Depends(get_fleet_service),
):
    items = await service.list_fleet(category)
    return {"items": items}


@router.post("/fleet")
async def save_fleet_item(
    item: FleetItem,
    current_user: Dict = Depends(get_admin_user),
    service: FleetService = Depends(get_fleet_service),
    audit: AuditService = Depends(get_audit_service),
):
    record = await service.save_item(item)
    await audit.record("fleet_save", current_user.get("id"), item.id)
    return {"message": "Fleet item saved", "item": record}


@router.delete("/fleet/{item_id}")
async def delete_fleet_item(
    item_id: str,
    current_user: Dict = Depends(get_admin_user),
    service: FleetService = Depends(get_fleet_service),
    audit: AuditService = Depends(get_audit_service),
):
    await service.delete_item(item_id)
    await audit.record("fleet_delete", current_user.get("id"), item_id)
    return {"message": "Fleet item deleted"}


# ---- Map pit-stops ----

@router.get("/map-points")
async def list_map_points(
    point_type: Optional[MapPointTypeEnum] = Query(default=None, alias="type"),
    service: MapPointService = Depends(get_map_point_service),
):
    points = await service.list_points(point_type)
    return {"points": points}


@router.get("/map-points/nearest")
async def nearest_map_points(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    limit: int = Query(default=3, ge=1, le=50),
    point_type: Optional[MapPointTypeEnum] = Query(default=None, alias="type"),
    service: MapPointService = Depends(get_map_point_service),
):
    points = await service.nearest(lat, lng, limit=limit, point_type=point_type)
    return {"points": points}


@router.post("/map-points")
async def save_map_point(
    point: MapPoint,
    current_user: Dict = Depends(get_admin_user),
    service: MapPointService = Depends(get_map_point_service),
    audit: AuditService = Depends(get_audit_service),
):
    record = await service.save_item(point)
    await audit.record("map_point_save", current_user.get("id"), point.id)
    return {"message": "Map point saved", "point": record}


@router.delete("/map-points/{point_id}")
async def delete_map_point(
    point_id: str,
    current_user: Dict = Depends(get_admin_user),
    service: MapPointService = Depends(get_map_point_service),
    audit: AuditService = Depends(get_audit_service),
):
    await service.delete_item(point_id)
    await audit.record("map_point_delete", current_user.get("id"), point_id)
    return {"message": "Map point deleted"}


# Loads the starter catalog; repeat calls report "Already seeded"
@router.post("/seed")
async def seed_catalog(service: SeedService = Depends(get_seed_service)):
    return await service.seed()
