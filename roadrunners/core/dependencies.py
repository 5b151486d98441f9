from fastapi import Depends

from roadrunners.database.kv_store import KVStore, get_kv_store
from roadrunners.services.admin_service import AdminService
from roadrunners.services.audit_service import AuditService
from roadrunners.services.catalog_service import FleetService, MapPointService, TourService
from roadrunners.services.identity_service import IdentityService, get_identity_service
from roadrunners.services.permit_service import PermitService
from roadrunners.services.seed_service import SeedService
from roadrunners.services.storage_service import StorageService, get_storage_service

# Services are cheap wrappers around the shared store and clients,
# so they are built per request


def get_permit_service(
    store: KVStore = Depends(get_kv_store),
    storage: StorageService = Depends(get_storage_service),
) -> PermitService:
    return PermitService(store, storage)


def get_admin_service(
    store: KVStore = Depends(get_kv_store),
    identity: IdentityService = Depends(get_identity_service),
) -> AdminService:
    return AdminService(store, identity)


def get_audit_service(store: KVStore = Depends(get_kv_store)) -> AuditService:
    return AuditService(store)


def get_tour_service(store: KVStore = Depends(get_kv_store)) -> TourService:
    return TourService(store)


def get_fleet_service(store: KVStore = Depends(get_kv_store)) -> FleetService:
    return FleetService(store)


def get_map_point_service(store: KVStore = Depends(get_kv_store)) -> MapPointService:
    return MapPointService(store)


def get_seed_service(store: KVStore = Depends(get_kv_store)) -> SeedService:
    return SeedService(store)
