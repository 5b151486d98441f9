from roadrunners.schemas.permit_schema import (
    PermitStatusEnum,
    IdTypeEnum,
    PermitCreate,
    PermitApplication,
    PermitUpdate,
    PermitStatusView,
    PermitDocumentLink,
)
from roadrunners.schemas.user_schemas import SignupRequest, UserInfo, MakeAdminRequest, AdminGrant
from roadrunners.schemas.catalog_schema import (
    FleetCategoryEnum,
    MapPointTypeEnum,
    TourSortEnum,
    DurationBucketEnum,
    Tour,
    FleetItem,
    MapPoint,
)
