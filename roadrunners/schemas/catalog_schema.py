from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from enum import Enum
from typing import List, Optional

# Identifiers end up inside KV keys, so ':' and whitespace are not allowed
IDENTIFIER_PATTERN = r"^[A-Za-z0-9_-]+$"


class FleetCategoryEnum(str, Enum):
    bike = "bike"
    gear = "gear"
    advisory = "advisory"


class MapPointTypeEnum(str, Enum):
    mechanic = "mechanic"
    fuel = "fuel"
    stay = "stay"


class TourSortEnum(str, Enum):
    default = "default"
    price_asc = "price-asc"
    price_desc = "price-desc"
    duration_asc = "duration-asc"
    duration_desc = "duration-desc"
    altitude = "altitude"


class DurationBucketEnum(str, Enum):
    all = "ALL"
    short = "SHORT"
    medium = "MEDIUM"
    long = "LONG"


class CatalogModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class Elevation(CatalogModel):
    min: int = Field(..., description="Lowest point of the route in metres")
    max: int = Field(..., description="Highest point of the route in metres")


class ItineraryDay(CatalogModel):
    day: int = Field(..., ge=1)
    title: str
    description: Optional[str] = None
    elevation: Optional[int] = None
    distance: Optional[int] = Field(None, ge=0, description="Riding distance in km")


class Tour(CatalogModel):
    slug: str = Field(..., min_length=1, pattern=IDENTIFIER_PATTERN)
    title: str = Field(..., min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    difficulty: Optional[str] = Field(None, description="MODERATE, HARD or EXTREME")
    duration: Optional[int] = Field(None, ge=1, description="Length in days")
    terrain: Optional[str] = None
    price: Optional[int] = Field(None, ge=0, description="Price per rider in INR")
    max_group_size: Optional[int] = Field(None, ge=1)
    next_departure: Optional[str] = None
    image: Optional[str] = None
    elevation: Optional[Elevation] = None
    shadow_fleet: Optional[List[str]] = None
    itinerary: Optional[List[ItineraryDay]] = None


class FleetItem(CatalogModel):
    id: str = Field(..., min_length=1, pattern=IDENTIFIER_PATTERN)
    category: FleetCategoryEnum
    name: str = Field(..., min_length=1)
    image: Optional[str] = None
    description: Optional[str] = None
    terrain: Optional[List[str]] = None
    pros: Optional[List[str]] = None
    cons: Optional[List[str]] = None
    essentials: Optional[List[str]] = None
    tips: Optional[List[str]] = None


class MapPoint(CatalogModel):
    id: str = Field(..., min_length=1, pattern=IDENTIFIER_PATTERN)
    type: MapPointTypeEnum
    name: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    city: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
