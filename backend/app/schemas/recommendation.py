from enum import Enum

from pydantic import BaseModel, Field


class Tier(str, Enum):
    LOCAL = "local"
    NATIONAL = "national"
    INTERNATIONAL = "international"


class Coordinate(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    model_config = {"frozen": True}


class Region(BaseModel):
    """City/state/country resolved from a coordinate. Missing parts are empty strings."""
    city: str = ""
    state: str = ""
    country: str = ""

    model_config = {"frozen": True}


class PlaceRecommendation(BaseModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    rating: float = Field(ge=0.0, le=5.0)
    category: Tier
    description: str

    model_config = {"frozen": True, "use_enum_values": True, "str_strip_whitespace": True}


class RecommendationBundle(BaseModel):
    local: PlaceRecommendation
    national: PlaceRecommendation
    international: PlaceRecommendation

    model_config = {"frozen": True}


class RecommendationsResponse(BaseModel):
    recommendations: RecommendationBundle
