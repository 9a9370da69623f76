"""Recommendation engine configuration: single source for endpoints and thresholds."""

from dataclasses import dataclass, field

from app.config import Settings


@dataclass(frozen=True)
class RatingThresholds:
    """Minimum upstream rating a candidate needs to be considered per tier."""
    local: float = 4.0
    national: float = 4.2


@dataclass(frozen=True)
class DefaultRegion:
    """Region used when no coordinate is given or geocoding misses."""
    state: str = "California"
    country: str = "United States"


# Global hotspots the international tier samples from
INTERNATIONAL_DESTINATIONS: tuple[str, ...] = (
    "Paris",
    "Tokyo",
    "New York",
    "Dubai",
    "London",
    "Barcelona",
    "Rome",
    "Bali",
    "Maldives",
    "Singapore",
)

# Used when the international result carries no rating
INTERNATIONAL_DEFAULT_RATING = 4.5


@dataclass(frozen=True)
class RecommendationConfig:
    """Everything the aggregator needs to talk to its upstreams."""
    geocode_endpoint: str
    search_endpoint: str
    api_key: str = ""
    timeout_seconds: float = 10.0
    thresholds: RatingThresholds = field(default_factory=RatingThresholds)
    default_region: DefaultRegion = field(default_factory=DefaultRegion)
    destinations: tuple[str, ...] = INTERNATIONAL_DESTINATIONS

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecommendationConfig":
        return cls(
            geocode_endpoint=settings.google_geocode_url,
            search_endpoint=settings.google_text_search_url,
            api_key=settings.google_api_key,
            timeout_seconds=settings.upstream_timeout_seconds,
        )
