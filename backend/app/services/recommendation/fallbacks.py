"""Static recommendations served when an upstream lookup misses."""

from app.schemas.recommendation import PlaceRecommendation, RecommendationBundle, Tier


def local_fallback(state: str) -> PlaceRecommendation:
    return PlaceRecommendation(
        name="Local Discovery",
        location=state,
        rating=4.0,
        category=Tier.LOCAL,
        description="Explore nearby",
    )


def national_fallback(country: str) -> PlaceRecommendation:
    return PlaceRecommendation(
        name="National Gem",
        location=country,
        rating=4.2,
        category=Tier.NATIONAL,
        description="Discover your country",
    )


def international_fallback() -> PlaceRecommendation:
    return PlaceRecommendation(
        name="Paris",
        location="France",
        rating=4.8,
        category=Tier.INTERNATIONAL,
        description="Global hotspot",
    )


def static_bundle() -> RecommendationBundle:
    """Region-agnostic bundle for when aggregation itself fails."""
    return RecommendationBundle(
        local=local_fallback("Near you"),
        national=national_fallback("Your country"),
        international=international_fallback(),
    )
