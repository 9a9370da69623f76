"""Tier fetchers: one text search per tier, filtered and ranked by rating."""

import logging
from typing import Protocol, Sequence

from app.schemas.recommendation import PlaceRecommendation, Tier
from app.services.google_places_client import GooglePlacesClient
from app.services.recommendation.config import INTERNATIONAL_DEFAULT_RATING, RecommendationConfig

logger = logging.getLogger(__name__)


class ChoiceSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


def _rating(place: dict) -> float | None:
    value = place.get("rating")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def pick_top_rated(results: list[dict], min_rating: float) -> dict | None:
    """
    Highest-rated result at or above min_rating.

    Unrated and zero-rated results never qualify. Ties keep upstream order
    (sorted() is stable, reverse=True included).
    """
    candidates = []
    for place in results:
        rating = _rating(place)
        if rating and rating >= min_rating:
            candidates.append(place)
    if not candidates:
        return None
    return sorted(candidates, key=_rating, reverse=True)[0]


async def fetch_local(
    places: GooglePlacesClient, config: RecommendationConfig, state: str, country: str
) -> PlaceRecommendation | None:
    """Trending attraction in the user's state."""
    results = await places.text_search(f"trending tourist attractions in {state} {country}")
    if not results:
        return None

    top = pick_top_rated(results, config.thresholds.local)
    if top is None:
        logger.info(f"No local candidate rated >= {config.thresholds.local} in {state}")
        return None

    return PlaceRecommendation(
        name=top["name"],
        location=top.get("formatted_address") or state,
        rating=_rating(top),
        category=Tier.LOCAL,
        description=f"Trending in {state}",
    )


async def fetch_national(
    places: GooglePlacesClient, config: RecommendationConfig, country: str
) -> PlaceRecommendation | None:
    """Must-visit place in the user's country."""
    results = await places.text_search(f"must visit tourist places in {country}")
    if not results:
        return None

    top = pick_top_rated(results, config.thresholds.national)
    if top is None:
        logger.info(f"No national candidate rated >= {config.thresholds.national} in {country}")
        return None

    return PlaceRecommendation(
        name=top["name"],
        location=top.get("formatted_address") or country,
        rating=_rating(top),
        category=Tier.NATIONAL,
        description=f"Popular in {country}",
    )


async def fetch_international(
    places: GooglePlacesClient, config: RecommendationConfig, rng: ChoiceSource
) -> PlaceRecommendation | None:
    """
    A randomly chosen global hotspot.

    Only existence-filtered: the first search result is used as-is, and the
    recommendation is named after the chosen destination rather than the
    result itself.
    """
    destination = rng.choice(config.destinations)
    results = await places.text_search(f"{destination} tourist attractions")
    if not results:
        return None

    first = results[0]
    return PlaceRecommendation(
        name=destination,
        location=first.get("formatted_address") or destination,
        rating=_rating(first) or INTERNATIONAL_DEFAULT_RATING,
        category=Tier.INTERNATIONAL,
        description="Global hotspot",
    )


async def fetch_tier_recommendation(
    tier: Tier,
    places: GooglePlacesClient,
    config: RecommendationConfig,
    state: str,
    country: str,
    rng: ChoiceSource,
) -> PlaceRecommendation | None:
    """Dispatch to the tier's fetcher. Malformed result entries count as a miss."""
    try:
        if tier == Tier.LOCAL:
            return await fetch_local(places, config, state, country)
        if tier == Tier.NATIONAL:
            return await fetch_national(places, config, country)
        return await fetch_international(places, config, rng)
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        logger.warning(f"Malformed {tier.value} search result: {e!r}")
        return None
