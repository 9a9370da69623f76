"""Recommendation aggregator: resolves the user's region and fans out the three tier lookups."""

import asyncio
import logging
import random

import httpx
from pydantic import ValidationError

from app.config import settings
from app.schemas.recommendation import Coordinate, RecommendationBundle, Tier
from app.services.google_places_client import GooglePlacesClient
from app.services.recommendation.config import RecommendationConfig
from app.services.recommendation.fallbacks import (
    international_fallback,
    local_fallback,
    national_fallback,
    static_bundle,
)
from app.services.recommendation.region_resolver import resolve_region
from app.services.recommendation.tier_fetchers import ChoiceSource, fetch_tier_recommendation

logger = logging.getLogger(__name__)

TIERS = (Tier.LOCAL, Tier.NATIONAL, Tier.INTERNATIONAL)


class AggregationError(Exception):
    """A tier branch raised instead of resolving to a value or None."""


class RecommendationAggregator:
    """Builds a local/national/international bundle that is always fully populated."""

    def __init__(
        self,
        config: RecommendationConfig,
        http_client: httpx.AsyncClient | None = None,
        rng: ChoiceSource | None = None,
    ):
        self._config = config
        self._places = GooglePlacesClient(config, http_client)
        self._rng = rng or random.Random()

    async def get_recommendations(
        self, lat: float | None = None, lng: float | None = None
    ) -> RecommendationBundle:
        """Recommendations for a position. Never raises."""
        try:
            return await self._aggregate(lat, lng)
        except Exception:
            logger.exception("Recommendation aggregation failed, serving static bundle")
            return static_bundle()

    async def _aggregate(self, lat: float | None, lng: float | None) -> RecommendationBundle:
        region = await resolve_region(self._places, self._coordinate(lat, lng))

        state = (region and region.state) or self._config.default_region.state
        country = (region and region.country) or self._config.default_region.country

        # Join-all: every branch settles even if a sibling raises
        results = await asyncio.gather(
            *(
                fetch_tier_recommendation(tier, self._places, self._config, state, country, self._rng)
                for tier in TIERS
            ),
            return_exceptions=True,
        )

        for tier, result in zip(TIERS, results):
            if isinstance(result, BaseException):
                raise AggregationError(f"{tier.value} tier raised {result!r}") from result

        local, national, international = results
        if local is None:
            logger.info(f"Local tier missed, using fallback for {state}")
        if national is None:
            logger.info(f"National tier missed, using fallback for {country}")
        if international is None:
            logger.info("International tier missed, using fallback")

        return RecommendationBundle(
            local=local or local_fallback(state),
            national=national or national_fallback(country),
            international=international or international_fallback(),
        )

    @staticmethod
    def _coordinate(lat: float | None, lng: float | None) -> Coordinate | None:
        if lat is None or lng is None:
            return None
        try:
            return Coordinate(lat=lat, lng=lng)
        except ValidationError:
            logger.warning(f"Ignoring out-of-range coordinate ({lat}, {lng})")
            return None

    async def close(self):
        await self._places.close()


recommendation_aggregator = RecommendationAggregator(RecommendationConfig.from_settings(settings))
