import logging

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_recommendation_aggregator
from app.schemas.recommendation import RecommendationsResponse
from app.services.recommendation.aggregator import RecommendationAggregator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
    aggregator: RecommendationAggregator = Depends(get_recommendation_aggregator),
):
    """Local, national and international picks for the caller's position.

    Both coordinates are optional; without them the default region is used.
    """
    logger.info(f"Recommendations requested for lat={lat} lng={lng}")
    bundle = await aggregator.get_recommendations(lat, lng)
    return RecommendationsResponse(recommendations=bundle)
