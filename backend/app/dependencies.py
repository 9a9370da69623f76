from app.services.place_image_service import PlaceImageService, place_image_service
from app.services.recommendation.aggregator import RecommendationAggregator, recommendation_aggregator


def get_recommendation_aggregator() -> RecommendationAggregator:
    return recommendation_aggregator


def get_place_image_service() -> PlaceImageService:
    return place_image_service
