"""Recommendation engine: location-aware travel suggestions in three tiers.

Modules:
    config           Upstream endpoints, rating thresholds and default region
    region_resolver  Coordinate → city/state/country via reverse geocoding
    tier_fetchers    Per-tier text search, rating filter and ranking
    fallbacks        Static recommendations used when a lookup misses
    aggregator       Concurrent fan-out and bundle assembly

Pipeline:
    resolve_region → (fetch_local | fetch_national | fetch_international)
    → fallbacks for misses → RecommendationBundle
"""
