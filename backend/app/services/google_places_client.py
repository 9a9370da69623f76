"""Google Maps Platform client: reverse geocoding and Places text search."""

import logging

import httpx

from app.services.recommendation.config import RecommendationConfig

logger = logging.getLogger(__name__)


class GooglePlacesClient:
    """Adapter for the Geocoding and Places Text Search APIs.

    Every lookup makes a single attempt. Transport errors, non-OK statuses
    and malformed payloads all come back as None so callers can fall back.
    """

    def __init__(self, config: RecommendationConfig, http_client: httpx.AsyncClient | None = None):
        self._config = config
        self._client = http_client
        self._owns_client = http_client is None
        self._offline = not config.api_key

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._config.timeout_seconds)
        return self._client

    async def _get_results(self, url: str, params: dict, label: str) -> list[dict] | None:
        if self._offline:
            return None

        try:
            client = await self._get_client()
            resp = await client.get(url, params={**params, "key": self._config.api_key})
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning(f"{label} request failed: {e!r}")
            return None
        except ValueError as e:
            logger.warning(f"{label} returned invalid JSON: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"{label} returned unexpected payload type {type(data).__name__}")
            return None

        status = data.get("status")
        if status != "OK":
            logger.warning(f"{label} returned status {status}")
            return None

        results = data.get("results")
        if not isinstance(results, list):
            logger.warning(f"{label} returned no results list")
            return None
        return results

    async def reverse_geocode(self, lat: float, lng: float) -> list[dict] | None:
        """Geocoding results for a coordinate, or None on any failure."""
        return await self._get_results(
            self._config.geocode_endpoint,
            {"latlng": f"{lat},{lng}"},
            "Reverse geocode",
        )

    async def text_search(self, query: str) -> list[dict] | None:
        """Places text-search results for a query, or None on any failure."""
        return await self._get_results(
            self._config.search_endpoint,
            {"query": query},
            f"Text search '{query}'",
        )

    async def close(self):
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
