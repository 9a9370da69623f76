"""Place imagery: Unsplash random-photo lookup with a Source URL fallback."""

import asyncio
import logging
from urllib.parse import quote

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

FALLBACK_URL = "https://source.unsplash.com/1600x900/?{query},travel"


def fallback_image_url(place_name: str) -> str:
    return FALLBACK_URL.format(query=quote(place_name, safe=""))


class PlaceImageService:
    """Finds a landscape photo for a place. Always returns a usable URL."""

    def __init__(
        self,
        access_key: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._access_key = settings.unsplash_access_key if access_key is None else access_key
        self._api_url = api_url or settings.unsplash_api_url
        self._timeout = settings.upstream_timeout_seconds if timeout is None else timeout
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def fetch_place_image(self, place_name: str, query: str = "") -> str:
        """Photo URL for a place; the Source fallback URL when the lookup fails."""
        if not self._access_key:
            return fallback_image_url(place_name)

        search = f"{place_name} {query}" if query else f"{place_name} travel destination"
        try:
            client = await self._get_client()
            resp = await client.get(
                self._api_url,
                params={
                    "query": search,
                    "orientation": "landscape",
                    "client_id": self._access_key,
                },
            )
            resp.raise_for_status()
            urls = resp.json()["urls"]
            url = urls.get("regular") or urls.get("full")
            if url:
                return url
            logger.warning(f"Unsplash returned no usable URL for {place_name}")
        except (httpx.HTTPError, KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning(f"Error fetching image for {place_name}: {e!r}")
        return fallback_image_url(place_name)

    async def fetch_multiple_place_images(self, places: list[dict]) -> dict[str, str]:
        """Fetch images for many places at once, keyed by place name."""
        images = await asyncio.gather(
            *(self.fetch_place_image(p["name"], p.get("category", "")) for p in places)
        )
        return {p["name"]: url for p, url in zip(places, images)}

    async def close(self):
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None


place_image_service = PlaceImageService()
