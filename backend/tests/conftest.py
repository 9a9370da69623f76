"""Shared fixtures: a fake Google Maps upstream served through httpx.MockTransport."""

import httpx
import pytest

from app.services.recommendation.config import RecommendationConfig

GEOCODE_URL = "https://maps.test/geocode/json"
SEARCH_URL = "https://maps.test/place/textsearch/json"


def place(name: str, rating: float | None, address: str | None = None) -> dict:
    p = {"name": name}
    if rating is not None:
        p["rating"] = rating
    if address is not None:
        p["formatted_address"] = address
    return p


def ok(results: list[dict]) -> dict:
    return {"status": "OK", "results": results}


def geocode_ok(city: str, state: str, country: str) -> dict:
    return ok([{
        "address_components": [
            {"long_name": city, "types": ["locality", "political"]},
            {"long_name": state, "types": ["administrative_area_level_1", "political"]},
            {"long_name": country, "types": ["country", "political"]},
        ]
    }])


class FakeGoogle:
    """Routes geocode and per-tier text-search requests to canned responses.

    A response is a JSON payload, a ready-made httpx.Response, or an httpx
    exception class that is raised for that request.
    """

    def __init__(self):
        self.geocode: dict | type = geocode_ok("Austin", "Texas", "United States")
        self.local: dict | type = ok([place("Zilker Park", 4.7, "Austin, TX")])
        self.national: dict | type = ok([place("Grand Canyon", 4.8, "Arizona, USA")])
        self.international: dict | type = ok([place("Louvre", 4.7, "Paris, France")])
        self.requests: list[httpx.Request] = []

    @property
    def geocode_calls(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(GEOCODE_URL)]

    @property
    def search_queries(self) -> list[str]:
        return [
            r.url.params["query"] for r in self.requests if str(r.url).startswith(SEARCH_URL)
        ]

    def _response_for(self, request: httpx.Request):
        if str(request.url).startswith(GEOCODE_URL):
            return self.geocode
        query = request.url.params["query"]
        if query.startswith("trending tourist attractions in"):
            return self.local
        if query.startswith("must visit tourist places in"):
            return self.national
        return self.international

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._response_for(request)
        if isinstance(response, type) and issubclass(response, Exception):
            raise response("simulated upstream failure", request=request)
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)


class FixedChoice:
    """Randomness source that always picks the given destination."""

    def __init__(self, value: str):
        self.value = value
        self.seen: list = []

    def choice(self, seq):
        self.seen.append(tuple(seq))
        return self.value


@pytest.fixture
def fake_google() -> FakeGoogle:
    return FakeGoogle()


@pytest.fixture
def http_client(fake_google) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_google.handler))


@pytest.fixture
def config() -> RecommendationConfig:
    return RecommendationConfig(
        geocode_endpoint=GEOCODE_URL,
        search_endpoint=SEARCH_URL,
        api_key="test-key",
        timeout_seconds=1.0,
    )
