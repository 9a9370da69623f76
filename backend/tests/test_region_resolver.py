"""Tests for reverse-geocoding region resolution."""

import httpx
import pytest

from app.schemas.recommendation import Coordinate, Region
from app.services.google_places_client import GooglePlacesClient
from app.services.recommendation.region_resolver import parse_address_components, resolve_region
from conftest import ok


class TestParseAddressComponents:

    def test_extracts_city_state_country(self):
        region = parse_address_components([
            {"long_name": "Mumbai", "types": ["locality", "political"]},
            {"long_name": "Maharashtra", "types": ["administrative_area_level_1", "political"]},
            {"long_name": "India", "types": ["country", "political"]},
        ])
        assert region == Region(city="Mumbai", state="Maharashtra", country="India")

    def test_missing_types_leave_empty_strings(self):
        region = parse_address_components([
            {"long_name": "Monaco", "types": ["country", "political"]},
        ])
        assert region.city == ""
        assert region.state == ""
        assert region.country == "Monaco"

    def test_later_component_overwrites_earlier(self):
        region = parse_address_components([
            {"long_name": "First Town", "types": ["locality"]},
            {"long_name": "Second Town", "types": ["locality"]},
        ])
        assert region.city == "Second Town"

    def test_ignores_unrelated_components(self):
        region = parse_address_components([
            {"long_name": "221B", "types": ["street_number"]},
            {"long_name": "NW1", "types": ["postal_code"]},
        ])
        assert region == Region()


class TestResolveRegion:

    @pytest.mark.asyncio
    async def test_no_coordinate_skips_network(self, config, http_client, fake_google):
        places = GooglePlacesClient(config, http_client)
        assert await resolve_region(places, None) is None
        assert fake_google.requests == []

    @pytest.mark.asyncio
    async def test_resolves_first_result(self, config, http_client, fake_google):
        places = GooglePlacesClient(config, http_client)
        region = await resolve_region(places, Coordinate(lat=30.27, lng=-97.74))

        assert region == Region(city="Austin", state="Texas", country="United States")
        request = fake_google.geocode_calls[0]
        assert request.url.params["latlng"] == "30.27,-97.74"
        assert request.url.params["key"] == "test-key"

    @pytest.mark.asyncio
    async def test_non_ok_status_returns_none(self, config, http_client, fake_google):
        fake_google.geocode = {"status": "ZERO_RESULTS", "results": []}
        places = GooglePlacesClient(config, http_client)
        assert await resolve_region(places, Coordinate(lat=1.0, lng=2.0)) is None

    @pytest.mark.asyncio
    async def test_empty_results_return_none(self, config, http_client, fake_google):
        fake_google.geocode = ok([])
        places = GooglePlacesClient(config, http_client)
        assert await resolve_region(places, Coordinate(lat=1.0, lng=2.0)) is None

    @pytest.mark.asyncio
    async def test_transport_error_returns_none(self, config, http_client, fake_google):
        fake_google.geocode = httpx.ConnectError
        places = GooglePlacesClient(config, http_client)
        assert await resolve_region(places, Coordinate(lat=1.0, lng=2.0)) is None

    @pytest.mark.asyncio
    async def test_http_error_status_returns_none(self, config, http_client, fake_google):
        fake_google.geocode = httpx.Response(503, text="unavailable")
        places = GooglePlacesClient(config, http_client)
        assert await resolve_region(places, Coordinate(lat=1.0, lng=2.0)) is None

    @pytest.mark.asyncio
    async def test_malformed_result_returns_none(self, config, http_client, fake_google):
        fake_google.geocode = ok([{"formatted_address": "somewhere"}])
        places = GooglePlacesClient(config, http_client)
        assert await resolve_region(places, Coordinate(lat=1.0, lng=2.0)) is None
