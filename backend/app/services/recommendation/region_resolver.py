"""Region resolver: turns a coordinate into city/state/country via reverse geocoding."""

import logging

from app.schemas.recommendation import Coordinate, Region
from app.services.google_places_client import GooglePlacesClient

logger = logging.getLogger(__name__)

# Geocoder component type → Region field
COMPONENT_FIELDS = {
    "locality": "city",
    "administrative_area_level_1": "state",
    "country": "country",
}


def parse_address_components(components: list[dict]) -> Region:
    """Build a Region from a geocoder address_components list.

    Components are scanned in order, so a later component carrying the same
    type overwrites an earlier one.
    """
    parts = {"city": "", "state": "", "country": ""}
    for component in components:
        types = component.get("types") or []
        for component_type, field_name in COMPONENT_FIELDS.items():
            if component_type in types:
                parts[field_name] = component.get("long_name") or ""
    return Region(**parts)


async def resolve_region(
    places: GooglePlacesClient, coordinate: Coordinate | None
) -> Region | None:
    """Resolve a coordinate to a Region. None when absent or on any lookup miss."""
    if coordinate is None:
        return None

    results = await places.reverse_geocode(coordinate.lat, coordinate.lng)
    if not results:
        logger.info(f"No geocoding result for ({coordinate.lat}, {coordinate.lng})")
        return None

    try:
        return parse_address_components(results[0]["address_components"])
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        logger.warning(f"Malformed geocoding result for ({coordinate.lat}, {coordinate.lng}): {e!r}")
        return None
