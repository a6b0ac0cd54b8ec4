"""SmartyStreets zip code lookup client."""

import logging

import httpx

from weatherchart.errors import GeocodingError, UpstreamError
from weatherchart.models.forecast import LatLng

logger = logging.getLogger(__name__)

SMARTYSTREETS_BASE_URL = "https://us-zipcode.api.smartystreets.com"


class SmartyStreetsClient:
    def __init__(
        self,
        auth_id: str,
        auth_token: str,
        base_url: str = SMARTYSTREETS_BASE_URL,
        timeout: float = 10.0,
    ):
        self.auth_id = auth_id
        self.auth_token = auth_token
        self.base_url = base_url
        self.timeout = timeout

    def lookup(self, zipcode: str) -> LatLng:
        """Resolve a zip code to the centroid of its tabulation area."""
        url = f"{self.base_url}/lookup"
        params = {
            "auth-id": self.auth_id,
            "auth-token": self.auth_token,
            "zipcode": zipcode,
        }
        logger.debug("Looking up zipcode=%s", zipcode)

        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("SmartyStreets request failed for zipcode=%s: %s", zipcode, e)
            raise UpstreamError(f"{url}: {type(e).__name__}") from e

        if resp.status_code != 200:
            logger.error(
                "SmartyStreets returned %d for zipcode=%s", resp.status_code, zipcode
            )
            raise UpstreamError(f"{url}: {resp.status_code} {resp.reason_phrase}")

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(f"{url}: invalid JSON response") from e

        return _extract_lat_lng(data, zipcode)


def _extract_lat_lng(data: object, zipcode: str) -> LatLng:
    """Pick the single coordinate out of a lookup response.

    A lookup returns one result per input; an unknown code comes back with a
    ``status``/``reason`` pair and no ``zipcodes`` list.
    """
    if not isinstance(data, list) or not data:
        raise GeocodingError(f"Unknown zip code {zipcode}")

    result = data[0]
    zipcodes = result.get("zipcodes") if isinstance(result, dict) else None
    if not zipcodes:
        reason = result.get("reason", "no match") if isinstance(result, dict) else "no match"
        raise GeocodingError(f"Unknown zip code {zipcode}: {reason}")

    points = set()
    for z in zipcodes:
        try:
            points.add((float(z["latitude"]), float(z["longitude"])))
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError(f"Malformed lookup result for zip code {zipcode}") from e

    if len(points) > 1:
        raise GeocodingError(
            f"Ambiguous zip code {zipcode}: {len(points)} locations match"
        )

    latitude, longitude = points.pop()
    return LatLng(latitude=latitude, longitude=longitude)
