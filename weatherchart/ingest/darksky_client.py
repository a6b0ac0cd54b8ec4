"""Dark Sky forecast API client."""

import logging

import httpx

from weatherchart.errors import UpstreamError

logger = logging.getLogger(__name__)

DARKSKY_BASE_URL = "https://api.darksky.net"


class DarkSkyClient:
    def __init__(
        self,
        secret: str,
        base_url: str = DARKSKY_BASE_URL,
        timeout: float = 10.0,
    ):
        self.secret = secret
        self.base_url = base_url
        self.timeout = timeout

    def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch the raw forecast payload for a point.

        Failures are raised as UpstreamError; nothing is retried. The secret
        is part of the URL path, so messages use a redacted form of the URL.
        """
        url = f"{self.base_url}/forecast/{self.secret}/{latitude},{longitude}"
        shown = f"{self.base_url}/forecast/***/{latitude},{longitude}"
        logger.debug("Fetching forecast %s", shown)

        try:
            resp = httpx.get(url, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Dark Sky request failed for %s: %s", shown, e)
            raise UpstreamError(f"{shown}: {type(e).__name__}") from e

        if resp.status_code != 200:
            logger.error("Dark Sky returned %d for %s", resp.status_code, shown)
            raise UpstreamError(f"{shown}: {resp.status_code} {resp.reason_phrase}")

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"{shown}: invalid JSON response") from e
