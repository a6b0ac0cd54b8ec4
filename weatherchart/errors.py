"""Error types raised by normalization and the upstream gateways."""


class WeatherChartError(Exception):
    """Base class for every failure surfaced to the front end."""


class NormalizationError(WeatherChartError):
    """Upstream payload is missing or mistyped a required field."""


class UpstreamError(WeatherChartError):
    """Transport or HTTP status failure talking to an upstream service."""


class GeocodingError(UpstreamError):
    """Zip code could not be resolved to a single coordinate."""
