"""Error taxonomy for fetch, parse, render and delivery failures."""


class WeatherRelayError(Exception):
    """Base class for all weatherrelay failures."""


class ConfigError(WeatherRelayError):
    """Raised when required configuration is missing or invalid."""


class FetchError(WeatherRelayError):
    """Raised when the forecast document could not be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(WeatherRelayError):
    """Raised when a payload is not valid JSON or does not match the schema."""


class EmptyDocumentArray(ParseError):
    """Raised when the upstream returned a JSON array with no documents."""


class TimestampParseError(WeatherRelayError):
    """Raised when a block's first timeDefines entry is not a tz-aware datetime."""


class DeliveryError(WeatherRelayError):
    """Raised when the webhook notification could not be delivered."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
