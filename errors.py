class GatewayError(Exception):
    """Base for failures the API reports back to the caller as {"error": message}."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(GatewayError):
    """The catalog site could not be reached (network, timeout, bad URL)."""


class ParseError(GatewayError):
    """The fetched document could not be parsed at all."""


class ValidationError(GatewayError):
    """A required caller parameter is missing. Raised before any fetch."""
    status_code = 400
