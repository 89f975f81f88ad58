"""Exception types raised by nomics-client."""


class NomicsError(Exception):
    """Base class for all nomics-client errors."""


class TransportError(NomicsError):
    """The upstream API could not be reached or answered with a non-2xx status.

    Attributes:
        url: Requested URL with the API key redacted.
        status_code: HTTP status code, or None when no response was received.
    """

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedResponseError(NomicsError):
    """The response body is not valid JSON or lacks a required field."""


class InvalidArgumentError(NomicsError, ValueError):
    """A caller supplied a parameter the operation cannot work with."""


class CurrencyNotFoundError(InvalidArgumentError):
    """The requested currency is absent from the fetched price set."""

    def __init__(self, currency: str):
        super().__init__(f"Currency {currency} not found in price set")
        self.currency = currency
