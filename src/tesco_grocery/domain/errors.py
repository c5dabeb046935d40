"""Errors raised by the grocery API client."""


class GroceryApiError(Exception):
    """Base class for all client errors."""


class TransportError(GroceryApiError):
    """Raised when the HTTP round trip itself fails."""


class PreconditionError(GroceryApiError):
    """Raised locally when a call needs a session key that is not present."""


class DecodeError(GroceryApiError):
    """Raised when a payload cannot be decoded into the expected record.

    The raw payload text is appended to the message and kept on ``raw`` since
    the upstream API is known to emit malformed bodies.
    """

    def __init__(self, reason: str, raw: str) -> None:
        super().__init__(f"{reason}\n{raw}")
        self.reason = reason
        self.raw = raw


class ServerError(GroceryApiError):
    """Raised when the server answers with a non-zero status code."""

    def __init__(self, code: int, info: str) -> None:
        super().__init__(f"{code}: {info}")
        self.code = code
        self.info = info
