from .client import (
    WitClientError,
    WitDecodeError,
    WitHTTPError,
    WitInvalidRequestError,
    WitTransportError,
)

__all__ = [
    "WitClientError",
    "WitTransportError",
    "WitHTTPError",
    "WitDecodeError",
    "WitInvalidRequestError",
]
