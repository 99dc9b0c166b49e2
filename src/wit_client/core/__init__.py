"""Core transport, codec and config for wit-client (resource-agnostic)."""

from .client import (
    API_VERSION,
    DEFAULT_BASE_URL,
    WitClient,
    WitClientError,
    WitDecodeError,
    WitHTTPError,
    WitInvalidRequestError,
    WitTransportError,
)
from .codec import decode, decode_list, encode, encode_json
from .config import (
    WitConfig,
    create_client_from_env,
    load_env_config,
    require_env_config,
)
from .logging import setup_logging
from .observability import log_event
from .paths import (
    build_path,
    escape_expression,
    escape_segment,
    with_query,
    with_version,
)

__all__ = [
    # Client
    "WitClient",
    "API_VERSION",
    "DEFAULT_BASE_URL",
    # Exceptions
    "WitClientError",
    "WitTransportError",
    "WitHTTPError",
    "WitDecodeError",
    "WitInvalidRequestError",
    # Codec
    "encode",
    "encode_json",
    "decode",
    "decode_list",
    # Paths
    "build_path",
    "escape_segment",
    "escape_expression",
    "with_query",
    "with_version",
    # Config helpers
    "WitConfig",
    "create_client_from_env",
    "load_env_config",
    "require_env_config",
    # Logging
    "setup_logging",
    "log_event",
]
