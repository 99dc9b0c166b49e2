"""wit_client package exports."""

from .api import Wit
from .core.client import (
    API_VERSION,
    DEFAULT_BASE_URL,
    WitClient,
    WitClientError,
    WitDecodeError,
    WitHTTPError,
    WitInvalidRequestError,
    WitTransportError,
)
from .core.config import WitConfig, create_client_from_env, load_env_config
from .core.logging import setup_logging
from .models import (
    DatetimeIntervalEnd,
    Entity,
    EntityValue,
    Intent,
    Message,
    MessageContext,
    MessageEntity,
    MessageRequest,
    Outcome,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "Wit",
    "WitClient",
    "API_VERSION",
    "DEFAULT_BASE_URL",
    # Exceptions
    "WitClientError",
    "WitTransportError",
    "WitHTTPError",
    "WitDecodeError",
    "WitInvalidRequestError",
    # Models
    "Entity",
    "EntityValue",
    "Intent",
    "Message",
    "Outcome",
    "MessageEntity",
    "DatetimeIntervalEnd",
    "MessageContext",
    "MessageRequest",
    # Config / logging
    "WitConfig",
    "load_env_config",
    "create_client_from_env",
    "setup_logging",
]
