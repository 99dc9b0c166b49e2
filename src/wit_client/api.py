"""
High-level wit.ai client: one constructor, one method per endpoint.

Example:
    with Wit("<ACCESS-TOKEN>") as wit:
        entity = wit.entity("wit$temperature")
        message = wit.message(MessageRequest(query="what's the weather tomorrow?"))
"""

from __future__ import annotations

from typing import List, Optional

import httpx

from .core.client import API_VERSION, DEFAULT_BASE_URL, WitClient
from .core.config import require_env_config
from .models import Entity, EntityValue, Intent, Message, MessageRequest
from .resources import entities as entity_ops
from .resources import intents as intent_ops
from .resources import messages as message_ops


class Wit:
    """
    Typed wit.ai client. Each instance owns its credential and transport;
    nothing is shared between instances, and an instance is safe to use
    from several threads at once.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = API_VERSION,
        timeout_seconds: Optional[float] = None,
        debug: bool = False,
        http: Optional[httpx.Client] = None,
    ):
        self.client = WitClient(
            access_token=access_token,
            base_url=base_url,
            api_version=api_version,
            timeout_seconds=timeout_seconds,
            debug=debug,
            http=http,
        )

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True, **kwargs) -> "Wit":
        cfg = require_env_config(use_dotenv=use_dotenv)
        kwargs.setdefault("base_url", cfg.base_url)
        kwargs.setdefault("api_version", cfg.api_version)
        kwargs.setdefault("debug", cfg.debug)
        return cls(cfg.access_token, **kwargs)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Wit":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Entities ---

    def entities(self) -> List[str]:
        return entity_ops.list_entities(self.client)

    def entity(self, entity_id: str) -> Entity:
        return entity_ops.get_entity(self.client, entity_id)

    def create_entity(self, entity: Entity) -> Entity:
        return entity_ops.create_entity(self.client, entity)

    def update_entity(self, entity: Entity) -> Entity:
        return entity_ops.update_entity(self.client, entity)

    def delete_entity(self, entity_id: str) -> None:
        entity_ops.delete_entity(self.client, entity_id)

    def create_entity_value(self, entity_id: str, value: EntityValue) -> Entity:
        return entity_ops.create_entity_value(self.client, entity_id, value)

    def delete_entity_value(self, entity_id: str, value: str) -> None:
        entity_ops.delete_entity_value(self.client, entity_id, value)

    def create_entity_value_exp(
        self, entity_id: str, value: str, expression: str
    ) -> Entity:
        return entity_ops.create_entity_value_expression(
            self.client, entity_id, value, expression
        )

    def delete_entity_value_exp(
        self, entity_id: str, value: str, expression: str
    ) -> None:
        entity_ops.delete_entity_value_expression(
            self.client, entity_id, value, expression
        )

    # --- Intents ---

    def intents(self) -> List[Intent]:
        return intent_ops.list_intents(self.client)

    # --- Messages ---

    def message(self, request: MessageRequest) -> Message:
        return message_ops.get_message(self.client, request)

    def messages(self, msg_id: str) -> Message:
        return message_ops.get_message_by_id(self.client, msg_id)

    def audio_message(self, request: MessageRequest) -> Message:
        return message_ops.send_audio(self.client, request)


__all__ = ["Wit"]
