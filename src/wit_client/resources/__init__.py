"""One module per wit.ai resource family; every function takes a WitClient first."""

from .entities import (
    create_entity,
    create_entity_value,
    create_entity_value_expression,
    delete_entity,
    delete_entity_value,
    delete_entity_value_expression,
    get_entity,
    list_entities,
    update_entity,
)
from .intents import list_intents
from .messages import get_message, get_message_by_id, send_audio

__all__ = [
    "list_entities",
    "get_entity",
    "create_entity",
    "update_entity",
    "delete_entity",
    "create_entity_value",
    "delete_entity_value",
    "create_entity_value_expression",
    "delete_entity_value_expression",
    "list_intents",
    "get_message",
    "get_message_by_id",
    "send_audio",
]
