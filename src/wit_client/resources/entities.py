from __future__ import annotations

from typing import List

from wit_client.core.client import WitClient
from wit_client.core.codec import decode, decode_list, encode, encode_json
from wit_client.core.errors import WitInvalidRequestError
from wit_client.core.paths import build_path, escape_expression, escape_segment
from wit_client.models import Entity, EntityValue

RESOURCE = "entities"


def _entity_path(entity_id: str, *rest: str) -> str:
    if not entity_id:
        raise WitInvalidRequestError("entity id must be provided.")
    return build_path(RESOURCE, escape_segment(entity_id), *rest)


def list_entities(client: WitClient) -> List[str]:
    """List the ids of all entities, builtin ones included (e.g. 'wit$datetime')."""
    raw = client.get("/entities", resource=RESOURCE)
    return decode_list(str, raw)


def get_entity(client: WitClient, entity_id: str) -> Entity:
    raw = client.get(_entity_path(entity_id), resource=RESOURCE)
    return decode(Entity, raw)


def create_entity(client: WitClient, entity: Entity) -> Entity:
    """
    Create an entity and return it as stored by the service.

    A duplicate id fails with WitHTTPError("Conflict"); POSTs are not
    safely retryable.
    """
    raw = client.post("/entities", encode(entity), resource=RESOURCE)
    return decode(Entity, raw)


def update_entity(client: WitClient, entity: Entity) -> Entity:
    """
    Update an entity by id. Fields left as None are not sent, so the
    service keeps its current values for them.
    """
    if not entity.id:
        raise WitInvalidRequestError("entity.id must be set to update an entity.")
    raw = client.put(_entity_path(entity.id), encode(entity), resource=RESOURCE)
    return decode(Entity, raw)


def delete_entity(client: WitClient, entity_id: str) -> None:
    client.delete(_entity_path(entity_id), resource=RESOURCE)


def create_entity_value(
    client: WitClient, entity_id: str, value: EntityValue
) -> Entity:
    if not value.value:
        raise WitInvalidRequestError("value.value must be set.")
    raw = client.post(
        _entity_path(entity_id, "values"), encode(value), resource=RESOURCE
    )
    return decode(Entity, raw)


def delete_entity_value(client: WitClient, entity_id: str, value: str) -> None:
    client.delete(
        _entity_path(entity_id, "values", escape_segment(value)), resource=RESOURCE
    )


def create_entity_value_expression(
    client: WitClient, entity_id: str, value: str, expression: str
) -> Entity:
    path = _entity_path(entity_id, "values", escape_segment(value), "expressions")
    raw = client.post(path, encode_json({"expression": expression}), resource=RESOURCE)
    return decode(Entity, raw)


def delete_entity_value_expression(
    client: WitClient, entity_id: str, value: str, expression: str
) -> None:
    path = _entity_path(
        entity_id,
        "values",
        escape_segment(value),
        "expressions",
        escape_expression(expression),
    )
    client.delete(path, resource=RESOURCE)


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
]
