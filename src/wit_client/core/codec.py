"""
JSON encode/decode between wit.ai payloads and the pydantic models.

Decoding never falls back to defaults on a shape mismatch: any failure is
raised as WitDecodeError so a 200 response with a bad body still fails loudly.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .client import WitDecodeError

T = TypeVar("T", bound=BaseModel)


def encode(model: BaseModel) -> bytes:
    """Compact JSON for a request body. Unset (None) fields are left out."""
    return model.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def encode_json(payload: Any) -> bytes:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def decode(model: Type[T], raw: bytes) -> T:
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise _decode_error(model.__name__, exc) from exc


@lru_cache(maxsize=None)
def _list_adapter(item_type: Any) -> TypeAdapter:
    return TypeAdapter(List[item_type])


def decode_list(item_type: Any, raw: bytes) -> list:
    """Decode a top-level JSON array, e.g. List[str] or List[Intent]."""
    try:
        return _list_adapter(item_type).validate_json(raw)
    except ValidationError as exc:
        name = getattr(item_type, "__name__", str(item_type))
        raise _decode_error(f"List[{name}]", exc) from exc


def _decode_error(target: str, exc: ValidationError) -> WitDecodeError:
    locations = [tuple(err.get("loc", ())) for err in exc.errors()]
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    detail = first.get("msg", str(exc))
    return WitDecodeError(
        f"Response did not match {target} at {where}: {detail}", errors=locations
    )


__all__ = ["encode", "encode_json", "decode", "decode_list"]
