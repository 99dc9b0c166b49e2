from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WitModel(BaseModel):
    """
    Base model for wit.ai payloads.
    Optional fields default to None, which means "absent on the wire";
    the codec omits them on encode so partial documents stay partial.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Entities ---


class EntityValue(WitModel):
    value: Optional[str] = None
    expressions: Optional[List[str]] = None
    metadata: Optional[str] = None


class Entity(WitModel):
    builtin: Optional[bool] = None
    doc: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    values: Optional[List[EntityValue]] = None

    def find_value(self, value: str) -> Optional[EntityValue]:
        for candidate in self.values or []:
            if candidate.value == value:
                return candidate
        return None


# --- Intents ---


class Intent(WitModel):
    id: Optional[str] = None
    name: Optional[str] = None
    doc: Optional[str] = None
    metadata: Optional[str] = None


# --- Messages ---


class DatetimeIntervalEnd(WitModel):
    value: Optional[str] = None
    grain: Optional[str] = None


class MessageEntity(WitModel):
    """
    One extracted entity. The populated fields depend on the entity type:
      - number/temperature/amount: value, unit
      - datetime: value + grain, or an interval (from/to) and a values list
      - free text: body (plus start/end offsets)
    Fields missing from the payload stay None; a present 0 or "" is kept.
    """

    metadata: Optional[str] = None
    value: Optional[Any] = None
    grain: Optional[str] = None
    type: Optional[str] = None
    unit: Optional[str] = None
    body: Optional[str] = None
    entity: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None
    values: Optional[List[MessageEntity]] = None
    from_: Optional[DatetimeIntervalEnd] = Field(default=None, alias="from")
    to: Optional[DatetimeIntervalEnd] = None
    confidence: Optional[float] = None
    suggested: Optional[bool] = None

    def present_fields(self) -> List[str]:
        """Names of the fields that were set, in declaration order."""
        return [
            name
            for name in type(self).model_fields
            if name in self.model_fields_set and getattr(self, name) is not None
        ]

    @property
    def is_interval(self) -> bool:
        return self.type == "interval" or self.from_ is not None or self.to is not None


class Outcome(WitModel):
    text: Optional[str] = Field(default=None, alias="_text")
    intent: Optional[str] = None
    intent_id: Optional[str] = None
    confidence: Optional[float] = None
    entities: Dict[str, List[MessageEntity]] = Field(default_factory=dict)

    @field_validator("entities", mode="before")
    @classmethod
    def _null_entities(cls, v: Any) -> Any:
        return {} if v is None else v

    def first_entity(self, name: str) -> Optional[MessageEntity]:
        found = self.entities.get(name) or []
        return found[0] if found else None


class Message(WitModel):
    msg_id: Optional[str] = None
    text: Optional[str] = Field(default=None, alias="_text")
    outcomes: List[Outcome] = Field(default_factory=list)

    @field_validator("outcomes", mode="before")
    @classmethod
    def _null_outcomes(cls, v: Any) -> Any:
        return [] if v is None else v


# --- Requests ---


class MessageContext(WitModel):
    reference_time: Optional[str] = None
    timezone: Optional[str] = None
    state: Optional[List[str]] = None


class MessageRequest(BaseModel):
    """
    Parameters for text and audio analysis.
    Audio needs exactly one of `file` (a path) or `file_contents` (bytes).
    """

    file: Optional[Union[str, Path]] = None
    file_contents: Optional[bytes] = None
    query: Optional[str] = None
    msg_id: Optional[str] = None
    context: Optional[Union[str, MessageContext]] = None
    content_type: Optional[str] = None
    n: Optional[int] = None

    model_config = ConfigDict(extra="forbid")


MessageEntity.model_rebuild()
