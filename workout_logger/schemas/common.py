"""Shared schema building blocks: camelCase base model, ids, timestamps."""

import uuid
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Opaque unique id for a new entity."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC so history sorts without tz errors
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(as_utc)]
Weekday = Annotated[int, Field(ge=0, le=6)]  # 0 = Sunday … 6 = Saturday


class DocumentModel(BaseModel):
    """Base for everything stored in the app-state document.

    Field names are snake_case in Python and camelCase on the wire
    (``is_custom`` <-> ``isCustom``). Instances are frozen: state changes
    produce new objects through ``model_copy``. Floats must be finite so the
    exported document stays plain JSON.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )
