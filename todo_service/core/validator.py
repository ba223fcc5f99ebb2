"""Validation of create/update payloads before they reach the store."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from core.validators import as_flag, required_text
from todo_service.core.exceptions import ValidationError
from todo_service.schemas.todo import TodoUpsertRequest

EMPTY_TEXT_MESSAGE = "Todo text cannot be empty"


@dataclass(frozen=True)
class TodoFields:
    text: str
    is_complete: bool


def validate_upsert(payload: Union[TodoUpsertRequest, Mapping[str, Any], None]) -> TodoFields:
    """Return the fields to persist, or raise ``ValidationError``.

    ``text`` must be present and non-empty; whitespace-only text is accepted.
    ``isComplete`` is coerced to a boolean, absent meaning False.
    """
    if payload is None:
        raise ValidationError(EMPTY_TEXT_MESSAGE)
    if isinstance(payload, TodoUpsertRequest):
        text, is_complete = payload.text, payload.isComplete
    else:
        text, is_complete = payload.get("text"), payload.get("isComplete")

    if not required_text(text):
        raise ValidationError(EMPTY_TEXT_MESSAGE)
    return TodoFields(text=text, is_complete=as_flag(is_complete))
