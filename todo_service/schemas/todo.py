from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Todo(BaseModel):
    """A persisted todo item."""

    id: int
    text: str
    isComplete: bool = False

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1, "text": "JavaScript üben", "isComplete": False}}
    )


class TodoUpsertRequest(BaseModel):
    """Body of ``POST /todos`` and ``PUT /todos/{id}``.

    Both fields are optional at the parsing stage so that a missing ``text``
    is reported by the validator with the service's own error message.
    """

    text: Optional[str] = Field(default=None, description="Text of the todo, required and non-empty")
    isComplete: Optional[bool] = Field(default=None, description="Completion flag, defaults to false")

    model_config = ConfigDict(extra="ignore")

    @field_validator("isComplete", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> Optional[bool]:
        if v is None:
            return None
        return bool(v)


class ErrorResponse(BaseModel):
    error: str
