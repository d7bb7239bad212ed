from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with milliseconds and a `Z` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Todo(BaseModel):
    id: int
    text: str
    completed: bool = False
    # set once by create_todo, a stored record must carry it
    created_at: str = Field(alias="createdAt")

    # stored ids are compared as-is, "1" is not 1
    model_config = ConfigDict(populate_by_name=True, strict=True)


class TodoCreate(BaseModel):
    # presence and emptiness are checked by the CRUD layer
    text: str | None = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


TodoList = TypeAdapter(list[Todo])
