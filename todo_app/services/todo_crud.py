"""
CRUD LAYER (Store Logic Only)

Architecture:
    API Layer   → FastAPI (routes, Depends, response_model)
    CRUD Layer  → Read / mutate / write cycles over a TodoStore (this file)
    Store Layer → JSON file, in-memory or SQL backends

Rules:
✅ Accept the TodoStore explicitly.
❌ Never use Depends() here.
❌ Never raise HTTPException. Raise todo domain errors, the API layer maps them.
✅ Every operation re-reads the whole collection and writes the whole collection.
❌ No write for READ operations.
"""

import logging
import re
from contextlib import AbstractContextManager, nullcontext

from todo_app.core.errors import (
    TodoNotFoundError,
    TodoPersistenceError,
    TodoValidationError,
)
from todo_app.schemas import Todo, utc_timestamp
from todo_app.stores import TodoStore

logger = logging.getLogger(__name__)

TEXT_REQUIRED = "Todo text is required"
NOT_FOUND = "Todo not found"

# leading integer, the rest of the segment is ignored
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_todo_id(raw: str | int) -> int | None:
    """
    Lenient integer parse of a path id.

    "12" -> 12, " 7" -> 7, "12abc" -> 12, "1.5" -> 1, "abc" -> None.
    Only ASCII digits count, and an id too long to convert is None too.
    None never matches a record, so malformed ids end up as "not found".
    """
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # beyond the interpreter's integer string conversion limit
        return None


def next_todo_id(todos: list[Todo]) -> int:
    # max + 1: a deleted max id is handed out again
    return max((todo.id for todo in todos), default=0) + 1


def list_todos(store: TodoStore) -> list[Todo]:
    # list all todo items
    return store.read_all()


def create_todo(
    store: TodoStore,
    text: object,
    lock: AbstractContextManager | None = None,
) -> Todo:
    # create a new todo item
    if not isinstance(text, str) or not text.strip():
        raise TodoValidationError(TEXT_REQUIRED)

    with lock or nullcontext():
        todos = store.read_all()
        todo_item = Todo(
            id=next_todo_id(todos),
            text=text.strip(),
            created_at=utc_timestamp(),
        )
        todos.append(todo_item)

        if not store.write_all(todos):
            raise TodoPersistenceError("Failed to save todo")

    logger.info("Created todo %s", todo_item.id)
    return todo_item


def toggle_todo(
    store: TodoStore,
    raw_id: str | int,
    lock: AbstractContextManager | None = None,
) -> Todo:
    # flip the completed flag of a todo item by id
    todo_id = parse_todo_id(raw_id)

    with lock or nullcontext():
        todos = store.read_all()
        todo_item = next((todo for todo in todos if todo.id == todo_id), None)
        if todo_item is None:
            raise TodoNotFoundError(NOT_FOUND)

        todo_item.completed = not todo_item.completed

        if not store.write_all(todos):
            raise TodoPersistenceError("Failed to update todo")

    return todo_item


def delete_todo(
    store: TodoStore,
    raw_id: str | int,
    lock: AbstractContextManager | None = None,
) -> None:
    # delete a todo item by id
    todo_id = parse_todo_id(raw_id)

    with lock or nullcontext():
        todos = store.read_all()
        remaining = [todo for todo in todos if todo.id != todo_id]
        if len(remaining) == len(todos):
            raise TodoNotFoundError(NOT_FOUND)

        if not store.write_all(remaining):
            raise TodoPersistenceError("Failed to delete todo")

    logger.info("Deleted todo %s", todo_id)
