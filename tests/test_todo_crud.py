import threading
from datetime import datetime

import pytest

from todo_app.core.errors import (
    TodoNotFoundError,
    TodoPersistenceError,
    TodoValidationError,
)
from todo_app.services import todo_crud
from todo_app.stores import InMemoryTodoStore

from .conftest import FailingWriteStore, make_todo


@pytest.fixture
def store():
    return InMemoryTodoStore()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        (" 7", 7),
        ("+3", 3),
        ("-2", -2),
        ("12abc", 12),
        ("1.5", 1),
        ("abc", None),
        ("", None),
        ("x12", None),
        ("١", None),
        ("12٣", 12),
        ("9" * 5000, None),
        (5, 5),
    ],
)
def test_parse_todo_id(raw, expected):
    assert todo_crud.parse_todo_id(raw) == expected


def test_next_todo_id_on_empty_collection():
    assert todo_crud.next_todo_id([]) == 1


def test_next_todo_id_is_max_plus_one_not_length():
    todos = [make_todo(4), make_todo(2)]

    assert todo_crud.next_todo_id(todos) == 5


def test_ids_follow_max_plus_one_after_deletions(store):
    for text in ("a", "b", "c"):
        todo_crud.create_todo(store, text)

    todo_crud.delete_todo(store, 1)
    assert todo_crud.create_todo(store, "d").id == 4

    todo_crud.delete_todo(store, 4)
    # the deleted max id is handed out again
    assert todo_crud.create_todo(store, "e").id == 4
    assert [todo.id for todo in store.read_all()] == [2, 3, 4]


def test_create_trims_text_and_defaults(store):
    todo = todo_crud.create_todo(store, "  Buy milk  ")

    assert todo.text == "Buy milk"
    assert todo.completed is False
    assert store.read_all() == [todo]


def test_create_sets_iso_utc_timestamp(store):
    todo = todo_crud.create_todo(store, "a")

    assert todo.created_at.endswith("Z")
    parsed = datetime.fromisoformat(todo.created_at.replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


@pytest.mark.parametrize("text", [None, "", "   ", "\t\n", 5, ["a"]])
def test_create_rejects_missing_or_blank_text(store, text):
    with pytest.raises(TodoValidationError, match="Todo text is required"):
        todo_crud.create_todo(store, text)

    assert store.read_all() == []


def test_toggle_twice_restores_value(store):
    created = todo_crud.create_todo(store, "a")

    assert todo_crud.toggle_todo(store, str(created.id)).completed is True
    assert todo_crud.toggle_todo(store, str(created.id)).completed is False
    assert store.read_all()[0].completed is False


def test_toggle_never_changes_text_or_timestamp(store):
    created = todo_crud.create_todo(store, "a")

    toggled = todo_crud.toggle_todo(store, created.id)

    assert toggled.text == created.text
    assert toggled.created_at == created.created_at


@pytest.mark.parametrize("raw_id", ["9999", "abc", "0"])
def test_toggle_missing_id_leaves_collection(store, raw_id):
    todo_crud.create_todo(store, "a")
    before = store.read_all()

    with pytest.raises(TodoNotFoundError, match="Todo not found"):
        todo_crud.toggle_todo(store, raw_id)

    assert store.read_all() == before


@pytest.mark.parametrize("raw_id", ["9999", "abc"])
def test_delete_missing_id_leaves_collection(store, raw_id):
    todo_crud.create_todo(store, "a")
    before = store.read_all()

    with pytest.raises(TodoNotFoundError):
        todo_crud.delete_todo(store, raw_id)

    assert store.read_all() == before


def test_delete_only_record_leaves_empty_file(tmp_path):
    from todo_app.stores import JsonFileTodoStore

    path = tmp_path / "todos.json"
    store = JsonFileTodoStore(path)
    todo_crud.create_todo(store, "only")

    todo_crud.delete_todo(store, "1")

    assert path.exists()
    assert path.read_text() == "[]"


@pytest.mark.parametrize(
    "operation, message",
    [
        (lambda store: todo_crud.create_todo(store, "new"), "Failed to save todo"),
        (lambda store: todo_crud.toggle_todo(store, "1"), "Failed to update todo"),
        (lambda store: todo_crud.delete_todo(store, "1"), "Failed to delete todo"),
    ],
)
def test_write_failure_raises_persistence_error(tmp_path, operation, message):
    path = tmp_path / "todos.json"
    path.write_text('[{"id": 1, "text": "a", "completed": false, "createdAt": "x"}]')
    store = FailingWriteStore(path)

    with pytest.raises(TodoPersistenceError, match=message):
        operation(store)

    assert [todo.completed for todo in store.read_all()] == [False]


def test_lock_is_held_during_mutation(store):
    lock = threading.Lock()
    seen = []

    class SpyStore(InMemoryTodoStore):
        def write_all(self, todos):
            seen.append(lock.locked())
            return super().write_all(todos)

    spy = SpyStore()
    todo_crud.create_todo(spy, "a", lock=lock)
    todo_crud.toggle_todo(spy, "1", lock=lock)
    todo_crud.delete_todo(spy, "1", lock=lock)

    assert seen == [True, True, True]
    assert not lock.locked()
