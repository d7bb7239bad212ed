import pytest
from fastapi.testclient import TestClient

from todo_app.core.config import Settings
from todo_app.main import create_app
from todo_app.schemas import Todo
from todo_app.stores import JsonFileTodoStore, TodoStore


class FailingWriteStore(JsonFileTodoStore):
    """Reads normally, refuses every write."""

    def write_all(self, todos: list[Todo]) -> bool:
        return False


@pytest.fixture
def todos_file(tmp_path):
    return tmp_path / "todos.json"


@pytest.fixture
def store(todos_file) -> TodoStore:
    return JsonFileTodoStore(todos_file)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        STATIC_DIR=str(tmp_path / "public"),
        TODOS_FILE=str(tmp_path / "todos.json"),
    )


@pytest.fixture
def client(store, settings):
    app = create_app(store=store, app_settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_client(todos_file, settings):
    app = create_app(store=FailingWriteStore(todos_file), app_settings=settings)
    with TestClient(app) as test_client:
        yield test_client


def make_todo(todo_id: int, text: str = "task", completed: bool = False) -> Todo:
    return Todo(
        id=todo_id,
        text=text,
        completed=completed,
        created_at="2026-01-01T10:00:00.000Z",
    )
