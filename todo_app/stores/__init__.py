from todo_app.core.config import Settings
from todo_app.core.database import make_engine
from todo_app.stores.base import ReadResult, TodoStore
from todo_app.stores.json_file import JsonFileTodoStore
from todo_app.stores.memory import InMemoryTodoStore
from todo_app.stores.sql import SqlTodoStore

__all__ = [
    "InMemoryTodoStore",
    "JsonFileTodoStore",
    "ReadResult",
    "SqlTodoStore",
    "TodoStore",
    "build_store",
]


def build_store(settings: Settings) -> TodoStore:
    backend = settings.STORE_BACKEND.lower()
    if backend == "json":
        return JsonFileTodoStore(settings.TODOS_FILE)
    if backend == "memory":
        return InMemoryTodoStore()
    if backend == "sql":
        engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)
        return SqlTodoStore(engine)
    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND!r}")
