import logging

from todo_app.schemas import Todo, TodoList
from todo_app.stores.base import ReadResult, TodoStore
from todo_app.stores.json_file import dump_todos

logger = logging.getLogger(__name__)


class InMemoryTodoStore(TodoStore):
    """
    Process-local store.

    The collection is kept serialized, so every read hands out fresh objects
    and a caller mutating its copy never changes the stored state without a
    write, same as with the file store.
    """

    def __init__(self, todos: list[Todo] | None = None):
        self._data: str | None = None
        if todos is not None:
            self._data = dump_todos(todos)

    def initialize(self) -> None:
        if self._data is None:
            self._data = "[]"

    def read_result(self) -> ReadResult:
        try:
            self.initialize()
            return ReadResult(todos=TodoList.validate_json(self._data))
        except Exception as exc:
            logger.exception("Error reading todos from memory")
            return ReadResult(error=exc)

    def write_all(self, todos: list[Todo]) -> bool:
        try:
            self._data = dump_todos(todos)
            return True
        except Exception:
            logger.exception("Error writing todos to memory")
            return False
