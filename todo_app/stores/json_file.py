import json
import logging
from pathlib import Path

from todo_app.schemas import Todo, TodoList
from todo_app.stores.base import ReadResult, TodoStore

logger = logging.getLogger(__name__)


def dump_todos(todos: list[Todo]) -> str:
    payload = [todo.model_dump(by_alias=True) for todo in todos]
    return json.dumps(payload, indent=2, ensure_ascii=False)


class JsonFileTodoStore(TodoStore):
    """Keeps the collection as one pretty-printed JSON array in one file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def initialize(self) -> None:
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")
            logger.info("Initialized empty todos file at %s", self.path)

    def read_result(self) -> ReadResult:
        try:
            self.initialize()
            data = self.path.read_text(encoding="utf-8")
            return ReadResult(todos=TodoList.validate_json(data))
        except Exception as exc:
            logger.exception("Error reading todos from %s", self.path)
            return ReadResult(error=exc)

    def write_all(self, todos: list[Todo]) -> bool:
        try:
            # serialize fully before touching the file
            data = dump_todos(todos)
            self.path.write_text(data, encoding="utf-8")
            return True
        except Exception:
            logger.exception("Error writing todos to %s", self.path)
            return False
