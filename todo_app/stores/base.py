from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from todo_app.schemas import Todo


@dataclass
class ReadResult:
    todos: list[Todo] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TodoStore(ABC):
    """
    Whole-collection persistence for todo records.

    Every operation works on the complete, ordered collection: callers read
    everything, mutate it in memory and write everything back. There is no
    locking here; overlapping read-modify-write cycles are last-writer-wins.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Make sure the backing resource exists. Idempotent."""

    @abstractmethod
    def read_result(self) -> ReadResult:
        """Read the collection, reporting a failure instead of raising."""

    @abstractmethod
    def write_all(self, todos: list[Todo]) -> bool:
        """Replace the whole collection. Returns False on any failure."""

    def read_all(self) -> list[Todo]:
        # a failed read looks exactly like an empty collection
        return self.read_result().todos
