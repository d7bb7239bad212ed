import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from todo_app.core.database import init_db, make_session_factory
from todo_app.models import TodoRow
from todo_app.schemas import Todo
from todo_app.stores.base import ReadResult, TodoStore

logger = logging.getLogger(__name__)


class SqlTodoStore(TodoStore):
    """
    Relational store with the same whole-collection contract.

    `write_all` replaces the table contents inside one transaction, so a
    failed write leaves the previous collection in place.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    def initialize(self) -> None:
        init_db(self.engine)

    def read_result(self) -> ReadResult:
        session: Session = self.session_factory()
        try:
            rows = session.query(TodoRow).order_by(TodoRow.position).all()
            todos = [
                Todo(
                    id=row.id,
                    text=row.text,
                    completed=row.completed,
                    created_at=row.created_at,
                )
                for row in rows
            ]
            return ReadResult(todos=todos)
        except SQLAlchemyError as exc:
            logger.exception("Error reading todos from database")
            return ReadResult(error=exc)
        finally:
            session.close()

    def write_all(self, todos: list[Todo]) -> bool:
        session: Session = self.session_factory()
        try:
            session.query(TodoRow).delete()
            session.add_all(
                TodoRow(
                    id=todo.id,
                    position=position,
                    text=todo.text,
                    completed=todo.completed,
                    created_at=todo.created_at,
                )
                for position, todo in enumerate(todos)
            )
            session.commit()
            return True
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Error writing todos to database")
            return False
        finally:
            session.close()
