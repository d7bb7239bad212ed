from sqlalchemy import Boolean, Column, Integer, String, Text

from todo_app.core.database import Base


class TodoRow(Base):
    """
    Table layout for the SQL-backed store.
    Note: `id` is assigned by the application (max + 1), never by the database,
    and `position` keeps the collection in insertion order.
    """

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=False)
    position = Column(Integer, nullable=False, index=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    # stored verbatim as the ISO 8601 string handed out to clients
    created_at = Column(String(32), nullable=False)
