"""
Domain errors raised by the CRUD layer.

They carry a message that is safe to show to a client, and nothing about
HTTP. The API layer maps each kind onto a status code.
"""


class TodoError(Exception):
    """Base class for todo domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TodoValidationError(TodoError):
    """Malformed or missing input."""


class TodoNotFoundError(TodoError):
    """No record with the requested id."""


class TodoPersistenceError(TodoError):
    """The collection could not be written back to the store."""
