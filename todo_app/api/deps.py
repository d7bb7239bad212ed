import threading
from contextlib import AbstractContextManager, nullcontext

from fastapi import Request

from todo_app.stores import TodoStore

_write_lock = threading.Lock()


# Dependency to get the store the app was built with
def get_store(request: Request) -> TodoStore:
    return request.app.state.store


# Dependency to get the guard around read-modify-write cycles
def get_write_lock(request: Request) -> AbstractContextManager:
    if request.app.state.settings.SERIALIZE_WRITES:
        return _write_lock
    return nullcontext()
