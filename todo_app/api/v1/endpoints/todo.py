from contextlib import AbstractContextManager

from fastapi import APIRouter, Depends

from todo_app.api.deps import get_store, get_write_lock
from todo_app.schemas import ErrorResponse, MessageResponse, Todo, TodoCreate
from todo_app.services.todo_crud import (
    create_todo,
    delete_todo,
    list_todos,
    toggle_todo,
)
from todo_app.stores import TodoStore

router = APIRouter()

# each route also answers with a trailing slash, so "/api/todos/" never
# falls through to the static mount

# list all TODO items
@router.get("", response_model=list[Todo], status_code=200)
@router.get(
    "/", response_model=list[Todo], status_code=200, include_in_schema=False
)
def list_todos_endpoint(
    store: TodoStore = Depends(get_store),
):
    return list_todos(store)


# create a new TODO item
@router.post(
    "",
    response_model=Todo,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.post("/", response_model=Todo, status_code=201, include_in_schema=False)
def create_todo_endpoint(
    todo: TodoCreate | None = None,
    store: TodoStore = Depends(get_store),
    lock: AbstractContextManager = Depends(get_write_lock),
):
    text = todo.text if todo is not None else None
    return create_todo(store, text, lock=lock)


# toggle completion of a TODO item by id
# todo_id stays a string: a non-numeric id is "not found", not a bad request
@router.put(
    "/{todo_id}",
    response_model=Todo,
    status_code=200,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.put("/{todo_id}/", response_model=Todo, include_in_schema=False)
def toggle_todo_endpoint(
    todo_id: str,
    store: TodoStore = Depends(get_store),
    lock: AbstractContextManager = Depends(get_write_lock),
):
    return toggle_todo(store, todo_id, lock=lock)


# delete a TODO item by id
@router.delete(
    "/{todo_id}",
    response_model=MessageResponse,
    status_code=200,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.delete(
    "/{todo_id}/", response_model=MessageResponse, include_in_schema=False
)
def delete_todo_endpoint(
    todo_id: str,
    store: TodoStore = Depends(get_store),
    lock: AbstractContextManager = Depends(get_write_lock),
):
    delete_todo(store, todo_id, lock=lock)
    return MessageResponse(message="Todo deleted successfully")
