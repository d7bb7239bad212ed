import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_app.core.errors import (
    TodoError,
    TodoNotFoundError,
    TodoPersistenceError,
    TodoValidationError,
)
from todo_app.services.todo_crud import TEXT_REQUIRED

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[TodoError], int] = {
    TodoValidationError: 400,
    TodoNotFoundError: 404,
    TodoPersistenceError: 500,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), 500)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(status_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # only the create body is validated by FastAPI itself
    logger.debug("Rejected request body: %s", exc.errors())
    return error_response(400, TEXT_REQUIRED)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
