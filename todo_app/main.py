import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from todo_app.api.errors import register_error_handlers
from todo_app.api.v1.routers import router as api_router
from todo_app.core.config import Settings, settings
from todo_app.core.logging import setup_logging
from todo_app.stores import TodoStore, build_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code here
    # a reloader worker re-imports the app without going through run()
    if not logging.getLogger().handlers:
        setup_logging(app.state.settings.LOG_LEVEL)
    logger.info("Starting up the application...")
    # make sure the backing file (or table) exists before the first request
    app.state.store.initialize()

    yield
    # Shutdown code here
    logger.info("Shutting down the application...")


def create_app(
    store: TodoStore | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else build_store(app_settings)

    register_error_handlers(app)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")

    # mounted last so the API routes win
    static_dir = Path(app_settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    setup_logging(settings.LOG_LEVEL)
    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(
        "todo_app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    run()
