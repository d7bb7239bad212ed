from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the application."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Todo API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # json | memory | sql
    STORE_BACKEND: str = "json"
    TODOS_FILE: str = "todos.json"
    STATIC_DIR: str = "public"
    # only used when STORE_BACKEND=sql
    DATABASE_URL: str = "sqlite:///./todos.db"
    # opt-in: run every mutation under a single process-wide lock
    SERIALIZE_WRITES: bool = False


settings = Settings()
