from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Create a base class for our models
Base = declarative_base()


def make_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # sessions are handed across FastAPI's worker threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, echo=echo)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# init db
def init_db(engine: Engine) -> None:
    # important: ensures models are registered before creating tables
    from todo_app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
