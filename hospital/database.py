from sqlmodel import create_engine, Session, SQLModel
from typing import Generator

from hospital.config import DATABASE_URL, SQL_ECHO

# Sync dependencies and handlers each run in FastAPI's threadpool, not always the same thread
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


def init_db() -> None:
    """
    Create any missing tables. Existing tables and rows are left alone.
    """
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Create a database session generator, one session per request.
    """
    with Session(engine) as session:
        yield session
