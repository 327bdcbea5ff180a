from contextlib import contextmanager
from typing import Generator

from sqlmodel import create_engine, SQLModel, Session

from app.config import get_config

# Engine singleton (postgresql+psycopg:// por padrão)
DATABASE_URL = get_config().database_url
engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True)


def get_session() -> Generator[Session, None, None]:
    """Dependency do FastAPI para obter sessão do banco."""
    with Session(engine) as session:
        yield session


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
    """Context manager para obter sessão do banco (uso fora de FastAPI Depends)."""
    with Session(engine) as session:
        yield session


def create_tables():
    """Cria todas as tabelas (útil para testes e ambiente local)."""
    import app.db.base  # noqa: F401  registra os modelos no metadata

    SQLModel.metadata.create_all(engine)
