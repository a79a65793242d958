from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from typing import AsyncGenerator

from depo.config import DATABASE_URL, DATABASE_ECHO

# pre_ping odswieza zerwane polaczenia do zdalnego PostgreSQL
engine = create_async_engine(DATABASE_URL, echo=DATABASE_ECHO, pool_pre_ping=True)

def enable_sqlite_foreign_keys(bind: AsyncEngine) -> None:
    """
    Wlacza sprawdzanie kluczy obcych dla kazdego nowego polaczenia SQLite.

    SQLite domyslnie ignoruje klucze obce, PostgreSQL zawsze je sprawdza.

    Args:
        bind: Silnik bazy danych.
    """
    if bind.dialect.name != "sqlite":
        return

    @event.listens_for(bind.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

class Base(DeclarativeBase):
    pass

async def init_models(bind: AsyncEngine = engine) -> None:
    """
    Tworzy brakujace tabele magazynu (produkty, grupy, sesje).

    Args:
        bind: Silnik bazy danych, domyslnie silnik aplikacji.
    """
    # import rejestruje modele w Base.metadata
    from depo import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Zaleznosc dostarczajaca jedna sesje bazy danych na zadanie HTTP.

    Yields:
        AsyncSession: Asynchroniczna sesja bazy danych.
    """
    async with AsyncSessionLocal() as session:
        yield session
