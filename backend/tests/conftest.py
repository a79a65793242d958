import pytest
import secrets
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from depo.main import app
from depo.database import Base, enable_sqlite_foreign_keys, get_db, init_models
from depo.auth import hash_token
from depo.config import SESSION_COOKIE_NAME
from depo.models import AuthSession, ProductGroup
import os


@pytest.fixture
async def db_engine(tmp_path):
    """
    Fixture tworzacy izolowany silnik bazy danych dla kazdego testu.

    Domyslnie uzywa pliku SQLite w katalogu tymczasowym, TEST_DATABASE_URL pozwala wskazac PostgreSQL.
    """
    url = os.getenv("TEST_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'depo_test.db'}")
    engine = create_async_engine(url, poolclass=NullPool)
    enable_sqlite_foreign_keys(engine)
    await init_models(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """
    Fixture tworzacy sesje bazy danych dla testu.
    """
    TestingSessionLocal = async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def override_db(db_session):
    """
    Fixture nadpisujacy zaleznosc get_db dla testow.
    """
    async def _override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = _override_get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def auth_token(db_session) -> str:
    """
    Fixture zapisujacy aktywna sesje i zwracajacy jej surowy token.
    """
    token = secrets.token_urlsafe(32)
    db_session.add(AuthSession(token_hash=hash_token(token), user_id="user-1"))
    await db_session.commit()
    return token


@pytest.fixture
async def client(override_db):
    """
    Klient HTTP bez ciasteczka sesji.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_client(override_db, auth_token):
    """
    Klient HTTP z ciasteczkiem aktywnej sesji.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={SESSION_COOKIE_NAME: auth_token},
    ) as ac:
        yield ac


@pytest.fixture
async def group(db_session) -> ProductGroup:
    """
    Fixture tworzacy grupe produktow.
    """
    group = ProductGroup(name="Elektrik")
    db_session.add(group)
    await db_session.commit()
    await db_session.refresh(group)
    return group
