import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.fakes import FakeTokenMinter, RecordingNotifier
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_notifier, get_token_minter, get_unit_of_work
from src.adapter.services.password_hasher import hash_password
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import User

@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def users(db_session, test_data):
    """Seed the users from test_data.json"""
    created = []
    for data in test_data.users():
        password = data.pop("password")
        user = User(
            **data,
            password_hash=hash_password(password, rounds=4),
        )
        db_session.add(user)
        created.append(user)
    await db_session.commit()
    return created


@pytest_asyncio.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
def app(db_session, notifier):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_token_minter] = FakeTokenMinter
    app.dependency_overrides[get_notifier] = lambda: notifier
    return app


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
