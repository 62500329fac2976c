"""Integration test fixtures.

Each test gets its own SQLite file database under ``tmp_path``, with foreign
keys enforced like the application engine.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bluevelvet.infrastructure.persistence.sqlalchemy.init_db import create_engine
from bluevelvet.infrastructure.persistence.sqlalchemy.models import Base
from bluevelvet.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'bluevelvet-test.db'}"


@pytest_asyncio.fixture
async def test_db_engine(database_url):
    engine = create_engine(database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def factory(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session)
