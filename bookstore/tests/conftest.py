"""
Pytest Configuration and Fixtures
Fixtures de teste (SQLite em memória por teste)
"""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from bookstore.main import app
from bookstore.core.database.base import Base
from bookstore.core.database.session import build_engine, build_session_factory, get_db
from bookstore.features.catalog import models  # noqa: F401


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine SQLite em memória com as tabelas criadas

    Cada teste recebe um banco novo e isolado.
    """
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine):
    return build_session_factory(test_engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Sessão de teste"""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP de teste

    ``get_db`` é substituído por sessões do engine de teste.
    """

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def author_payload():
    return {"nome": "Ana", "email": "ana@x.com"}


@pytest.fixture
async def seeded(client: AsyncClient):
    """
    Autor, categoria e editora já cadastrados

    Returns:
        dict: IDs criados (author_id, category_id, publisher_id)
    """
    author = await client.post("/autores", json={"nome": "Machado de Assis", "email": "machado@abl.org.br"})
    category = await client.post("/categorias", json={"nome": "Romance"})
    publisher = await client.post("/editoras", json={"nome": "Garnier"})
    assert author.status_code == 201
    assert category.status_code == 201
    assert publisher.status_code == 201
    return {
        "author_id": author.json()["id"],
        "category_id": category.json()["id"],
        "publisher_id": publisher.json()["id"],
    }


@pytest.fixture
def book_payload(seeded):
    def _make(**overrides):
        payload = {
            "titulo": "Dom Casmurro",
            "isbn": "978-85-359-0277-7",
            "ano": 1899,
            "paginas": 256,
            "categoria_id": seeded["category_id"],
            "editora_id": seeded["publisher_id"],
            "autor_id": seeded["author_id"],
        }
        payload.update(overrides)
        return payload

    return _make
