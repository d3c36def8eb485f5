"""
Database Session Management
Gerenciamento de sessões assíncronas do SQLAlchemy
"""

from typing import Any, AsyncGenerator, Dict, Optional
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ..config import settings


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite só aplica FOREIGN KEY com o pragma ativo em cada conexão"""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(
    url: str,
    echo: bool = False,
    isolation_level: Optional[str] = None,
) -> AsyncEngine:
    """
    Cria o engine assíncrono para a URL informada

    PostgreSQL usa pool com pre-ping; SQLite em memória usa StaticPool
    (uma única conexão compartilhada) e ativa as foreign keys.

    Args:
        url: URL assíncrona do SQLAlchemy
        echo: log de SQL
        isolation_level: nível de isolamento aplicado a todas as conexões

    Returns:
        AsyncEngine: engine configurado
    """
    kwargs: Dict[str, Any] = {"echo": echo}
    if isolation_level:
        kwargs["isolation_level"] = isolation_level

    parsed = make_url(url)
    is_sqlite = parsed.get_backend_name() == "sqlite"
    if is_sqlite:
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_pre_ping=True,  # valida a conexão antes do uso
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    engine = create_async_engine(url, **kwargs)
    if is_sqlite:
        _enable_sqlite_foreign_keys(engine)
    return engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Engine da aplicação
engine = build_engine(
    settings.database_url,
    echo=settings.database_echo,
    isolation_level=settings.database_isolation_level,
)

AsyncSessionLocal = build_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Gerador de sessão usado como dependência do FastAPI

    A sessão não abre transação por conta própria: cada operação de escrita
    do catálogo abre o seu escopo com ``session.begin()``. Leituras usam a
    transação implícita, descartada no fechamento da sessão.

    Usage:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Item))
            return result.scalars().all()

    Yields:
        AsyncSession: sessão assíncrona do banco de dados
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
