"""
Livraria Catalog Service - Main Application
Aplicação FastAPI do catálogo da livraria
"""

from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.database import engine, Base
from .core.exceptions import AppException
from .core.exceptions.handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)
from .core.logging import configure_logging, get_logger
from .core.middleware import setup_cors, setup_correlation_id
from .features.catalog import models  # noqa: F401  (registra as tabelas no metadata)
from .features.catalog.schemas import PingResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Ciclo de vida da aplicação

    Startup:
        - inicializa o logging
        - cria as tabelas quando DATABASE_CREATE_TABLES=true

    Shutdown:
        - encerra o pool de conexões
    """
    configure_logging()
    logger.info(
        "Application starting",
        service=settings.app_title,
        version=settings.app_version,
        environment=settings.app_env,
        debug=settings.debug,
    )

    if settings.database_create_tables:
        # produção usa o schema provisionado externamente
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    yield

    await engine.dispose()
    logger.info("Database connections closed")


tags_metadata = [
    {"name": "Autores", "description": "Autores; o email é único"},
    {"name": "Livros", "description": "Livros; o ISBN é único e autor, categoria e editora devem existir"},
    {"name": "Categorias", "description": "Categorias; o nome é único sem diferenciar maiúsculas/minúsculas"},
    {"name": "Editoras", "description": "Editoras; o nome é único sem diferenciar maiúsculas/minúsculas"},
    {"name": "Health", "description": "Estado do serviço"},
    {"name": "Root", "description": "Informações da API"},
]

app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=settings.app_version,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)


# Middlewares
setup_cors(app)
setup_correlation_id(app)


# ==================== Routers ====================
from bookstore.api.router import api_router  # noqa: E402

app.include_router(api_router)


@app.get("/", tags=["Root"])
async def root():
    """Mensagem de boas-vindas"""
    return {"mensagem": "Bem-vindo à API da Livraria!"}


@app.get("/ping", tags=["Health"], response_model=List[PingResponse])
async def ping():
    """Fato estático de verificação"""
    return [{"id": 1, "msg": "pong"}]


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check

    Returns:
        dict: estado do serviço
    """
    return {
        "status": "ok",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }


@app.head("/health", tags=["Health"])
async def health_check_head():
    """Health check (HEAD)"""
    return JSONResponse(content={"status": "ok"})


# ==================== Global Exception Handlers ====================

# Exceções da aplicação (inclui as rejeições do catálogo)
app.add_exception_handler(AppException, app_exception_handler)

# Corpo da requisição inválido
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# HTTPException do FastAPI/Starlette
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

# Demais exceções (catch-all)
app.add_exception_handler(Exception, generic_exception_handler)
