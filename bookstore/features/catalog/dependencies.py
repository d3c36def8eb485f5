"""
Catalog Feature Dependencies
Funções de injeção de dependência do catálogo
"""

from typing import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.database.session import get_db
from .registry import EntitySpec
from .service import CatalogService


def catalog_service_dependency(spec: EntitySpec) -> Callable[..., CatalogService]:
    """
    Cria a dependência que injeta o CatalogService de um tipo de entidade

    Cada requisição recebe a sua própria sessão (``get_db``).
    """

    def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
        return CatalogService(spec=spec, db_session=db)

    get_catalog_service.__name__ = f"get_{spec.kind}_service"
    return get_catalog_service
