from typing import List

from fastapi import APIRouter, Depends

from bookstore.features.catalog.api import build_router
from bookstore.features.catalog.dependencies import catalog_service_dependency
from bookstore.features.catalog.registry import AUTHOR, CATALOG_REGISTRY
from bookstore.features.catalog.schemas import AuthorSummary
from bookstore.features.catalog.service import CatalogService

api_router = APIRouter()

for spec in CATALOG_REGISTRY.values():
    entity_router = build_router(spec)
    api_router.include_router(entity_router, prefix=f"/{spec.collection}", tags=[spec.tag])
    # aliases em inglês (/authors, /books, ...) fora do schema OpenAPI
    api_router.include_router(
        entity_router, prefix=f"/{spec.alias}", include_in_schema=False
    )


@api_router.get("/autor", tags=[AUTHOR.tag], response_model=List[AuthorSummary])
async def list_authors_without_books(
    service: CatalogService = Depends(catalog_service_dependency(AUTHOR)),
):
    """Lista simples de autores (sem os livros)"""
    return await service.list(with_relations=False)
