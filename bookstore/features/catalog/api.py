"""
Catalog API
Rotas CRUD do catálogo (uma instância por tipo de entidade)
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from .dependencies import catalog_service_dependency
from .registry import EntitySpec
from .service import CatalogService
from .validators import parse_id


def build_router(spec: EntitySpec) -> APIRouter:
    """
    Monta o router de um tipo de entidade

    O corpo é validado pelos modelos de requisição do tipo
    (``spec.create_schema`` / ``spec.update_schema``); o primeiro erro vira
    400 com a mensagem do campo. O ID do caminho é recebido como texto e
    convertido por ``parse_id``: ID não numérico vira erro estrutural (400)
    sem acesso ao banco.
    """
    router = APIRouter()
    get_service = catalog_service_dependency(spec)
    response_model = spec.response_schema
    create_schema = spec.create_schema
    update_schema = spec.update_schema

    @router.get("", response_model=List[response_model])
    async def list_entities(service: CatalogService = Depends(get_service)):
        """Lista todos os registros com as relações"""
        return await service.list()

    @router.get("/{entity_id}", response_model=spec.view_schema)
    async def get_entity(entity_id: str, service: CatalogService = Depends(get_service)):
        """Busca um registro pelo ID"""
        return await service.get(parse_id(entity_id))

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    async def create_entity(
        payload: create_schema,
        service: CatalogService = Depends(get_service),
    ):
        """Cria um registro"""
        return await service.create(payload)

    @router.put("/{entity_id}", response_model=response_model)
    async def update_entity(
        entity_id: str,
        payload: update_schema,
        service: CatalogService = Depends(get_service),
    ):
        """Atualiza um registro (campos ausentes mantêm o valor atual)"""
        return await service.update(parse_id(entity_id), payload)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity(entity_id: str, service: CatalogService = Depends(get_service)):
        """Remove um registro"""
        await service.delete(parse_id(entity_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
