"""
Base Repository Interface
Classe base abstrata para o padrão Repository
"""

from abc import ABC
from typing import Generic, TypeVar, Type, Optional, List, Any, Sequence

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

from bookstore.core.database.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class AbstractRepository(ABC, Generic[ModelType]):
    """
    Abstract Repository Interface

    Operações CRUD básicas sobre uma tabela com chave inteira ``id``.
    Subclasses informam em ``eager_options`` as relações carregadas junto
    com a entidade (sessões assíncronas não fazem lazy load).
    """

    eager_options: Sequence[LoaderOption] = ()
    # consulta por ID; vazio usa eager_options
    detail_options: Sequence[LoaderOption] = ()

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        self.session = session
        self.model = model

    async def get(self, id: int) -> Optional[ModelType]:
        """Busca uma entidade pelo ID (sem relações)"""
        query = select(self.model).where(self.model.id == id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_detailed(
        self, id: int, options: Optional[Sequence[LoaderOption]] = None
    ) -> Optional[ModelType]:
        """Busca uma entidade pelo ID com as relações carregadas"""
        if options is None:
            options = self.eager_options
        query = (
            select(self.model)
            .options(*options)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_view(self, id: int) -> Optional[ModelType]:
        """Busca para a consulta por ID (GET /{id})"""
        return await self.get_detailed(id, self.detail_options or self.eager_options)

    async def get_all(self, with_relations: bool = True) -> List[ModelType]:
        """Lista todas as entidades (com as relações, por padrão)"""
        query = select(self.model).order_by(self.model.id)
        if with_relations:
            query = query.options(*self.eager_options)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def exists(self, id: int) -> bool:
        query = select(func.count()).select_from(self.model).where(self.model.id == id)
        result = await self.session.execute(query)
        return result.scalar_one() > 0

    async def create(self, **kwargs: Any) -> ModelType:
        """Cria a entidade e faz flush para obter o ID gerado"""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """Aplica os campos informados e faz flush"""
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self.session.flush()
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Remove a entidade"""
        await self.session.delete(instance)
        await self.session.flush()
