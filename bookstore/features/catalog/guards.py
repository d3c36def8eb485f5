"""
Catalog Consistency Guards
Unicidade de chave natural e integridade referencial
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.domain.repositories.base import AbstractRepository
from .exceptions import ConflictError, HasDependentsError, RelatedEntityNotFoundError
from .registry import EntitySpec

logger = logging.getLogger(__name__)


class UniquenessGuard:
    """
    Garante que a chave natural continua única na coleção

    - autor: email (exato)
    - categoria/editora: nome (sem diferenciar maiúsculas/minúsculas)
    - livro: ISBN (exato, após trim)
    """

    def __init__(self, repository: AbstractRepository, spec: EntitySpec):
        self.repository = repository
        self.spec = spec

    async def check(self, data: Dict[str, Any], existing: Optional[Any] = None) -> None:
        """
        Verifica colisão da chave natural

        Na criação a verificação sempre roda. Na atualização só roda quando a
        chave está no payload e difere do valor gravado; o próprio registro é
        excluído da busca.

        Args:
            data: payload normalizado
            existing: registro em atualização (None na criação)

        Raises:
            ConflictError: outro registro já usa a chave
        """
        key = self.spec.natural_key
        if key not in data:
            return

        candidate = data[key]
        if existing is not None and candidate == getattr(existing, key):
            return

        exclude_id = existing.id if existing is not None else None
        clash = await self.repository.find_by_natural_key(candidate, exclude_id=exclude_id)
        if clash is not None:
            logger.info(
                "Natural key collision",
                extra={"kind": self.spec.kind, "clash_id": clash.id},
            )
            message = (
                self.spec.conflict_message
                if existing is None
                else self.spec.conflict_update_message
            )
            raise ConflictError(message, field=self.spec.natural_key_field)


class ReferentialIntegrityGuard:
    """
    Integridade referencial verificada antes de cada escrita

    - escrita de livro: autor/categoria/editora referenciados devem existir
    - remoção de autor/categoria/editora: não pode haver livros associados
    """

    def __init__(self, db_session: AsyncSession, spec: EntitySpec):
        self.db_session = db_session
        self.spec = spec

    async def check_references(self, data: Dict[str, Any]) -> None:
        """
        Resolve cada chave estrangeira presente no payload

        Ordem: categoria, editora, autor. A primeira falha interrompe.

        Raises:
            RelatedEntityNotFoundError: referência inexistente
        """
        for ref in self.spec.references:
            if ref.attr not in data:
                continue
            repository = ref.repository(self.db_session)
            if not await repository.exists(data[ref.attr]):
                raise RelatedEntityNotFoundError(
                    ref.not_found_message, relation=ref.payload_key
                )

    async def check_dependents(self, repository: AbstractRepository, entity_id: int) -> None:
        """
        Recusa a remoção de registro com livros (sem cascata)

        Raises:
            HasDependentsError: existe ao menos um livro associado
        """
        if not self.spec.has_dependents:
            return
        count = await repository.count_books(entity_id)
        if count > 0:
            raise HasDependentsError(self.spec.dependents_message, dependents=count)
