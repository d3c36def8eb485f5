"""
Catalog Service
Pipeline de mutação do catálogo

validar → resolver registro atual → unicidade → integridade referencial
→ aplicar. Toda verificação e a escrita correspondente rodam dentro de uma
única transação (``session.begin()``); qualquer falha desfaz tudo.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.exceptions import AppException, ErrorCode
from .exceptions import (
    ConflictError,
    HasDependentsError,
    InternalError,
    NotFoundError,
    RelatedEntityNotFoundError,
)
from .guards import ReferentialIntegrityGuard, UniquenessGuard
from .registry import EntitySpec
from .validators import validate_payload

logger = logging.getLogger(__name__)

RELATED_NOT_FOUND_MESSAGE = "Entidade relacionada não encontrada"


class CatalogService:
    """
    Serviço de catálogo parametrizado por tipo de entidade

    Operações: list, get, create, update, delete. Rejeições esperadas
    (estrutura, inexistência, conflito, referência) saem como exceções
    tipadas antes de qualquer escrita; falhas de armazenamento saem como
    ``InternalError`` com mensagem genérica.

    DI Pattern: dependências recebidas pelo construtor.
    """

    def __init__(self, spec: EntitySpec, db_session: AsyncSession):
        """
        Args:
            spec: configuração do tipo de entidade
            db_session: sessão assíncrona do banco
        """
        self.spec = spec
        self.db_session = db_session
        self.repository = spec.repository(db_session)
        self.uniqueness = UniquenessGuard(self.repository, spec)
        self.referential = ReferentialIntegrityGuard(db_session, spec)

    # ==================== Read ====================

    async def list(self, with_relations: bool = True) -> List[Any]:
        """Lista todos os registros (com as relações diretas, por padrão)"""
        async with self._storage("list"):
            return await self.repository.get_all(with_relations=with_relations)

    async def get(self, entity_id: int) -> Any:
        """
        Busca um registro com as relações da consulta por ID

        Raises:
            NotFoundError: ID inexistente
        """
        async with self._storage("get", entity_id):
            instance = await self.repository.get_view(entity_id)
        if instance is None:
            raise NotFoundError(self.spec.not_found_message, entity_id=entity_id)
        return instance

    # ==================== Mutations ====================

    async def create(self, payload: Any) -> Any:
        """
        Cria um registro

        Args:
            payload: corpo da requisição (modelo de criação ou dict bruto)

        Returns:
            registro persistido com as relações

        Raises:
            StructuralError, ConflictError, RelatedEntityNotFoundError, InternalError
        """
        data = validate_payload(self.spec.create_schema, payload)

        async with self._storage("create", transactional=True):
            await self.uniqueness.check(data)
            await self.referential.check_references(data)
            instance = await self.repository.create(**data)
            created = await self.repository.get_detailed(instance.id)

        logger.info(
            "Catalog entity created",
            extra={"kind": self.spec.kind, "entity_id": created.id},
        )
        return created

    async def update(self, entity_id: int, payload: Any) -> Any:
        """
        Atualiza um registro (campos ausentes mantêm o valor atual)

        Raises:
            StructuralError, NotFoundError, ConflictError,
            RelatedEntityNotFoundError, InternalError
        """
        data = validate_payload(self.spec.update_schema, payload)

        async with self._storage("update", entity_id, transactional=True):
            existing = await self.repository.get(entity_id)
            if existing is None:
                raise NotFoundError(self.spec.not_found_message, entity_id=entity_id)

            await self.uniqueness.check(data, existing=existing)
            await self.referential.check_references(data)
            await self.repository.update(existing, **data)
            updated = await self.repository.get_detailed(entity_id)

        logger.info(
            "Catalog entity updated",
            extra={
                "kind": self.spec.kind,
                "entity_id": entity_id,
                "fields": sorted(data),
            },
        )
        return updated

    async def delete(self, entity_id: int) -> None:
        """
        Remove um registro; autor/categoria/editora com livros são recusados

        Raises:
            NotFoundError, HasDependentsError, InternalError
        """
        async with self._storage("delete", entity_id, transactional=True):
            existing = await self.repository.get(entity_id)
            if existing is None:
                raise NotFoundError(self.spec.not_found_message, entity_id=entity_id)

            await self.referential.check_dependents(self.repository, entity_id)
            await self.repository.delete(existing)

        logger.info(
            "Catalog entity deleted",
            extra={"kind": self.spec.kind, "entity_id": entity_id},
        )

    # ==================== Internals ====================

    @asynccontextmanager
    async def _storage(
        self,
        operation: str,
        entity_id: Optional[int] = None,
        transactional: bool = False,
    ) -> AsyncIterator[None]:
        """
        Escopo de acesso ao banco

        Com ``transactional`` o bloco roda dentro de ``session.begin()``
        (commit ao sair, rollback em erro). Violações de constraint viram as
        mesmas rejeições das verificações procedurais; demais falhas viram
        ``InternalError`` e são registradas com o stack trace.
        """
        try:
            if transactional:
                async with self.db_session.begin():
                    yield
            else:
                yield
        except AppException:
            raise
        except IntegrityError as e:
            raise self._from_integrity_error(e, operation, entity_id) from e
        except Exception as e:
            logger.exception(
                "Catalog storage failure",
                extra={
                    "kind": self.spec.kind,
                    "operation": operation,
                    "entity_id": entity_id,
                    "exception_type": type(e).__name__,
                },
            )
            raise InternalError() from e

    def _from_integrity_error(
        self, error: IntegrityError, operation: str, entity_id: Optional[int]
    ) -> AppException:
        """Converte violação de constraint detectada no commit/flush"""
        text = str(error.orig).lower()
        logger.warning(
            "Constraint violation at write",
            extra={
                "kind": self.spec.kind,
                "operation": operation,
                "entity_id": entity_id,
                "constraint_error": text,
            },
        )

        if "foreign key" in text:
            if operation == "delete" and self.spec.has_dependents:
                return HasDependentsError(self.spec.dependents_message)
            for ref in self.spec.references:
                if ref.table in text:
                    return RelatedEntityNotFoundError(
                        ref.not_found_message, relation=ref.payload_key
                    )
            return RelatedEntityNotFoundError(RELATED_NOT_FOUND_MESSAGE)

        if "unique" in text or "duplicate" in text:
            message = (
                self.spec.conflict_message
                if operation == "create"
                else self.spec.conflict_update_message
            )
            return ConflictError(message, field=self.spec.natural_key_field)

        logger.error(
            "Unmapped integrity error",
            extra={"kind": self.spec.kind, "operation": operation},
        )
        return InternalError(ErrorCode.SYS_DATABASE_ERROR)
