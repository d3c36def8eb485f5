"""
Catalog Service Tests (Unit Test with Mocks)
Tradução de falhas de armazenamento do pipeline
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.exceptions import ErrorCode
from bookstore.features.catalog.exceptions import (
    ConflictError,
    HasDependentsError,
    InternalError,
    NotFoundError,
    RelatedEntityNotFoundError,
    StructuralError,
)
from bookstore.features.catalog.registry import AUTHOR, BOOK, CATEGORY
from bookstore.features.catalog.service import CatalogService


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


@pytest.fixture
def mock_db_session():
    return MagicMock(spec=AsyncSession)


class TestIntegrityErrorTranslation:
    """Violação de constraint no flush/commit → mesma rejeição da verificação"""

    def test_unique_violation_on_create(self, mock_db_session):
        service = CatalogService(AUTHOR, mock_db_session)

        error = service._from_integrity_error(
            _integrity_error("UNIQUE constraint failed: autores.email"), "create", None
        )

        assert isinstance(error, ConflictError)
        assert error.message == "Já existe um autor com este email"

    def test_unique_violation_on_update(self, mock_db_session):
        service = CatalogService(CATEGORY, mock_db_session)

        error = service._from_integrity_error(
            _integrity_error(
                'duplicate key value violates unique constraint "uq_categorias_nome_lower"'
            ),
            "update",
            3,
        )

        assert isinstance(error, ConflictError)
        assert error.message == "Já existe outra categoria com este nome"
        assert error.field == "nome"

    def test_foreign_key_violation_on_owner_delete(self, mock_db_session):
        service = CatalogService(AUTHOR, mock_db_session)

        error = service._from_integrity_error(
            _integrity_error("FOREIGN KEY constraint failed"), "delete", 1
        )

        assert isinstance(error, HasDependentsError)
        assert error.status_code == 409

    def test_foreign_key_violation_names_the_relation(self, mock_db_session):
        service = CatalogService(BOOK, mock_db_session)

        error = service._from_integrity_error(
            _integrity_error(
                'insert or update on table "livros" violates foreign key constraint '
                '"fk_livros_editora_id_editoras"'
            ),
            "create",
            None,
        )

        assert isinstance(error, RelatedEntityNotFoundError)
        assert error.message == "Editora não encontrada"
        assert error.status_code == 400

    def test_unnamed_foreign_key_violation(self, mock_db_session):
        service = CatalogService(BOOK, mock_db_session)

        error = service._from_integrity_error(
            _integrity_error("FOREIGN KEY constraint failed"), "update", 2
        )

        assert isinstance(error, RelatedEntityNotFoundError)
        assert error.message == "Entidade relacionada não encontrada"

    def test_unknown_constraint_is_internal(self, mock_db_session):
        service = CatalogService(BOOK, mock_db_session)

        error = service._from_integrity_error(
            _integrity_error("NOT NULL constraint failed: livros.titulo"), "create", None
        )

        assert isinstance(error, InternalError)
        assert error.error_code == ErrorCode.SYS_DATABASE_ERROR.value
        assert error.message == "Erro interno do servidor"


class TestStorageFailures:
    """Falhas inesperadas não vazam detalhes"""

    @pytest.mark.asyncio
    async def test_list_failure_is_masked(self, mock_db_session):
        service = CatalogService(AUTHOR, mock_db_session)
        service.repository.get_all = AsyncMock(
            side_effect=OperationalError("SELECT ...", {}, Exception("connection refused"))
        )

        with pytest.raises(InternalError) as exc_info:
            await service.list()

        assert exc_info.value.status_code == 500
        assert "connection refused" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, mock_db_session):
        service = CatalogService(BOOK, mock_db_session)
        service.repository.get_detailed = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get(99)

        assert exc_info.value.message == "Livro não encontrado"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_structural_error_precedes_storage(self, mock_db_session):
        """Payload inválido é recusado sem abrir transação"""
        service = CatalogService(AUTHOR, mock_db_session)

        with pytest.raises(StructuralError):
            await service.create({"email": "ana@x.com"})

        mock_db_session.begin.assert_not_called()
