"""
Catalog Guard Tests (Unit Test with Mocks)
Unicidade e integridade referencial (Mock, sem banco)

🎯 Itens verificados:
    1. UniquenessGuard
       - colisão na criação → mensagem "Já existe um ..."
       - colisão na atualização → mensagem "Já existe outro ..."
       - atualização sem mudar a chave não consulta o banco
    2. ReferentialIntegrityGuard
       - ordem de verificação: categoria, editora, autor
       - remoção recusada quando há livros
"""

import dataclasses
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.features.catalog.exceptions import (
    ConflictError,
    HasDependentsError,
    RelatedEntityNotFoundError,
)
from bookstore.features.catalog.guards import ReferentialIntegrityGuard, UniquenessGuard
from bookstore.features.catalog.registry import AUTHOR, BOOK, CATEGORY
from bookstore.features.catalog.repository import AuthorRepository, CategoryRepository


@pytest.fixture
def mock_author_repo():
    repo = MagicMock(spec=AuthorRepository)
    repo.find_by_natural_key = AsyncMock(return_value=None)
    repo.count_books = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def mock_db_session():
    return MagicMock(spec=AsyncSession)


def _book_spec_with(exists_by_table):
    """BOOK com repositórios de referência substituídos por mocks"""
    references = []
    for ref in BOOK.references:
        repo = MagicMock()
        repo.exists = AsyncMock(return_value=exists_by_table[ref.table])
        references.append(
            dataclasses.replace(ref, repository=MagicMock(return_value=repo))
        )
    return dataclasses.replace(BOOK, references=tuple(references))


class TestUniquenessGuard:
    """Chave natural"""

    @pytest.mark.asyncio
    async def test_create_without_clash_passes(self, mock_author_repo):
        guard = UniquenessGuard(mock_author_repo, AUTHOR)

        await guard.check({"name": "Ana", "email": "ana@x.com"})

        mock_author_repo.find_by_natural_key.assert_awaited_once_with(
            "ana@x.com", exclude_id=None
        )

    @pytest.mark.asyncio
    async def test_create_clash_uses_create_message(self, mock_author_repo):
        mock_author_repo.find_by_natural_key.return_value = SimpleNamespace(id=9)
        guard = UniquenessGuard(mock_author_repo, AUTHOR)

        with pytest.raises(ConflictError) as exc_info:
            await guard.check({"name": "Ana", "email": "ana@x.com"})

        assert exc_info.value.message == "Já existe um autor com este email"
        assert exc_info.value.status_code == 409
        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_update_clash_uses_update_message(self, mock_author_repo):
        mock_author_repo.find_by_natural_key.return_value = SimpleNamespace(id=9)
        existing = SimpleNamespace(id=1, email="old@x.com")
        guard = UniquenessGuard(mock_author_repo, AUTHOR)

        with pytest.raises(ConflictError) as exc_info:
            await guard.check({"email": "taken@x.com"}, existing=existing)

        assert exc_info.value.message == "Já existe outro autor com este email"
        mock_author_repo.find_by_natural_key.assert_awaited_once_with(
            "taken@x.com", exclude_id=1
        )

    @pytest.mark.asyncio
    async def test_update_with_unchanged_key_skips_lookup(self, mock_author_repo):
        existing = SimpleNamespace(id=1, email="ana@x.com")
        guard = UniquenessGuard(mock_author_repo, AUTHOR)

        await guard.check({"email": "ana@x.com", "bio": "x"}, existing=existing)

        mock_author_repo.find_by_natural_key.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_without_key_skips_lookup(self, mock_author_repo):
        guard = UniquenessGuard(mock_author_repo, AUTHOR)

        await guard.check({"bio": "x"}, existing=SimpleNamespace(id=1, email="a@x.com"))

        mock_author_repo.find_by_natural_key.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_category_case_change_still_checked(self):
        """'Ficção' → 'FICÇÃO' é mudança de valor; o próprio registro é excluído"""
        repo = MagicMock(spec=CategoryRepository)
        repo.find_by_natural_key = AsyncMock(return_value=None)
        guard = UniquenessGuard(repo, CATEGORY)

        await guard.check({"name": "FICÇÃO"}, existing=SimpleNamespace(id=4, name="Ficção"))

        repo.find_by_natural_key.assert_awaited_once_with("FICÇÃO", exclude_id=4)


class TestReferentialIntegrityGuard:
    """Referências do livro e dependentes"""

    @pytest.mark.asyncio
    async def test_all_references_exist(self, mock_db_session):
        spec = _book_spec_with({"categorias": True, "editoras": True, "autores": True})
        guard = ReferentialIntegrityGuard(mock_db_session, spec)

        await guard.check_references({"category_id": 1, "publisher_id": 2, "author_id": 3})

    @pytest.mark.asyncio
    async def test_category_checked_first(self, mock_db_session):
        spec = _book_spec_with({"categorias": False, "editoras": False, "autores": False})
        guard = ReferentialIntegrityGuard(mock_db_session, spec)

        with pytest.raises(RelatedEntityNotFoundError) as exc_info:
            await guard.check_references({"category_id": 1, "publisher_id": 2, "author_id": 3})

        assert exc_info.value.message == "Categoria não encontrada"
        assert exc_info.value.status_code == 400
        assert exc_info.value.relation == "categoria_id"

    @pytest.mark.asyncio
    async def test_missing_author(self, mock_db_session):
        spec = _book_spec_with({"categorias": True, "editoras": True, "autores": False})
        guard = ReferentialIntegrityGuard(mock_db_session, spec)

        with pytest.raises(RelatedEntityNotFoundError) as exc_info:
            await guard.check_references({"category_id": 1, "publisher_id": 2, "author_id": 3})

        assert exc_info.value.message == "Autor não encontrado"

    @pytest.mark.asyncio
    async def test_absent_references_are_not_resolved(self, mock_db_session):
        spec = _book_spec_with({"categorias": False, "editoras": False, "autores": False})
        guard = ReferentialIntegrityGuard(mock_db_session, spec)

        await guard.check_references({"title": "Só o título"})

        for ref in spec.references:
            ref.repository.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_with_books_cannot_be_deleted(self, mock_db_session, mock_author_repo):
        mock_author_repo.count_books.return_value = 2
        guard = ReferentialIntegrityGuard(mock_db_session, AUTHOR)

        with pytest.raises(HasDependentsError) as exc_info:
            await guard.check_dependents(mock_author_repo, 1)

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Não é possível deletar autor que possui livros associados"
        assert exc_info.value.dependents == 2

    @pytest.mark.asyncio
    async def test_owner_without_books_can_be_deleted(self, mock_db_session, mock_author_repo):
        guard = ReferentialIntegrityGuard(mock_db_session, AUTHOR)

        await guard.check_dependents(mock_author_repo, 1)

        mock_author_repo.count_books.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_book_has_no_dependents_check(self, mock_db_session, mock_author_repo):
        guard = ReferentialIntegrityGuard(mock_db_session, BOOK)

        await guard.check_dependents(mock_author_repo, 1)

        mock_author_repo.count_books.assert_not_awaited()
