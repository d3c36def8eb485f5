"""
Catalog Scenario Integration Tests
Fluxos ponta a ponta via HTTP (SQLite em memória)
"""

import pytest
from httpx import AsyncClient
from unittest.mock import AsyncMock, patch

from bookstore.features.catalog.service import CatalogService


class TestCatalogScenarios:
    """Cenários de referência do catálogo"""

    @pytest.mark.asyncio
    async def test_duplicate_author_email(self, client: AsyncClient):
        """Autor com email repetido → 409"""
        response = await client.post("/autores", json={"nome": "Ana", "email": "ana@x.com"})
        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["telefone"] is None
        assert body["bio"] is None
        assert body["livros"] == []

        response = await client.post("/autores", json={"nome": "Outra", "email": "ana@x.com"})
        assert response.status_code == 409
        assert response.json()["message"] == "Já existe um autor com este email"
        assert response.json()["error_code"] == "BIZ_003"

    @pytest.mark.asyncio
    async def test_category_name_collision_ignores_case(self, client: AsyncClient):
        """Nome de categoria é aparado e comparado sem caixa"""
        response = await client.post("/categorias", json={"nome": " Ficção "})
        assert response.status_code == 201
        assert response.json()["nome"] == "Ficção"

        response = await client.post("/categorias", json={"nome": "ficção"})
        assert response.status_code == 409
        assert response.json()["message"] == "Já existe uma categoria com este nome"

    @pytest.mark.asyncio
    async def test_book_with_missing_category(self, client: AsyncClient, book_payload):
        """Categoria inexistente → 400 e nenhum livro criado"""
        response = await client.post("/livros", json=book_payload(categoria_id=999))
        assert response.status_code == 400
        assert response.json()["message"] == "Categoria não encontrada"
        assert response.json()["error_code"] == "BIZ_101"

        response = await client.get("/livros")
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_author_with_books_cannot_be_deleted(
        self, client: AsyncClient, seeded, book_payload
    ):
        """Autor com livros → 409; autor continua cadastrado"""
        response = await client.post("/livros", json=book_payload())
        assert response.status_code == 201

        response = await client.delete(f"/autores/{seeded['author_id']}")
        assert response.status_code == 409
        assert (
            response.json()["message"]
            == "Não é possível deletar autor que possui livros associados"
        )

        response = await client.get(f"/autores/{seeded['author_id']}")
        assert response.status_code == 200
        assert len(response.json()["livros"]) == 1

    @pytest.mark.asyncio
    async def test_partial_book_update(self, client: AsyncClient, seeded, book_payload):
        """Atualização parcial preserva os campos omitidos"""
        created = (await client.post("/livros", json=book_payload())).json()

        response = await client.put(f"/livros/{created['id']}", json={"titulo": "New Title"})
        assert response.status_code == 200
        body = response.json()
        assert body["titulo"] == "New Title"
        assert body["isbn"] == created["isbn"]
        assert body["ano"] == created["ano"]
        assert body["paginas"] == 256
        assert body["autor_id"] == seeded["author_id"]
        assert body["categoria_id"] == seeded["category_id"]
        assert body["editora_id"] == seeded["publisher_id"]

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, client: AsyncClient):
        """ID não numérico → 400 sem acesso ao serviço"""
        with patch.object(CatalogService, "get", new=AsyncMock()) as mock_get:
            response = await client.get("/livros/abc")

        assert response.status_code == 400
        assert response.json()["message"] == "ID deve ser um número válido"
        mock_get.assert_not_awaited()
