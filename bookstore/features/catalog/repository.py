"""
Catalog Repositories
Acesso a dados do catálogo
"""

from typing import Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bookstore.domain.repositories.base import AbstractRepository
from .models import Author, Book, Category, Publisher


class AuthorRepository(AbstractRepository[Author]):
    """Repositório de autores"""

    eager_options = (selectinload(Author.books),)

    def __init__(self, db: AsyncSession):
        super().__init__(db, Author)

    async def find_by_natural_key(
        self, email: str, exclude_id: Optional[int] = None
    ) -> Optional[Author]:
        """
        Busca um autor pelo email (comparação exata)

        Args:
            email: email candidato
            exclude_id: ID ignorado na busca (registro em atualização)
        """
        query = select(Author).where(Author.email == email)
        if exclude_id is not None:
            query = query.where(Author.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def count_books(self, author_id: int) -> int:
        query = select(func.count()).select_from(Book).where(Book.author_id == author_id)
        result = await self.session.execute(query)
        return result.scalar_one()


class CategoryRepository(AbstractRepository[Category]):
    """Repositório de categorias"""

    eager_options = (selectinload(Category.books),)
    detail_options = (
        selectinload(Category.books).selectinload(Book.author),
        selectinload(Category.books).selectinload(Book.publisher),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    async def find_by_natural_key(
        self, name: str, exclude_id: Optional[int] = None
    ) -> Optional[Category]:
        """Busca por nome sem diferenciar maiúsculas/minúsculas"""
        query = select(Category).where(
            func.lower(Category.name) == name.strip().lower()
        )
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def count_books(self, category_id: int) -> int:
        query = (
            select(func.count()).select_from(Book).where(Book.category_id == category_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one()


class PublisherRepository(AbstractRepository[Publisher]):
    """Repositório de editoras"""

    eager_options = (selectinload(Publisher.books),)
    detail_options = (
        selectinload(Publisher.books).selectinload(Book.author),
        selectinload(Publisher.books).selectinload(Book.category),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(db, Publisher)

    async def find_by_natural_key(
        self, name: str, exclude_id: Optional[int] = None
    ) -> Optional[Publisher]:
        """Busca por nome sem diferenciar maiúsculas/minúsculas"""
        query = select(Publisher).where(
            func.lower(Publisher.name) == name.strip().lower()
        )
        if exclude_id is not None:
            query = query.where(Publisher.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def count_books(self, publisher_id: int) -> int:
        query = (
            select(func.count())
            .select_from(Book)
            .where(Book.publisher_id == publisher_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one()


class BookRepository(AbstractRepository[Book]):
    """
    Repositório de livros

    Livros são sempre retornados com autor, categoria e editora.
    """

    eager_options = (
        selectinload(Book.author),
        selectinload(Book.category),
        selectinload(Book.publisher),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(db, Book)

    async def find_by_natural_key(
        self, isbn: str, exclude_id: Optional[int] = None
    ) -> Optional[Book]:
        """Busca por ISBN (comparação exata após trim)"""
        query = select(Book).where(Book.isbn == isbn.strip())
        if exclude_id is not None:
            query = query.where(Book.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()
