"""
Catalog Domain Models
Modelos ORM do catálogo (Autor, Categoria, Editora, Livro)
"""

from typing import List, Optional
from sqlalchemy import ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.core.database.base import Base


class Author(Base):
    """
    Autor

    ``email`` é único (comparação exata).
    """
    __tablename__ = "autores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nome", String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[Optional[str]] = mapped_column("telefone", String(50), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # passive_deletes: a remoção nunca carrega nem altera os livros;
    # o FK RESTRICT recusa a remoção se algum livro surgir no meio do caminho
    books: Mapped[List["Book"]] = relationship(
        "Book", back_populates="author", passive_deletes="all", order_by="Book.id"
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, email={self.email})>"


class Category(Base):
    """
    Categoria

    ``nome`` é único sem diferenciar maiúsculas/minúsculas.
    """
    __tablename__ = "categorias"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nome", String(255), nullable=False)

    books: Mapped[List["Book"]] = relationship(
        "Book", back_populates="category", passive_deletes="all", order_by="Book.id"
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"


class Publisher(Base):
    """
    Editora

    ``nome`` é único sem diferenciar maiúsculas/minúsculas.
    """
    __tablename__ = "editoras"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nome", String(255), nullable=False)
    address: Mapped[Optional[str]] = mapped_column("endereco", String(500), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column("telefone", String(50), nullable=True)

    books: Mapped[List["Book"]] = relationship(
        "Book", back_populates="publisher", passive_deletes="all", order_by="Book.id"
    )

    def __repr__(self) -> str:
        return f"<Publisher(id={self.id}, name={self.name})>"


class Book(Base):
    """
    Livro

    Referencia exatamente um autor, uma categoria e uma editora.
    """
    __tablename__ = "livros"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("titulo", String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    year: Mapped[int] = mapped_column("ano", Integer, nullable=False)
    pages: Mapped[Optional[int]] = mapped_column("paginas", Integer, nullable=True)
    summary: Mapped[Optional[str]] = mapped_column("resumo", Text, nullable=True)

    category_id: Mapped[int] = mapped_column(
        "categoria_id",
        ForeignKey("categorias.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    publisher_id: Mapped[int] = mapped_column(
        "editora_id",
        ForeignKey("editoras.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[int] = mapped_column(
        "autor_id",
        ForeignKey("autores.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    author: Mapped["Author"] = relationship("Author", back_populates="books")
    category: Mapped["Category"] = relationship("Category", back_populates="books")
    publisher: Mapped["Publisher"] = relationship("Publisher", back_populates="books")

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, isbn={self.isbn}, title={self.title})>"


# Unicidade do nome sem diferenciar maiúsculas/minúsculas
Index("uq_categorias_nome_lower", func.lower(Category.name), unique=True)
Index("uq_editoras_nome_lower", func.lower(Publisher.name), unique=True)
