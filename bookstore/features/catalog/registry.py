"""
Catalog Entity Registry
Registro de configuração por tipo de entidade

O pipeline de mutação é único; cada tipo de entidade contribui apenas com
um ``EntitySpec``: modelos de requisição, chave natural, referências a resolver,
mensagens e esquemas de resposta.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel

from bookstore.domain.repositories.base import AbstractRepository
from .models import Author, Book, Category, Publisher
from .repository import (
    AuthorRepository,
    BookRepository,
    CategoryRepository,
    PublisherRepository,
)
from .schemas import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    BookCreate,
    BookResponse,
    BookUpdate,
    CategoryDetail,
    CategoryPayload,
    CategoryResponse,
    PublisherDetail,
    PublisherPayload,
    PublisherResponse,
)


@dataclass(frozen=True)
class ReferenceSpec:
    """Chave estrangeira do livro resolvida antes da escrita"""

    payload_key: str
    attr: str
    repository: Type[AbstractRepository]
    table: str
    not_found_message: str


@dataclass(frozen=True)
class EntitySpec:
    kind: str
    collection: str
    alias: str
    tag: str
    model: Type[Any]
    repository: Type[AbstractRepository]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    natural_key: str
    natural_key_field: str
    not_found_message: str
    conflict_message: str
    conflict_update_message: str
    dependents_message: Optional[str] = None
    references: Tuple[ReferenceSpec, ...] = field(default_factory=tuple)
    # resposta de GET /{id} quando difere de response_schema
    detail_schema: Optional[Type[BaseModel]] = None

    @property
    def has_dependents(self) -> bool:
        return self.dependents_message is not None

    @property
    def view_schema(self) -> Type[BaseModel]:
        return self.detail_schema or self.response_schema


AUTHOR = EntitySpec(
    kind="author",
    collection="autores",
    alias="authors",
    tag="Autores",
    model=Author,
    repository=AuthorRepository,
    create_schema=AuthorCreate,
    update_schema=AuthorUpdate,
    response_schema=AuthorResponse,
    natural_key="email",
    natural_key_field="email",
    not_found_message="Autor não encontrado",
    conflict_message="Já existe um autor com este email",
    conflict_update_message="Já existe outro autor com este email",
    dependents_message="Não é possível deletar autor que possui livros associados",
)

CATEGORY = EntitySpec(
    kind="category",
    collection="categorias",
    alias="categories",
    tag="Categorias",
    model=Category,
    repository=CategoryRepository,
    create_schema=CategoryPayload,
    update_schema=CategoryPayload,
    response_schema=CategoryResponse,
    detail_schema=CategoryDetail,
    natural_key="name",
    natural_key_field="nome",
    not_found_message="Categoria não encontrada",
    conflict_message="Já existe uma categoria com este nome",
    conflict_update_message="Já existe outra categoria com este nome",
    dependents_message="Não é possível deletar categoria que possui livros associados",
)

PUBLISHER = EntitySpec(
    kind="publisher",
    collection="editoras",
    alias="publishers",
    tag="Editoras",
    model=Publisher,
    repository=PublisherRepository,
    create_schema=PublisherPayload,
    update_schema=PublisherPayload,
    response_schema=PublisherResponse,
    detail_schema=PublisherDetail,
    natural_key="name",
    natural_key_field="nome",
    not_found_message="Editora não encontrada",
    conflict_message="Já existe uma editora com este nome",
    conflict_update_message="Já existe outra editora com este nome",
    dependents_message="Não é possível deletar editora que possui livros associados",
)

BOOK = EntitySpec(
    kind="book",
    collection="livros",
    alias="books",
    tag="Livros",
    model=Book,
    repository=BookRepository,
    create_schema=BookCreate,
    update_schema=BookUpdate,
    response_schema=BookResponse,
    natural_key="isbn",
    natural_key_field="isbn",
    not_found_message="Livro não encontrado",
    conflict_message="Já existe um livro com este ISBN",
    conflict_update_message="Já existe outro livro com este ISBN",
    references=(
        ReferenceSpec(
            payload_key="categoria_id",
            attr="category_id",
            repository=CategoryRepository,
            table="categorias",
            not_found_message="Categoria não encontrada",
        ),
        ReferenceSpec(
            payload_key="editora_id",
            attr="publisher_id",
            repository=PublisherRepository,
            table="editoras",
            not_found_message="Editora não encontrada",
        ),
        ReferenceSpec(
            payload_key="autor_id",
            attr="author_id",
            repository=AuthorRepository,
            table="autores",
            not_found_message="Autor não encontrado",
        ),
    ),
)

CATALOG_REGISTRY: Dict[str, EntitySpec] = {
    spec.kind: spec for spec in (AUTHOR, CATEGORY, PUBLISHER, BOOK)
}


def get_entity_spec(kind: str) -> EntitySpec:
    """Busca o EntitySpec pelo tipo ('author', 'book', ...)"""
    try:
        return CATALOG_REGISTRY[kind]
    except KeyError:
        raise KeyError(f"Unknown entity kind: {kind}") from None
