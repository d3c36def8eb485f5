"""
Catalog Schemas
Esquemas de requisição e resposta do catálogo

Os atributos seguem os nomes do modelo ORM; o JSON usa os nomes em
português (``validation_alias`` na entrada, ``serialization_alias`` na saída).
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .validators import optional_int, optional_text, required_int, required_text


# ==================== Requests ====================


class CatalogPayload(BaseModel):
    """Base dos corpos de requisição (chaves desconhecidas são ignoradas)"""

    model_config = ConfigDict(extra="ignore")


class AuthorUpdate(CatalogPayload):
    """Atualização de autor: só os campos enviados são validados"""

    name: Optional[str] = Field(None, validation_alias="nome", description="Nome do autor")
    email: Optional[str] = Field(None, description="Email (único, comparação exata)")
    phone: Optional[str] = Field(None, validation_alias="telefone")
    bio: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return required_text(v, "Nome do autor é obrigatório")

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str:
        """O email é mantido exatamente como enviado"""
        return required_text(v, "Email do autor é obrigatório", trim=False)

    @field_validator("phone", mode="before")
    @classmethod
    def validate_phone(cls, v: Any) -> Optional[str]:
        return optional_text(v, "Telefone deve ser um texto")

    @field_validator("bio", mode="before")
    @classmethod
    def validate_bio(cls, v: Any) -> Optional[str]:
        return optional_text(v, "Bio deve ser um texto")


class AuthorCreate(AuthorUpdate):
    """Criação de autor: ``nome`` e ``email`` obrigatórios"""

    model_config = ConfigDict(
        validate_default=True,
        json_schema_extra={
            "example": {
                "nome": "Machado de Assis",
                "email": "machado@abl.org.br",
                "telefone": None,
                "bio": "Fundador da Academia Brasileira de Letras",
            }
        },
    )


class CategoryPayload(CatalogPayload):
    """Categoria (criação e atualização): ``nome`` sempre obrigatório"""

    name: Optional[str] = Field(None, validation_alias="nome", validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return required_text(v, "Nome da categoria é obrigatório")


class PublisherPayload(CatalogPayload):
    """Editora (criação e atualização): ``nome`` sempre obrigatório"""

    name: Optional[str] = Field(None, validation_alias="nome", validate_default=True)
    address: Optional[str] = Field(None, validation_alias="endereco")
    phone: Optional[str] = Field(None, validation_alias="telefone")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return required_text(v, "Nome da editora é obrigatório")

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v: Any) -> Optional[str]:
        return optional_text(v, "Endereço deve ser um texto")

    @field_validator("phone", mode="before")
    @classmethod
    def validate_phone(cls, v: Any) -> Optional[str]:
        return optional_text(v, "Telefone deve ser um texto")


BOOK_REFERENCE_MESSAGES = {
    "category_id": "ID da categoria é obrigatório e deve ser um número",
    "publisher_id": "ID da editora é obrigatório e deve ser um número",
    "author_id": "ID do autor é obrigatório e deve ser um número",
}


class BookUpdate(CatalogPayload):
    """
    Atualização de livro: só os campos enviados são validados

    A ordem dos campos é a ordem de validação: titulo, isbn, ano,
    categoria_id, editora_id, autor_id, paginas, resumo.
    """

    title: Optional[str] = Field(None, validation_alias="titulo")
    isbn: Optional[str] = Field(None, description="ISBN (único, comparação após trim)")
    year: Optional[int] = Field(None, validation_alias="ano")
    category_id: Optional[int] = Field(None, validation_alias="categoria_id")
    publisher_id: Optional[int] = Field(None, validation_alias="editora_id")
    author_id: Optional[int] = Field(None, validation_alias="autor_id")
    pages: Optional[int] = Field(None, validation_alias="paginas")
    summary: Optional[str] = Field(None, validation_alias="resumo")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        return required_text(v, "Título do livro é obrigatório")

    @field_validator("isbn", mode="before")
    @classmethod
    def validate_isbn(cls, v: Any) -> str:
        return required_text(v, "ISBN do livro é obrigatório")

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v: Any) -> int:
        return required_int(v, "Ano deve ser um número válido")

    @field_validator("category_id", "publisher_id", "author_id", mode="before")
    @classmethod
    def validate_reference(cls, v: Any, info: ValidationInfo) -> int:
        return required_int(v, BOOK_REFERENCE_MESSAGES[info.field_name])

    @field_validator("pages", mode="before")
    @classmethod
    def validate_pages(cls, v: Any) -> Optional[int]:
        return optional_int(v, "Páginas deve ser um número válido")

    @field_validator("summary", mode="before")
    @classmethod
    def validate_summary(cls, v: Any) -> Optional[str]:
        return optional_text(v, "Resumo deve ser um texto")


class BookCreate(BookUpdate):
    """Criação de livro: todos os campos exceto ``paginas`` e ``resumo``"""

    model_config = ConfigDict(
        validate_default=True,
        json_schema_extra={
            "example": {
                "titulo": "Dom Casmurro",
                "isbn": "978-85-359-0277-7",
                "ano": 1899,
                "categoria_id": 1,
                "editora_id": 1,
                "autor_id": 1,
                "paginas": 256,
            }
        },
    )


# ==================== Responses ====================


class CatalogSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class AuthorSummary(CatalogSchema):
    """Autor sem relações"""

    id: int
    name: str = Field(..., serialization_alias="nome")
    email: str
    phone: Optional[str] = Field(None, serialization_alias="telefone")
    bio: Optional[str] = None


class CategorySummary(CatalogSchema):
    """Categoria sem relações"""

    id: int
    name: str = Field(..., serialization_alias="nome")


class PublisherSummary(CatalogSchema):
    """Editora sem relações"""

    id: int
    name: str = Field(..., serialization_alias="nome")
    address: Optional[str] = Field(None, serialization_alias="endereco")
    phone: Optional[str] = Field(None, serialization_alias="telefone")


class BookSummary(CatalogSchema):
    """Livro sem relações (com as chaves estrangeiras)"""

    id: int
    title: str = Field(..., serialization_alias="titulo")
    isbn: str
    year: int = Field(..., serialization_alias="ano")
    pages: Optional[int] = Field(None, serialization_alias="paginas")
    summary: Optional[str] = Field(None, serialization_alias="resumo")
    category_id: int = Field(..., serialization_alias="categoria_id")
    publisher_id: int = Field(..., serialization_alias="editora_id")
    author_id: int = Field(..., serialization_alias="autor_id")


class AuthorResponse(AuthorSummary):
    """Autor com os livros associados"""

    books: List[BookSummary] = Field(default_factory=list, serialization_alias="livros")


class CategoryResponse(CategorySummary):
    """Categoria com os livros associados"""

    books: List[BookSummary] = Field(default_factory=list, serialization_alias="livros")


class PublisherResponse(PublisherSummary):
    """Editora com os livros associados"""

    books: List[BookSummary] = Field(default_factory=list, serialization_alias="livros")


class CategoryBook(BookSummary):
    """Livro da categoria com autor e editora"""

    author: AuthorSummary = Field(..., serialization_alias="autor")
    publisher: PublisherSummary = Field(..., serialization_alias="editora")


class PublisherBook(BookSummary):
    """Livro da editora com autor e categoria"""

    author: AuthorSummary = Field(..., serialization_alias="autor")
    category: CategorySummary = Field(..., serialization_alias="categoria")


class CategoryDetail(CategorySummary):
    """Categoria consultada por ID: livros com autor e editora"""

    books: List[CategoryBook] = Field(default_factory=list, serialization_alias="livros")


class PublisherDetail(PublisherSummary):
    """Editora consultada por ID: livros com autor e categoria"""

    books: List[PublisherBook] = Field(default_factory=list, serialization_alias="livros")


class BookResponse(BookSummary):
    """Livro com autor, categoria e editora"""

    author: AuthorSummary = Field(..., serialization_alias="autor")
    category: CategorySummary = Field(..., serialization_alias="categoria")
    publisher: PublisherSummary = Field(..., serialization_alias="editora")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "titulo": "Dom Casmurro",
                "isbn": "978-85-359-0277-7",
                "ano": 1899,
                "paginas": 256,
                "resumo": None,
                "categoria_id": 1,
                "editora_id": 1,
                "autor_id": 1,
                "autor": {
                    "id": 1,
                    "nome": "Machado de Assis",
                    "email": "machado@abl.org.br",
                    "telefone": None,
                    "bio": None,
                },
                "categoria": {"id": 1, "nome": "Romance"},
                "editora": {"id": 1, "nome": "Garnier", "endereco": None, "telefone": None},
            }
        },
    )


class PingResponse(BaseModel):
    id: int
    msg: str
