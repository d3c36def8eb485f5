"""
Catalog Domain Exceptions
Exceções do motor de consistência do catálogo
"""

from typing import Any, Dict, Optional

from fastapi import status

from ...core.exceptions import (
    AppException,
    ValidationException,
    NotFoundException,
    ConflictException,
    InternalServerException,
    ErrorCode,
)
from ...core.exceptions.handlers import INTERNAL_ERROR_MESSAGE


class StructuralError(ValidationException):
    """Campo ausente ou malformado (o cliente deve corrigir o payload)"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        error_code: str = ErrorCode.VAL_INVALID_INPUT,
    ):
        self.field = field
        super().__init__(
            error_code=error_code,
            message=message,
            details={"field": field} if field else None,
        )


class NotFoundError(NotFoundException):
    """ID não corresponde a nenhum registro"""

    def __init__(self, message: str, entity_id: Optional[int] = None):
        self.entity_id = entity_id
        super().__init__(
            error_code=ErrorCode.BIZ_RESOURCE_NOT_FOUND,
            message=message,
            details={"id": entity_id} if entity_id is not None else None,
        )


class ConflictError(ConflictException):
    """Colisão de chave natural (email, nome, ISBN)"""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(
            error_code=ErrorCode.BIZ_DUPLICATE_RESOURCE,
            message=message,
            details={"field": field} if field else None,
        )


class ReferentialError(AppException):
    """
    Violação de integridade referencial

    Base de ``RelatedEntityNotFoundError`` (FK inexistente na escrita)
    e ``HasDependentsError`` (remoção de registro com livros).
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status_code,
            details=details,
        )


class RelatedEntityNotFoundError(ReferentialError):
    """Autor, categoria ou editora referenciado pelo livro não existe"""

    def __init__(self, message: str, relation: Optional[str] = None):
        self.relation = relation
        super().__init__(
            error_code=ErrorCode.BIZ_RELATED_NOT_FOUND,
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"relation": relation} if relation else None,
        )


class HasDependentsError(ReferentialError):
    """Registro possui livros associados e não pode ser removido"""

    def __init__(self, message: str, dependents: Optional[int] = None):
        self.dependents = dependents
        super().__init__(
            error_code=ErrorCode.BIZ_HAS_DEPENDENTS,
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details={"dependents": dependents} if dependents else None,
        )


class InternalError(InternalServerException):
    """Falha de armazenamento; detalhes vão só para o log"""

    def __init__(self, error_code: str = ErrorCode.SYS_INTERNAL_ERROR):
        super().__init__(error_code=error_code, message=INTERNAL_ERROR_MESSAGE)
