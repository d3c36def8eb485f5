"""
Base Exception Classes
Classes base de exceção da aplicação
"""

from enum import Enum
from typing import Optional, Dict, Any
from fastapi import status


class AppException(Exception):
    """
    Exceção base da aplicação

    Classe base de todas as exceções customizadas
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            error_code: código do erro (ex.: VAL_001)
            message: mensagem legível para o cliente
            status_code: código de status HTTP
            details: informações adicionais (opcional)
        """
        if isinstance(error_code, Enum):
            error_code = error_code.value
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code={self.error_code!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class ValidationException(AppException):
    """
    Falha de validação (400 Bad Request)

    Dados da requisição ausentes ou malformados
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class NotFoundException(AppException):
    """
    Recurso inexistente (404 Not Found)
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class ConflictException(AppException):
    """
    Conflito de estado (409 Conflict)

    Ex.: chave única duplicada, registro com dependentes
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
        )


class InternalServerException(AppException):
    """
    Erro interno do servidor (500 Internal Server Error)

    Falhas inesperadas de infraestrutura
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )
