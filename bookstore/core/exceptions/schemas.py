"""
Error Response Schemas
Esquemas das respostas de erro
"""

from typing import Optional, Dict, Any, List
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detalhe de um erro individual"""

    field: Optional[str] = Field(None, description="Campo que originou o erro")
    message: str = Field(..., description="Mensagem de erro")
    code: Optional[str] = Field(None, description="Código detalhado")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "ano",
                "message": "Ano deve ser um número válido",
                "code": "VAL_003",
            }
        }
    )


class ErrorResponse(BaseModel):
    """
    Resposta de erro padrão

    Todos os erros da API usam este formato.
    """

    error_code: str = Field(..., description="Código do erro (ex.: BIZ_003)")
    message: str = Field(..., description="Mensagem legível para o cliente")
    status_code: int = Field(..., description="Código de status HTTP")
    timestamp: datetime = Field(default_factory=_utcnow, description="Momento do erro")
    request_id: Optional[str] = Field(None, description="ID de rastreamento da requisição")
    path: Optional[str] = Field(None, description="Caminho da requisição")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Informações adicionais (opcional)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "BIZ_003",
                "message": "Já existe um autor com este email",
                "status_code": 409,
                "timestamp": "2026-10-19T12:00:00.000Z",
                "request_id": "5d1c6f0e8a0b4a8e9c8f1e2d3c4b5a69",
                "path": "/autores",
                "details": {"field": "email"},
            }
        }
    )


class ValidationErrorResponse(BaseModel):
    """Resposta de erro de validação do corpo da requisição"""

    error_code: str = Field(default="VAL_001", description="Código do erro")
    message: str = Field(default="Dados da requisição inválidos", description="Mensagem de erro")
    status_code: int = Field(default=400, description="Código de status HTTP")
    timestamp: datetime = Field(default_factory=_utcnow)
    request_id: Optional[str] = Field(None, description="ID de rastreamento da requisição")
    path: Optional[str] = Field(None, description="Caminho da requisição")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Campo que originou o primeiro erro"
    )
    errors: List[ErrorDetail] = Field(..., description="Lista de erros de validação")
