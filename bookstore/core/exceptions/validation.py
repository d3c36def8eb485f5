"""
Request Validation Errors
Erros de campo levantados pelos modelos de requisição (Pydantic)

Os validadores dos modelos levantam ``field_error``; a mensagem segue
exatamente como escrita (sem o prefixo "Value error, "). Só o primeiro erro
da lista (ordem de declaração dos campos) chega ao cliente.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic_core import PydanticCustomError

from .codes import ErrorCode

FIELD_ERROR_TYPE = "invalid_field"
INVALID_REQUEST_MESSAGE = "Dados da requisição inválidos"
INVALID_PAYLOAD_MESSAGE = "Payload deve ser um objeto JSON"


def field_error(
    message: str, error_code: ErrorCode = ErrorCode.VAL_INVALID_FORMAT
) -> PydanticCustomError:
    """Erro de campo com mensagem legível e código próprio"""
    return PydanticCustomError(FIELD_ERROR_TYPE, message, {"error_code": error_code.value})


def summarize_validation_errors(
    errors: Sequence[Dict[str, Any]],
) -> Tuple[str, Optional[str], str]:
    """
    Resume a lista de erros do Pydantic no primeiro erro

    Returns:
        (mensagem, campo, código do erro)
    """
    if not errors:
        return INVALID_REQUEST_MESSAGE, None, ErrorCode.VAL_INVALID_INPUT.value

    first = errors[0]
    loc = [part for part in first.get("loc", ()) if part != "body"]
    error_type = first.get("type")

    if error_type == FIELD_ERROR_TYPE:
        ctx = first.get("ctx") or {}
        field = str(loc[-1]) if loc else None
        return first["msg"], field, ctx.get("error_code", ErrorCode.VAL_INVALID_INPUT.value)

    if error_type == "json_invalid":
        return INVALID_REQUEST_MESSAGE, None, ErrorCode.VAL_INVALID_FORMAT.value

    # corpo ausente, lista, texto...
    if not loc:
        return INVALID_PAYLOAD_MESSAGE, None, ErrorCode.VAL_INVALID_INPUT.value

    return INVALID_REQUEST_MESSAGE, str(loc[-1]), ErrorCode.VAL_INVALID_INPUT.value
