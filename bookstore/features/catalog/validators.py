"""
Catalog Payload Validators
Conversões usadas pelos modelos de requisição do catálogo

Os modelos em ``schemas.py`` chamam estas funções nos seus
``field_validator(mode="before")``: strings aparadas, campos numéricos
convertidos para ``int`` dentro da faixa da coluna ``INTEGER``. Cada falha
vira um ``field_error`` com a mensagem em português do campo.

``validate_payload`` aplica um modelo ao payload bruto e devolve apenas os
campos enviados; o primeiro erro (ordem dos campos) vira ``StructuralError``.
Nenhuma função deste módulo acessa o banco.
"""

import math
import re
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from bookstore.core.exceptions import ErrorCode, field_error, summarize_validation_errors
from .exceptions import StructuralError

INVALID_ID_MESSAGE = "ID deve ser um número válido"

# faixa de INTEGER (PostgreSQL)
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+(\.0*)?")


def parse_int(value: Any) -> int:
    """
    Converte ``value`` em inteiro de 32 bits

    Aceita ``int``, ``float`` integral e texto numérico decimal (com espaços
    nas pontas, ``"1899"`` ou ``"1899.0"``). Booleanos, frações, separadores
    (``"1_899"``), notação científica e valores fora da faixa geram
    ``ValueError``.
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not an integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not (math.isfinite(value) and value.is_integer()):
            raise ValueError(f"{value!r} is not integral")
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_TEXT.fullmatch(text):
            raise ValueError(f"{value!r} is not an integer")
        number = int(text.split(".", 1)[0])
    else:
        raise ValueError(f"{type(value).__name__} is not an integer")

    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"{number} is out of range")
    return number


def parse_id(raw: Any) -> int:
    """ID de caminho; inválido gera StructuralError antes de tocar no banco"""
    try:
        return parse_int(raw)
    except ValueError:
        raise StructuralError(
            INVALID_ID_MESSAGE, field="id", error_code=ErrorCode.VAL_INVALID_FORMAT
        )


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def required_text(value: Any, message: str, trim: bool = True) -> str:
    """Texto obrigatório; ausente, nulo ou vazio gera erro"""
    if _blank(value) or not isinstance(value, str):
        raise field_error(message, ErrorCode.VAL_MISSING_FIELD)
    return value.strip() if trim else value


def optional_text(value: Any, message: str) -> Optional[str]:
    """Texto opcional; vazio/nulo vira None"""
    if _blank(value):
        return None
    if not isinstance(value, str):
        raise field_error(message)
    return value.strip()


def required_int(value: Any, message: str) -> int:
    if _blank(value):
        raise field_error(message, ErrorCode.VAL_MISSING_FIELD)
    try:
        return parse_int(value)
    except ValueError:
        raise field_error(message)


def optional_int(value: Any, message: str) -> Optional[int]:
    """Inteiro opcional; vazio/nulo vira None"""
    if _blank(value):
        return None
    try:
        return parse_int(value)
    except ValueError:
        raise field_error(message)


def validate_payload(schema: Type[BaseModel], payload: Any) -> Dict[str, Any]:
    """
    Valida o payload com o modelo de requisição

    Args:
        schema: modelo de criação ou atualização do tipo de entidade
        payload: corpo bruto ou instância já validada pelo FastAPI

    Returns:
        campos enviados, com os nomes de atributo do modelo ORM

    Raises:
        StructuralError: primeiro campo ausente ou malformado
    """
    if not isinstance(payload, schema):
        try:
            payload = schema.model_validate(payload)
        except ValidationError as e:
            message, field, error_code = summarize_validation_errors(e.errors())
            raise StructuralError(message, field=field, error_code=error_code) from None
    return payload.model_dump(exclude_unset=True)
