"""
Global Exception Handlers
Handlers globais de exceção
"""

import uuid
import logging
from asgi_correlation_id import correlation_id
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .base import AppException
from .schemas import ErrorResponse, ValidationErrorResponse, ErrorDetail
from .codes import ErrorCode
from .validation import summarize_validation_errors

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def _request_id(request: Request) -> str:
    """ID da requisição (middleware de correlação ou novo UUID)"""
    return correlation_id.get() or getattr(
        request.state, "request_id", uuid.uuid4().hex
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handler das exceções da aplicação

    Args:
        request: objeto Request do FastAPI
        exc: instância de AppException

    Returns:
        JSONResponse: resposta de erro padrão
    """
    request_id = _request_id(request)

    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"AppException occurred: [{exc.error_code}] {exc.message}",
        extra={
            "error_code": exc.error_code,
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "request_id": request_id,
            "details": exc.details,
        },
    )

    error_response = ErrorResponse(
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        request_id=request_id,
        path=str(request.url.path),
        details=exc.details if exc.details else None,
    )

    return JSONResponse(
        status_code=exc.status_code, content=error_response.model_dump(mode="json")
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handler de erros de validação do corpo da requisição

    O primeiro erro (ordem dos campos) define a mensagem e o campo da
    resposta; JSON malformado ou corpo que não é objeto também vira 400.
    """
    request_id = _request_id(request)
    message, field, error_code = summarize_validation_errors(exc.errors())

    errors = []
    for error in exc.errors():
        field_path = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(
            ErrorDetail(
                field=field_path, message=error["msg"], code=error.get("type", "")
            )
        )

    logger.warning(
        "Request validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "request_id": request_id,
            "validation_errors": [error.model_dump() for error in errors],
        },
    )

    error_response = ValidationErrorResponse(
        error_code=error_code,
        message=message,
        status_code=status.HTTP_400_BAD_REQUEST,
        request_id=request_id,
        path=str(request.url.path),
        details={"field": field} if field else None,
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response.model_dump(mode="json"),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handler de HTTPException do FastAPI/Starlette

    Converte para o formato de erro padrão (ex.: rota inexistente, 405)
    """
    request_id = _request_id(request)

    error_code_map = {
        400: ErrorCode.VAL_INVALID_INPUT,
        404: ErrorCode.BIZ_RESOURCE_NOT_FOUND,
        409: ErrorCode.BIZ_DUPLICATE_RESOURCE,
        500: ErrorCode.SYS_INTERNAL_ERROR,
    }

    error_code = error_code_map.get(exc.status_code, ErrorCode.SYS_INTERNAL_ERROR)

    logger.warning(
        f"HTTPException occurred: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "request_id": request_id,
        },
    )

    error_response = ErrorResponse(
        error_code=error_code.value,
        message=str(exc.detail),
        status_code=exc.status_code,
        request_id=request_id,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler de exceções inesperadas (500)

    O stack trace vai apenas para o log; o cliente recebe mensagem genérica.
    """
    request_id = _request_id(request)

    logger.exception(
        f"Unexpected exception occurred: {exc}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "request_id": request_id,
            "exception_type": type(exc).__name__,
        },
    )

    # detalhes só em modo debug
    from bookstore.core.config import settings

    details = {"error": str(exc), "type": type(exc).__name__} if settings.debug else None

    error_response = ErrorResponse(
        error_code=ErrorCode.SYS_INTERNAL_ERROR.value,
        message=INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        request_id=request_id,
        path=str(request.url.path),
        details=details,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json"),
    )
