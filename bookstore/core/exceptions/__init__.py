"""
Core Exceptions Module
"""

from .base import (
    AppException,
    ValidationException,
    NotFoundException,
    ConflictException,
    InternalServerException,
)
from .codes import ErrorCode
from .validation import field_error, summarize_validation_errors
from .schemas import ErrorResponse, ErrorDetail, ValidationErrorResponse

__all__ = [
    # Base Exceptions
    "AppException",
    "ValidationException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    # Error Codes
    "ErrorCode",
    # Request validation
    "field_error",
    "summarize_validation_errors",
    # Schemas
    "ErrorResponse",
    "ErrorDetail",
    "ValidationErrorResponse",
]
