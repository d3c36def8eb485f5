"""
Error Code Definitions
Definição dos códigos de erro
"""

from enum import Enum


class ErrorCode(str, Enum):
    """
    Códigos de erro da aplicação

    Regras:
    - VAL_xxx: erros de validação (400)
    - BIZ_xxx: erros de regra de negócio (400, 404, 409)
    - SYS_xxx: erros de sistema (500)
    """

    # ==================== Validation (VAL_xxx) ====================
    VAL_INVALID_INPUT = "VAL_001"
    """Dados de entrada inválidos"""

    VAL_MISSING_FIELD = "VAL_002"
    """Campo obrigatório ausente"""

    VAL_INVALID_FORMAT = "VAL_003"
    """Formato inválido"""

    # ==================== Business Logic (BIZ_xxx) ====================
    BIZ_RESOURCE_NOT_FOUND = "BIZ_001"
    """Recurso não encontrado"""

    BIZ_DUPLICATE_RESOURCE = "BIZ_003"
    """Recurso duplicado"""

    BIZ_RELATED_NOT_FOUND = "BIZ_101"
    """Entidade relacionada não encontrada"""

    BIZ_HAS_DEPENDENTS = "BIZ_102"
    """Registro possui livros associados"""

    # ==================== System (SYS_xxx) ====================
    SYS_INTERNAL_ERROR = "SYS_001"
    """Erro interno do servidor"""

    SYS_DATABASE_ERROR = "SYS_002"
    """Erro de banco de dados"""
