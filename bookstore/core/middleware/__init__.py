"""
Middleware Module
CORS e correlação de requisições
"""

from .cors import setup_cors
from .correlation import setup_correlation_id

__all__ = ["setup_cors", "setup_correlation_id"]
