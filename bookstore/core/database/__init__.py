"""
Database Module
Configuração assíncrona do SQLAlchemy
"""

from .session import get_db, AsyncSessionLocal, engine, build_engine
from .base import Base

__all__ = ["get_db", "AsyncSessionLocal", "engine", "build_engine", "Base"]
