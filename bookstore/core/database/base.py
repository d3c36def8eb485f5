"""
Database Base Class
Classe base de todos os modelos ORM
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Nomes estáveis para constraints (usados no mapeamento de IntegrityError)
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """
    SQLAlchemy Base Class

    Todos os modelos ORM devem herdar desta classe
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
