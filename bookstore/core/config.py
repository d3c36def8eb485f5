"""
Core Configuration Module
Configuração central da aplicação a partir de variáveis de ambiente
"""

from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configurações da aplicação (Pydantic Settings v2)"""

    # ==================== Application ====================
    app_title: str = "Livraria Catalog Service"
    app_description: str = "API de catálogo da livraria: autores, livros, categorias e editoras"
    app_version: str = "1.0.0"
    app_env: str = Field(default="dev", env="APP_ENV")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_json_format: bool = Field(default=False, env="LOG_JSON_FORMAT")

    # ==================== Server ====================
    backend_port: int = Field(default=3000, env="BACKEND_PORT")

    # ==================== Database (PostgreSQL) ====================
    postgres_user: str = Field(default="livraria_user", env="POSTGRES_USER")
    postgres_password: str = Field(default="livraria_password", env="POSTGRES_PASSWORD")
    postgres_db: str = Field(default="livraria_db", env="POSTGRES_DB")
    postgres_host: str = Field(default="postgres", env="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, env="POSTGRES_PORT")

    # URL completa (ex.: sqlite+aiosqlite:///./livraria.db) tem precedência
    database_url_override: Optional[str] = Field(
        default=None, validation_alias="DATABASE_URL"
    )
    database_echo: bool = Field(default=False, env="DATABASE_ECHO")
    database_pool_size: int = Field(default=10, env="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=20, env="DATABASE_MAX_OVERFLOW")
    database_isolation_level: Optional[str] = Field(
        default=None,
        env="DATABASE_ISOLATION_LEVEL",
        description="Isolation level applied to every connection (e.g. SERIALIZABLE)",
    )
    database_create_tables: bool = Field(default=False, env="DATABASE_CREATE_TABLES")

    @property
    def database_url(self) -> str:
        """SQLAlchemy Database URL (Async)"""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # ==================== CORS ====================
    cors_origins_str: str = Field(default="*", validation_alias="CORS_ORIGINS")

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins separados por vírgula"""
        return [origin.strip() for origin in self.cors_origins_str.split(",")]

    cors_allow_credentials: bool = Field(default=False, env="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: str = Field(
        default="GET,POST,PUT,DELETE,OPTIONS", env="CORS_ALLOW_METHODS"
    )
    cors_allow_headers: str = Field(
        default="Content-Type,Accept,X-Request-ID", env="CORS_ALLOW_HEADERS"
    )

    # ==================== Pydantic Config ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Validators ====================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Valida APP_ENV"""
        allowed_envs = ["dev", "test", "prod"]
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("database_isolation_level")
    @classmethod
    def validate_isolation_level(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        allowed = ["READ COMMITTED", "REPEATABLE READ", "SERIALIZABLE"]
        normalized = v.strip().upper().replace("_", " ")
        if normalized not in allowed:
            raise ValueError(f"DATABASE_ISOLATION_LEVEL must be one of {allowed}")
        return normalized


# Instância única
settings = Settings()
