"""
Core Logging Configuration
Logging estruturado com structlog
"""

import logging
import sys
from typing import Any, Dict, Optional

import structlog
from asgi_correlation_id import correlation_id

from bookstore.core.config import settings


def add_request_id(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """ID da requisição atual (X-Request-ID) em cada registro"""
    request_id = correlation_id.get()
    if request_id is not None:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def configure_logging() -> None:
    """
    Configura o structlog e o logging padrão

    Registros do ``logging`` padrão (``logging.getLogger(__name__)``) e do
    structlog passam pelo mesmo formatter.
    """

    # Processadores comuns (structlog e logging padrão)
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_id,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),  # mostra os argumentos de extra
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_json_format:
        renderer = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            pad_event=20,
        )

    # 1. structlog
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 2. formatter do logging padrão renderizado pelo structlog
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # 3. logger raiz
    root_logger = logging.getLogger()
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    # 4. uvicorn e sqlalchemy propagam para o logger raiz
    for _log in ["uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"]:
        logger = logging.getLogger(_log)
        logger.handlers = []
        logger.propagate = True


def get_logger(name: Optional[str] = None) -> Any:
    """
    Retorna um logger estruturado
    """
    return structlog.get_logger(name)
