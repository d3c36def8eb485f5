"""
Request Correlation Middleware
ID de correlação por requisição (header X-Request-ID)
"""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI


def setup_correlation_id(app: FastAPI) -> None:
    """
    Registra o middleware de correlação

    O ID recebido em X-Request-ID é reaproveitado; sem header, um novo é
    gerado. Os handlers de exceção incluem o ID na resposta de erro.
    """
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
