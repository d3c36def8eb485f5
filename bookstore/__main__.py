"""
python -m bookstore
Sobe o servidor HTTP na porta BACKEND_PORT
"""

import uvicorn

from bookstore.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "bookstore.main:app",
        host="0.0.0.0",
        port=settings.backend_port,
        log_config=None,  # logging configurado no lifespan (structlog)
    )
