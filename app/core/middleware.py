from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.config.settings import settings
import time
import logging

logger = logging.getLogger(__name__)

def setup_middleware(app: FastAPI):
    """Configurar CORS y el registro de peticiones de la API de bodegas"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With"
        ],
        max_age=3600
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.2f}"

        query = f"?{request.url.query}" if request.url.query else ""
        line = f"{request.method} {request.url.path}{query} -> {response.status_code} ({elapsed_ms:.2f} ms)"
        if response.status_code >= 500:
            logger.error(f"💥 {line}")
        elif response.status_code >= 400:
            logger.warning(f"⚠️ {line}")
        else:
            logger.info(f"📦 {line}")

        return response
