# archivo/core/middleware.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
import uuid

from archivo.config.settings import settings

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Rutas que no se registran en la bitácora de peticiones
SILENT_PATHS = ("/health",)


def get_request_id(request: Request) -> str:
    """ID de correlación recibido del proxy o uno nuevo de 16 caracteres"""
    return request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:16]


def setup_middleware(app: FastAPI):
    """Registrar CORS y la bitácora de peticiones"""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = get_request_id(request)
        request.state.request_id = request_id
        inicio = time.perf_counter()

        response = await call_next(request)

        duracion_ms = (time.perf_counter() - inicio) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        if request.url.path not in SILENT_PATHS:
            # Los 5xx ya se registran con traza en los manejadores de error
            nivel = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                nivel,
                "peticion request_id=%s %s %s -> %d (%.2f ms)",
                request_id,
                request.method,
                request.url.path,
                response.status_code,
                duracion_ms,
            )

        return response
