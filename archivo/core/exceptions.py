# archivo/core/exceptions.py
"""
Manejadores de errores de la API.

Todas las respuestas de error tienen la forma ``{"error": "<mensaje>"}``:
- 400 validación (incluye cuerpos mal formados que rechaza pydantic)
- 404 recurso inexistente
- 500 error interno, sin detalles salvo en modo debug
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from archivo.config.settings import settings

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Solicitud inválida."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Campo '{location}': {first.get('msg', 'valor inválido')}"
    return first.get("msg", "Solicitud inválida.")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Solicitud inválida {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": _validation_message(exc)})


async def unhandled_exception_handler(request: Request, exc: Exception):
    request_id = getattr(request.state, "request_id", "-")
    logger.exception(f"Error no controlado en {request.method} {request.url.path} (request_id={request_id})")
    content = {"error": INTERNAL_ERROR_MESSAGE}
    if settings.debug:
        content["details"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI):
    """Registrar los manejadores de errores en la aplicación"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
