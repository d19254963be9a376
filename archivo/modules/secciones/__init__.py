# archivo/modules/secciones/__init__.py
"""
Módulo de Secciones - Cuadro General de Clasificación

Este módulo maneja las secciones (unidades administrativas):
- Alta por código (upsert)
- Consulta general y por código
- Actualización del nombre
- Eliminación

Arquitectura:
- router.py: Endpoints de secciones
- service.py: Validación y armado de respuestas
- repository.py: Acceso a datos de secciones
- schemas.py: Modelos de request
"""

from .router import router
from .service import SeccionesService
from .repository import SeccionesRepository

__all__ = [
    "router",
    "SeccionesService",
    "SeccionesRepository"
]
