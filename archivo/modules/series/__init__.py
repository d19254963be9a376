# archivo/modules/series/__init__.py
"""
Módulo de Series - Series y Subseries Documentales

Clasificación de dos niveles: cada serie pertenece a una sección y es
dueña de sus subseries.

Arquitectura:
- router.py: Endpoints de series y subseries
- service.py: Validaciones y armado de respuestas
- repository.py: Acceso a datos (upsert, reemplazo, cascada)
- schemas.py: Modelos de request (contrato simple y CADIDO)
"""

from .router import router
from .service import SeriesService
from .repository import SeriesRepository

__all__ = [
    "router",
    "SeriesService",
    "SeriesRepository"
]
