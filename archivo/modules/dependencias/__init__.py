# archivo/modules/dependencias/__init__.py
"""
Módulo de Dependencias - Oficinas solicitantes

Catálogo plano de dependencias con ID generado por el almacén.
"""

from .router import router
from .service import DependenciasService
from .repository import DependenciasRepository

__all__ = [
    "router",
    "DependenciasService",
    "DependenciasRepository"
]
