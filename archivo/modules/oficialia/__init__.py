# archivo/modules/oficialia/__init__.py
"""
Módulo de Oficialía - Ingreso de expedientes

Punto de entrada reducido que escribe en el inventario con estado
``enOficialia``.
"""

from .router import router
from .service import OficialiaService

__all__ = [
    "router",
    "OficialiaService"
]
