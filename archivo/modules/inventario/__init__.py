# archivo/modules/inventario/__init__.py
"""
Módulo de Inventario - Expedientes

Este módulo maneja el ciclo de vida de los expedientes:
- Registro con movimiento inicial
- Turnado / trámite / conclusión (historial de movimientos)
- Edición de datos generales y subserie
- Consultas por año y área de registro o destino

Arquitectura:
- router.py: Endpoints de inventario y consultas
- service.py: Validación y armado de documentos
- repository.py: Acceso a datos (unión atómica del historial)
- schemas.py: Modelos de request y estados
"""

from .router import router
from .service import InventarioService
from .repository import InventarioRepository

__all__ = [
    "router",
    "InventarioService",
    "InventarioRepository"
]
