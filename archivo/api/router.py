# archivo/api/router.py
from fastapi import APIRouter
from archivo.modules.secciones.router import router as secciones_router
from archivo.modules.series.router import router as series_router
from archivo.modules.dependencias.router import router as dependencias_router
from archivo.modules.inventario.router import router as inventario_router
from archivo.modules.oficialia.router import router as oficialia_router
from archivo.config.settings import settings


# Crear router principal de la API
api_router = APIRouter()

# ==================== CUADRO GENERAL ====================

api_router.include_router(
    secciones_router,
    prefix="/cuadroGeneral",
    tags=["Secciones"]
)

api_router.include_router(
    series_router,
    prefix="/series",
    tags=["Series"]
)

# ==================== CATÁLOGOS ====================

api_router.include_router(
    dependencias_router,
    prefix="/dependencias",
    tags=["Dependencias"]
)

# ==================== EXPEDIENTES ====================

# inventario define sus rutas completas (/inventario, /consultaInventario, /consultaTurnados)
api_router.include_router(
    inventario_router,
    tags=["Inventario"]
)

api_router.include_router(
    oficialia_router,
    prefix="/oficialia",
    tags=["Oficialía"]
)


@api_router.get("/modules")
async def list_modules():
    """
    Listado de módulos disponibles
    """
    return {
        "success": True,
        "version": settings.version,
        "modules": [
            {"name": "secciones", "prefix": "/cuadroGeneral", "status": "implemented"},
            {"name": "series", "prefix": "/series", "status": "implemented"},
            {"name": "dependencias", "prefix": "/dependencias", "status": "implemented"},
            {
                "name": "inventario",
                "prefix": "/inventario",
                "queries": ["/consultaInventario", "/consultaTurnados"],
                "status": "implemented"
            },
            {"name": "oficialia", "prefix": "/oficialia", "status": "implemented"}
        ]
    }
