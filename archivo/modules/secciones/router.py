# archivo/modules/secciones/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archivo.config.database import get_db
from .service import SeccionesService
from .schemas import SeccionCreateRequest, SeccionUpdateRequest, SeccionActualizadaResponse
from archivo.shared.schemas.common import MessageIdResponse

router = APIRouter()

@router.post("", status_code=201, response_model=MessageIdResponse)
async def create_seccion(
    data: SeccionCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar una sección del cuadro general de clasificación

    **Nota:** si el código ya existe, el registro se sobrescribe.
    """
    service = SeccionesService(db)
    return await service.create_seccion(data)

@router.get("")
async def list_secciones(db: Session = Depends(get_db)):
    """Obtener todas las secciones"""
    service = SeccionesService(db)
    return await service.list_secciones()

@router.get("/{id}")
async def get_seccion(id: str, db: Session = Depends(get_db)):
    """Obtener una sección por su código"""
    service = SeccionesService(db)
    return await service.get_seccion(id)

@router.put("/{id}", response_model=SeccionActualizadaResponse)
async def update_seccion(
    id: str,
    data: SeccionUpdateRequest,
    db: Session = Depends(get_db)
):
    """Modificar el nombre de una sección"""
    service = SeccionesService(db)
    return await service.update_seccion(id, data)

@router.delete("/{id}", response_model=MessageIdResponse)
async def delete_seccion(id: str, db: Session = Depends(get_db)):
    """Eliminar una sección por su código"""
    service = SeccionesService(db)
    return await service.delete_seccion(id)
