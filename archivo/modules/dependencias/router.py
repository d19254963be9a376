# archivo/modules/dependencias/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archivo.config.database import get_db
from .service import DependenciasService
from .schemas import DependenciaRequest, DependenciaResponse, DependenciaActualizadaResponse
from archivo.shared.schemas.common import MessageIdResponse

router = APIRouter()

@router.post("", status_code=201, response_model=MessageIdResponse)
async def create_dependencia(data: DependenciaRequest, db: Session = Depends(get_db)):
    """Registrar una dependencia; el ID lo genera el almacén"""
    service = DependenciasService(db)
    return await service.create_dependencia(data)

@router.get("")
async def list_dependencias(db: Session = Depends(get_db)):
    service = DependenciasService(db)
    return await service.list_dependencias()

@router.get("/{idDependencia}", response_model=DependenciaResponse)
async def get_dependencia(idDependencia: str, db: Session = Depends(get_db)):
    service = DependenciasService(db)
    return await service.get_dependencia(idDependencia)

@router.put("/{idDependencia}", response_model=DependenciaActualizadaResponse)
async def update_dependencia(
    idDependencia: str,
    data: DependenciaRequest,
    db: Session = Depends(get_db)
):
    """Modificar el nombre de una dependencia"""
    service = DependenciasService(db)
    return await service.update_dependencia(idDependencia, data)

@router.delete("/{idDependencia}", response_model=MessageIdResponse)
async def delete_dependencia(idDependencia: str, db: Session = Depends(get_db)):
    service = DependenciasService(db)
    return await service.delete_dependencia(idDependencia)
