# archivo/modules/series/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archivo.config.database import get_db
from .service import SeriesService
from .schemas import (
    SerieCreateRequest, SerieUpdateRequest, SubseriesAddRequest,
    SerieMessageResponse, SerieActualizadaResponse, SubserieEliminadaResponse
)
from archivo.shared.schemas.common import MessageIdResponse

router = APIRouter()

@router.post("", status_code=201, response_model=MessageIdResponse)
async def create_serie(data: SerieCreateRequest, db: Session = Depends(get_db)):
    """
    Registrar una serie documental con sus subseries

    **Validaciones:**
    - Código y nombre obligatorios
    - Al menos una subserie, cada una con código y nombre
    """
    service = SeriesService(db)
    return await service.create_serie(data)

@router.get("")
async def list_series(db: Session = Depends(get_db)):
    """Obtener todas las series con sus subseries"""
    service = SeriesService(db)
    return await service.list_series()

@router.get("/codigoSeccion/{codigoSeccion}")
async def list_series_by_seccion(codigoSeccion: str, db: Session = Depends(get_db)):
    """Obtener las series (y subseries) de una sección"""
    service = SeriesService(db)
    return await service.list_series_by_seccion(codigoSeccion)

@router.get("/{id}")
async def get_serie(id: str, db: Session = Depends(get_db)):
    """Obtener una serie con sus subseries"""
    service = SeriesService(db)
    return await service.get_serie(id)

@router.put("/{id}", response_model=SerieActualizadaResponse)
async def update_serie(id: str, data: SerieUpdateRequest, db: Session = Depends(get_db)):
    """
    Modificar nombre y sección de la serie

    Si se envían ``subseries`` reemplazan por completo a las actuales.
    """
    service = SeriesService(db)
    return await service.update_serie(id, data)

@router.put("/{id}/cadido", response_model=SerieActualizadaResponse)
async def update_serie_cadido(id: str, data: SerieUpdateRequest, db: Session = Depends(get_db)):
    """
    Modificar la serie con subseries del catálogo de disposición documental

    **Cada subserie requiere:** codigo, nombre, aniosTramite,
    valoresDocumentales, aniosConcentracion, tecnicaSeleccion.
    """
    service = SeriesService(db)
    return await service.update_serie(id, data, cadido=True)

@router.put("/{id}/subseries", response_model=SerieMessageResponse)
async def add_subseries(id: str, data: SubseriesAddRequest, db: Session = Depends(get_db)):
    """Agregar (o sobrescribir por código) subseries de una serie existente"""
    service = SeriesService(db)
    return await service.add_subseries(id, data)

@router.delete("/{id}", response_model=SerieMessageResponse)
async def delete_serie(id: str, db: Session = Depends(get_db)):
    """Eliminar la serie con todas sus subseries"""
    service = SeriesService(db)
    return await service.delete_serie(id)

@router.delete("/{serieId}/subseries/{subserieId}", response_model=SubserieEliminadaResponse)
async def delete_subserie(serieId: str, subserieId: str, db: Session = Depends(get_db)):
    """Eliminar una subserie específica"""
    service = SeriesService(db)
    return await service.delete_subserie(serieId, subserieId)
