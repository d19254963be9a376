# archivo/modules/inventario/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archivo.config.database import get_db
from .service import InventarioService
from .schemas import (
    ExpedienteCreateRequest, MovimientoRequest, ExpedienteReplaceRequest, ExpedienteActualizadoResponse
)
from archivo.shared.schemas.common import MessageResponse, MessageIdResponse

# Se monta sin prefijo: el módulo responde en /inventario, /consultaInventario y /consultaTurnados
router = APIRouter()

@router.post("/inventario", status_code=201, response_model=MessageIdResponse)
async def create_expediente(data: ExpedienteCreateRequest, db: Session = Depends(get_db)):
    """
    Registrar un expediente en el inventario

    **Requiere:** numeroExpediente, asunto, listaDeDependencias (no vacía),
    datosGenerales, subserie (5 campos) y registro con fecha AAAA-MM-DD.
    """
    service = InventarioService(db)
    return await service.create_expediente(data)

@router.get("/inventario")
async def list_expedientes(db: Session = Depends(get_db)):
    """Consultar todo el inventario (404 si está vacío)"""
    service = InventarioService(db)
    return await service.list_expedientes()

@router.get("/inventario/{id}")
async def get_expediente(id: str, db: Session = Depends(get_db)):
    service = InventarioService(db)
    return await service.get_expediente(id)

@router.put("/inventario/{id}", response_model=ExpedienteActualizadoResponse)
async def replace_expediente(id: str, data: ExpedienteReplaceRequest, db: Session = Depends(get_db)):
    """Modificar los campos editables del expediente"""
    service = InventarioService(db)
    return await service.replace_expediente(id, data)

@router.patch("/inventario/{id}", response_model=MessageResponse)
async def add_movimiento(id: str, data: MovimientoRequest, db: Session = Depends(get_db)):
    """
    Registrar un movimiento (tramite o concluido)

    **Efectos:**
    - Agrega el movimiento al historial
    - Une areaCanalizado a areasInvolucradas
    - statusActual = tipo
    """
    service = InventarioService(db)
    return await service.add_movimiento(id, data)

@router.post("/inventario/{id}/movimiento", response_model=MessageResponse)
async def add_movimiento_legacy(id: str, data: MovimientoRequest, db: Session = Depends(get_db)):
    """Ruta anterior para registrar movimientos; equivale a PATCH /inventario/{id}"""
    service = InventarioService(db)
    return await service.add_movimiento(id, data)

@router.delete("/inventario/{id}", response_model=MessageResponse)
async def delete_expediente(id: str, db: Session = Depends(get_db)):
    service = InventarioService(db)
    return await service.delete_expediente(id)

@router.get("/consultaInventario/anio/{anio}/areaDeRegistro/{codigoSeccion}")
async def query_by_area_registro(anio: str, codigoSeccion: str, db: Session = Depends(get_db)):
    """Expedientes registrados en el año por el área indicada"""
    service = InventarioService(db)
    return await service.query_by_area_registro(anio, codigoSeccion)

@router.get("/consultaInventario/anio/{anio}/areaOrigen/{codigoSeccion}")
async def query_by_area_origen(anio: str, codigoSeccion: str, db: Session = Depends(get_db)):
    """Ruta anterior de la consulta por área de registro"""
    service = InventarioService(db)
    return await service.query_by_area_registro(anio, codigoSeccion)

@router.get("/consultaTurnados/anio/{anio}/areaDestino/{codigoEnviado}")
async def query_turnados(anio: str, codigoEnviado: str, db: Session = Depends(get_db)):
    """Expedientes del año turnados alguna vez al área indicada"""
    service = InventarioService(db)
    return await service.query_by_area_destino(anio, codigoEnviado)
