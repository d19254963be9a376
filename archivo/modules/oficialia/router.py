# archivo/modules/oficialia/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archivo.config.database import get_db
from .service import OficialiaService
from .schemas import OficialiaCreateRequest
from archivo.shared.schemas.common import MessageIdResponse

router = APIRouter()

@router.post("", status_code=201, response_model=MessageIdResponse)
async def registrar_oficialia(data: OficialiaCreateRequest, db: Session = Depends(get_db)):
    """
    Registrar un expediente recibido en oficialía de partes

    **Requiere:** numeroExpediente, asunto, areaDeRegistro,
    listaDeDependencias, datosGenerales y registro con areaDestino,
    fecha, hora y usuario.
    """
    service = OficialiaService(db)
    return await service.registrar(data)
