# archivo/modules/oficialia/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Any, Dict
import logging

from .schemas import OficialiaCreateRequest
from archivo.core.exceptions import INTERNAL_ERROR_MESSAGE
from archivo.modules.inventario.repository import InventarioRepository
from archivo.modules.inventario.schemas import StatusExpediente, TipoMovimiento
from archivo.modules.inventario.service import (
    parse_anio_registro, as_list, compact
)
from archivo.shared.schemas.common import is_blank

logger = logging.getLogger(__name__)

class OficialiaService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = InventarioRepository(db)

    async def registrar(self, data: OficialiaCreateRequest) -> Dict[str, Any]:
        """
        Ingreso de un expediente por oficialía de partes.

        Se guarda en el inventario sin subserie, con estado
        ``enOficialia`` y un primer movimiento ``registroOficialia``.
        """
        registro = data.registro
        if (
            is_blank(data.numeroExpediente) or is_blank(data.asunto)
            or is_blank(data.areaDeRegistro)
            or not data.listaDeDependencias
            or data.datosGenerales is None
            or registro is None
            or not registro.areaDestino
            or is_blank(registro.fecha)
            or is_blank(registro.hora)
            or is_blank(registro.usuario)
        ):
            raise HTTPException(400, detail="Faltan campos requeridos para registro en Oficialía.")

        anio_registro = parse_anio_registro(registro.fecha)
        area_destino = as_list(registro.areaDestino)

        movimiento = compact({
            **registro.model_dump(),
            "tipo": TipoMovimiento.REGISTRO_OFICIALIA.value,
            "areaOrigen": data.areaDeRegistro,
            "areaDestino": area_destino,
        })

        try:
            expediente = self.repository.create_expediente(
                numero_expediente=data.numeroExpediente,
                asunto=data.asunto,
                lista_de_dependencias=data.listaDeDependencias,
                anio_registro=anio_registro,
                status_actual=StatusExpediente.EN_OFICIALIA.value,
                area_de_registro=data.areaDeRegistro,
                areas_involucradas=area_destino,
                datos_generales=data.datosGenerales.model_dump(exclude_unset=True),
                movimiento_inicial=movimiento
            )
        except Exception:
            logger.exception("Error al registrar en oficialía")
            self.db.rollback()
            raise HTTPException(500, detail=INTERNAL_ERROR_MESSAGE)

        return {"message": "Registrado en Oficialía", "id": expediente.id}
