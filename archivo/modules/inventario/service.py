# archivo/modules/inventario/service.py
from fastapi import HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional, Union
from datetime import datetime
import logging

from .repository import InventarioRepository
from .schemas import (
    ExpedienteCreateRequest, MovimientoRequest, ExpedienteReplaceRequest,
    StatusExpediente, TipoMovimiento, TIPOS_MOVIMIENTO_VALIDOS, SUBSERIE_FIELDS
)
from archivo.core.exceptions import INTERNAL_ERROR_MESSAGE
from archivo.shared.database.models import Expediente
from archivo.shared.schemas.common import is_blank

logger = logging.getLogger(__name__)

DEFAULT_OBSERVACIONES = "Sin observaciones"
DEFAULT_USUARIO = "Administrador"


# ==================== FUNCIONES DE APOYO ====================

def parse_anio_registro(fecha: Optional[str]) -> int:
    """Año de una fecha AAAA-MM-DD; 400 si falta o no se puede interpretar"""
    try:
        return datetime.strptime((fecha or "").strip(), "%Y-%m-%d").year
    except ValueError:
        raise HTTPException(
            400,
            detail="El campo 'fecha' de registro es obligatorio y debe tener formato AAAA-MM-DD."
        )


def as_list(value: Union[List[str], str, None]) -> List[str]:
    """Normalizar un área (o lista de áreas) a lista"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Quitar llaves sin valor, como hace el almacén con propiedades indefinidas"""
    return {key: value for key, value in data.items() if value is not None}


def expediente_to_dict(expediente: Expediente) -> Dict[str, Any]:
    data = {
        "id": expediente.id,
        "numeroExpediente": expediente.numero_expediente,
        "asunto": expediente.asunto,
        "listaDeDependencias": expediente.lista_de_dependencias,
        "anioRegistro": expediente.anio_registro,
        "statusActual": expediente.status_actual,
        "areaDeRegistro": expediente.area_de_registro,
        "areasInvolucradas": expediente.areas_involucradas,
        "datosGenerales": expediente.datos_generales,
    }
    if expediente.subserie is not None:
        data["subserie"] = expediente.subserie
    data["historialMovimientos"] = expediente.historial_movimientos
    return data


def parse_anio_param(anio: str) -> int:
    try:
        return int((anio or "").strip())
    except ValueError:
        raise HTTPException(400, detail="El año es obligatorio y debe ser numérico.")


def not_found_message(message: str) -> JSONResponse:
    """Consulta sin resultados: 404 con mensaje descriptivo, no un error de validación"""
    return JSONResponse(status_code=404, content={"message": message})


class InventarioService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = InventarioRepository(db)

    def _get_or_404(self, expediente_id: str) -> Expediente:
        expediente = self.repository.get_by_id(expediente_id)
        if not expediente:
            raise HTTPException(404, detail="No se encontró el registro en el inventario.")
        return expediente

    def _internal_error(self, context: str):
        logger.exception(context)
        self.db.rollback()
        return HTTPException(500, detail=INTERNAL_ERROR_MESSAGE)

    # ==================== REGISTRO ====================

    async def create_expediente(self, data: ExpedienteCreateRequest) -> Dict[str, Any]:
        """
        Registrar un expediente en el inventario.

        Proceso:
        1. Validar campos obligatorios y la fecha del registro
        2. Derivar ``anioRegistro`` del año de ``registro.fecha``
        3. Construir el primer movimiento (tipo ``registro``)
        4. Guardar con ID generado por el almacén
        """
        registro = data.registro
        subserie = data.subserie
        if (
            is_blank(data.numeroExpediente) or is_blank(data.asunto)
            or not data.listaDeDependencias
            or data.datosGenerales is None
            or subserie is None
            or any(is_blank(getattr(subserie, field)) for field in SUBSERIE_FIELDS)
            or registro is None
        ):
            raise HTTPException(400, detail="Faltan campos obligatorios o mal formato.")

        anio_registro = parse_anio_registro(registro.fecha)

        area_de_registro = data.areaDeRegistro or registro.areaOrigen
        if is_blank(area_de_registro):
            raise HTTPException(400, detail="El área de registro es obligatoria.")

        area_destino = as_list(registro.areaDestino)
        movimiento = compact({
            **registro.model_dump(),
            "tipo": TipoMovimiento.REGISTRO.value,
            "areaOrigen": area_de_registro,
            "areaDestino": area_destino,
            "observaciones": registro.observaciones or DEFAULT_OBSERVACIONES,
            "usuario": registro.usuario or DEFAULT_USUARIO,
        })

        try:
            expediente = self.repository.create_expediente(
                numero_expediente=data.numeroExpediente,
                asunto=data.asunto,
                lista_de_dependencias=data.listaDeDependencias,
                anio_registro=anio_registro,
                status_actual=StatusExpediente.REGISTRO.value,
                area_de_registro=area_de_registro,
                areas_involucradas=area_destino,
                datos_generales=data.datosGenerales.model_dump(exclude_unset=True),
                subserie=subserie.model_dump(),
                movimiento_inicial=movimiento
            )
        except Exception:
            raise self._internal_error("Error al registrar el inventario")

        return {"message": "Inventario registrado con éxito", "id": expediente.id}

    # ==================== MOVIMIENTOS ====================

    async def add_movimiento(self, expediente_id: str, data: MovimientoRequest) -> Dict[str, Any]:
        """
        Turnar, tramitar o concluir un expediente.

        El movimiento se agrega al historial, ``areaCanalizado`` se une a
        ``areasInvolucradas`` y ``statusActual`` toma el tipo recibido.
        No se valida el orden de los estados.
        """
        if is_blank(data.tipo) or not data.areaCanalizado or is_blank(data.fecha) or is_blank(data.usuario):
            raise HTTPException(
                400,
                detail="Campos obligatorios faltantes (tipo, areaCanalizado fecha, usuario)."
            )
        if data.tipo not in TIPOS_MOVIMIENTO_VALIDOS:
            raise HTTPException(400, detail="Tipo de movimiento inválido.")

        movimiento = compact({
            "tipo": data.tipo,
            "areaCanalizado": data.areaCanalizado,
            "fecha": data.fecha,
            "hora": data.hora,
            "observaciones": data.observaciones or DEFAULT_OBSERVACIONES,
            "usuario": data.usuario,
        })

        try:
            expediente = self.repository.append_movimiento(
                expediente_id,
                movimiento=movimiento,
                areas=as_list(data.areaCanalizado),
                status=data.tipo
            )
        except Exception:
            raise self._internal_error("Error al agregar movimiento")

        if expediente is None:
            raise HTTPException(404, detail="No se encontró el expediente con ese ID.")

        return {"message": "Movimiento agregado con éxito."}

    # ==================== EDICIÓN ====================

    async def replace_expediente(self, expediente_id: str, data: ExpedienteReplaceRequest) -> Dict[str, Any]:
        """Sobrescribir los campos editables; no modifica historial ni estado"""
        datos_generales = data.datos_generales()
        subserie = data.subserie_fields()
        requeridos = [data.numeroExpediente, data.asunto, *datos_generales.values(), *subserie.values()]
        if any(is_blank(value) for value in requeridos):
            raise HTTPException(400, detail="Debes proporcionar los campos requeridos.")

        expediente = self._get_or_404(expediente_id)

        fields = {
            "numero_expediente": data.numeroExpediente,
            "asunto": data.asunto,
            "datos_generales": datos_generales,
            "subserie": subserie,
        }
        if data.listaDeDependencias is not None:
            fields["lista_de_dependencias"] = data.listaDeDependencias

        try:
            self.repository.replace_fields(expediente, fields)
        except Exception:
            raise self._internal_error("Error al actualizar el expediente")

        return {"message": "Expediente actualizado con éxito", "serieId": expediente_id}

    # ==================== CONSULTAS ====================

    async def list_expedientes(self):
        expedientes = self.repository.get_all()
        if not expedientes:
            return not_found_message("No hay registros en el inventario.")
        return [expediente_to_dict(expediente) for expediente in expedientes]

    async def get_expediente(self, expediente_id: str) -> Dict[str, Any]:
        return expediente_to_dict(self._get_or_404(expediente_id))

    async def query_by_area_registro(self, anio: str, codigo_seccion: str):
        """Expedientes registrados en un año por un área"""
        anio_registro = parse_anio_param(anio)
        if is_blank(codigo_seccion):
            raise HTTPException(400, detail="El área de registro es obligatoria.")

        expedientes = self.repository.get_by_anio_and_area_registro(anio_registro, codigo_seccion)
        if not expedientes:
            return not_found_message(
                f"No hay registros en el inventario para el año {anio_registro} "
                f"con área de registro {codigo_seccion}."
            )
        return [expediente_to_dict(expediente) for expediente in expedientes]

    async def query_by_area_destino(self, anio: str, codigo_enviado: str):
        """Expedientes de un año turnados alguna vez a un área"""
        anio_registro = parse_anio_param(anio)
        if is_blank(codigo_enviado):
            raise HTTPException(400, detail="El código de área destino es obligatorio.")

        expedientes = self.repository.get_by_anio_and_area_involucrada(anio_registro, codigo_enviado)
        if not expedientes:
            return not_found_message(
                f"No hay registros con área destino {codigo_enviado} en el año {anio_registro}."
            )
        return [expediente_to_dict(expediente) for expediente in expedientes]

    # ==================== ELIMINACIÓN ====================

    async def delete_expediente(self, expediente_id: str) -> Dict[str, Any]:
        expediente = self.repository.get_by_id(expediente_id)
        if not expediente:
            raise HTTPException(404, detail="El registro no existe.")
        try:
            self.repository.delete(expediente)
        except Exception:
            raise self._internal_error("Error al eliminar el inventario")

        return {"message": "Inventario eliminado correctamente."}
