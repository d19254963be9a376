# archivo/modules/inventario/schemas.py
from pydantic import ConfigDict
from typing import Any, List, Optional, Union
from enum import Enum

from archivo.shared.schemas.common import CamelModel, MessageResponse


class StatusExpediente(str, Enum):
    """Etiqueta de estado; no se valida el orden de las transiciones"""
    REGISTRO = "registro"
    TRAMITE = "tramite"
    CONCLUIDO = "concluido"
    EN_OFICIALIA = "enOficialia"


class TipoMovimiento(str, Enum):
    REGISTRO = "registro"
    REGISTRO_OFICIALIA = "registroOficialia"
    TRAMITE = "tramite"
    CONCLUIDO = "concluido"


# Tipos que se pueden agregar a un expediente ya registrado
TIPOS_MOVIMIENTO_VALIDOS = (TipoMovimiento.TRAMITE.value, TipoMovimiento.CONCLUIDO.value)

DATOS_GENERALES_FIELDS = (
    "numeroFojas", "soporteDocumental", "condicionesAcceso", "aniosReserva",
    "tradicionDocumental", "inmueble", "ubicacion",
)

SUBSERIE_FIELDS = (
    "codigoSubserie", "nombreSubserie", "valorDocumental", "aniosTramite", "aniosConcentracion",
)


class DatosGenerales(CamelModel):
    numeroFojas: Optional[Any] = None
    soporteDocumental: Optional[Any] = None
    condicionesAcceso: Optional[Any] = None
    aniosReserva: Optional[Any] = None
    tradicionDocumental: Optional[Any] = None
    inmueble: Optional[Any] = None
    ubicacion: Optional[Any] = None


class SubserieExpediente(CamelModel):
    codigoSubserie: Optional[Any] = None
    nombreSubserie: Optional[Any] = None
    valorDocumental: Optional[Any] = None
    aniosTramite: Optional[Any] = None
    aniosConcentracion: Optional[Any] = None


class Registro(CamelModel):
    """Movimiento inicial; los campos adicionales se copian tal cual al historial"""
    model_config = ConfigDict(extra="allow")

    fecha: Optional[str] = None
    hora: Optional[str] = None
    areaOrigen: Optional[str] = None
    areaDestino: Optional[Union[List[str], str]] = None
    observaciones: Optional[str] = None
    usuario: Optional[str] = None


class ExpedienteCreateRequest(CamelModel):
    numeroExpediente: Optional[str] = None
    asunto: Optional[str] = None
    listaDeDependencias: Optional[List[str]] = None
    areaDeRegistro: Optional[str] = None
    datosGenerales: Optional[DatosGenerales] = None
    subserie: Optional[SubserieExpediente] = None
    registro: Optional[Registro] = None


class MovimientoRequest(CamelModel):
    tipo: Optional[str] = None
    areaCanalizado: Optional[Union[List[str], str]] = None
    fecha: Optional[str] = None
    hora: Optional[str] = None
    observaciones: Optional[str] = None
    usuario: Optional[str] = None


class ExpedienteReplaceRequest(CamelModel):
    """
    Reemplazo de los campos editables del expediente.

    Los campos de ``datosGenerales`` y ``subserie`` se aceptan planos
    (como los envía el formulario de edición) o anidados.
    """
    numeroExpediente: Optional[str] = None
    asunto: Optional[str] = None
    listaDeDependencias: Optional[List[str]] = None

    numeroFojas: Optional[Any] = None
    soporteDocumental: Optional[Any] = None
    condicionesAcceso: Optional[Any] = None
    aniosReserva: Optional[Any] = None
    tradicionDocumental: Optional[Any] = None
    inmueble: Optional[Any] = None
    ubicacion: Optional[Any] = None

    codigoSubserie: Optional[Any] = None
    nombreSubserie: Optional[Any] = None
    valorDocumental: Optional[Any] = None
    aniosTramite: Optional[Any] = None
    aniosConcentracion: Optional[Any] = None

    datosGenerales: Optional[DatosGenerales] = None
    subserie: Optional[SubserieExpediente] = None

    def datos_generales(self) -> dict:
        anidados = self.datosGenerales or DatosGenerales()
        return {
            field: getattr(self, field) if getattr(self, field) is not None else getattr(anidados, field)
            for field in DATOS_GENERALES_FIELDS
        }

    def subserie_fields(self) -> dict:
        anidados = self.subserie or SubserieExpediente()
        return {
            field: getattr(self, field) if getattr(self, field) is not None else getattr(anidados, field)
            for field in SUBSERIE_FIELDS
        }


class ExpedienteActualizadoResponse(MessageResponse):
    # La llave conserva el nombre que consumen los clientes existentes
    serieId: str
