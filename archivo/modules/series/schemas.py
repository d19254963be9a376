# archivo/modules/series/schemas.py
from pydantic import Field
from typing import Any, List, Optional

from archivo.shared.schemas.common import CamelModel, MessageResponse

# Campos del catálogo de disposición documental y su columna en BD
CADIDO_FIELDS = {
    "aniosTramite": "anios_tramite",
    "datosPersonales": "datos_personales",
    "valoresDocumentales": "valores_documentales",
    "aniosConcentracion": "anios_concentracion",
    "tecnicaSeleccion": "tecnica_seleccion",
    "observaciones": "observaciones",
}

# Obligatorios en el contrato CADIDO además de codigo/nombre
CADIDO_REQUIRED = ("aniosTramite", "valoresDocumentales", "aniosConcentracion", "tecnicaSeleccion")


class SubserieItem(CamelModel):
    codigo: Optional[str] = None
    nombre: Optional[str] = None

    # CADIDO
    aniosTramite: Optional[Any] = None
    datosPersonales: Optional[Any] = None
    valoresDocumentales: Optional[Any] = None
    aniosConcentracion: Optional[Any] = None
    tecnicaSeleccion: Optional[Any] = None
    observaciones: Optional[str] = None

    def cadido_values(self) -> dict:
        """Valores CADIDO presentes, indexados por nombre de columna"""
        return {
            column: getattr(self, field)
            for field, column in CADIDO_FIELDS.items()
            if getattr(self, field) is not None
        }


class SerieCreateRequest(CamelModel):
    codigo: Optional[str] = None
    nombre: Optional[str] = None
    codigoSeccion: Optional[str] = None
    subseries: Optional[List[SubserieItem]] = None


class SerieUpdateRequest(CamelModel):
    nombre: Optional[str] = None
    codigoSeccion: Optional[str] = None
    subseries: Optional[List[SubserieItem]] = Field(
        None, description="Si se envía, reemplaza todas las subseries de la serie"
    )


class SubseriesAddRequest(CamelModel):
    subseries: Optional[List[SubserieItem]] = None


# ==================== RESPUESTAS ====================

class SerieMessageResponse(MessageResponse):
    serieId: str


class SerieActualizadaResponse(SerieMessageResponse):
    nuevoNombre: Optional[str] = None


class SubserieEliminadaResponse(SerieMessageResponse):
    subserieId: str
