# archivo/modules/series/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
import logging

from .repository import SeriesRepository
from .schemas import (
    SerieCreateRequest, SerieUpdateRequest, SubseriesAddRequest,
    SubserieItem, CADIDO_FIELDS, CADIDO_REQUIRED
)
from archivo.core.exceptions import INTERNAL_ERROR_MESSAGE
from archivo.shared.database.models import Serie, Subserie
from archivo.shared.schemas.common import is_blank, empty_list

logger = logging.getLogger(__name__)

SUBSERIE_INCOMPLETA = "Cada subserie debe tener un código y un nombre."


class SeriesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SeriesRepository(db)

    # ==================== SERIALIZACIÓN ====================

    @staticmethod
    def _subserie_to_dict(subserie: Subserie) -> Dict[str, Any]:
        data = {"id": subserie.codigo, "nombre": subserie.nombre}
        for field, column in CADIDO_FIELDS.items():
            value = getattr(subserie, column)
            if value is not None:
                data[field] = value
        return data

    def _serie_to_dict(self, serie: Serie) -> Dict[str, Any]:
        return {
            "id": serie.codigo,
            "nombre": serie.nombre,
            "codigoSeccion": serie.codigo_seccion,
            "subseries": [self._subserie_to_dict(s) for s in serie.subseries]
        }

    # ==================== VALIDACIÓN ====================

    @staticmethod
    def _validate_subseries(subseries: List[SubserieItem], cadido: bool = False):
        """Validar todas las subseries antes de escribir cualquiera"""
        for item in subseries:
            if is_blank(item.codigo) or is_blank(item.nombre):
                raise HTTPException(400, detail=SUBSERIE_INCOMPLETA)
            if cadido:
                faltantes = [field for field in CADIDO_REQUIRED if is_blank(getattr(item, field))]
                if faltantes:
                    raise HTTPException(
                        400,
                        detail=f"La subserie '{item.codigo}' requiere los campos: {', '.join(faltantes)}."
                    )

    def _get_or_404(self, codigo: str) -> Serie:
        serie = self.repository.get_by_codigo(codigo)
        if not serie:
            raise HTTPException(404, detail="Serie no encontrada")
        return serie

    def _internal_error(self, context: str):
        logger.exception(context)
        self.db.rollback()
        return HTTPException(500, detail=INTERNAL_ERROR_MESSAGE)

    # ==================== OPERACIONES ====================

    async def create_serie(self, data: SerieCreateRequest) -> Dict[str, Any]:
        """
        Registrar una serie con al menos una subserie.

        Funciona como upsert: una serie con el mismo código se sobrescribe
        y sus subseries se guardan por código.
        """
        if is_blank(data.codigo) or is_blank(data.nombre) or not data.subseries:
            raise HTTPException(400, detail="Código, nombre y al menos una subserie son obligatorios.")

        self._validate_subseries(data.subseries)

        try:
            self.repository.upsert_serie(
                codigo=data.codigo,
                nombre=data.nombre,
                codigo_seccion=data.codigoSeccion,
                subseries=data.subseries
            )
        except Exception:
            raise self._internal_error("Error al registrar la serie")

        return {"message": "Serie y subseries registradas con éxito", "id": data.codigo}

    async def list_series(self):
        series = self.repository.get_all()
        if not series:
            return empty_list("No hay series registradas")
        return [self._serie_to_dict(serie) for serie in series]

    async def list_series_by_seccion(self, codigo_seccion: str):
        if is_blank(codigo_seccion):
            raise HTTPException(
                400,
                detail="El parámetro 'codigoSeccion' es obligatorio y debe ser una cadena no vacía."
            )
        series = self.repository.get_by_seccion(codigo_seccion)
        if not series:
            return empty_list("No se encontraron series con ese 'codigoSeccion'")
        return [self._serie_to_dict(serie) for serie in series]

    async def get_serie(self, codigo: str) -> Dict[str, Any]:
        return self._serie_to_dict(self._get_or_404(codigo))

    async def update_serie(
        self,
        codigo: str,
        data: SerieUpdateRequest,
        cadido: bool = False
    ) -> Dict[str, Any]:
        """
        Actualizar nombre y sección de la serie.

        Con ``subseries`` se eliminan todas las existentes y se insertan
        las recibidas. ``cadido`` exige además los campos del catálogo de
        disposición documental en cada subserie.
        """
        if is_blank(data.nombre) or is_blank(data.codigoSeccion):
            raise HTTPException(400, detail="Debes proporcionar el nombre y el código de sección de la serie.")

        if data.subseries is not None:
            self._validate_subseries(data.subseries, cadido=cadido)

        serie = self._get_or_404(codigo)
        try:
            self.repository.update_serie(
                serie,
                nombre=data.nombre,
                codigo_seccion=data.codigoSeccion,
                subseries=data.subseries
            )
        except Exception:
            raise self._internal_error("Error al actualizar la serie")

        return {
            "message": "Serie actualizada con éxito",
            "serieId": codigo,
            "nuevoNombre": data.nombre
        }

    async def add_subseries(self, codigo: str, data: SubseriesAddRequest) -> Dict[str, Any]:
        serie = self._get_or_404(codigo)

        if not data.subseries:
            raise HTTPException(400, detail="Debes proporcionar al menos una subserie en un array.")
        self._validate_subseries(data.subseries)

        try:
            self.repository.add_subseries(serie, data.subseries)
        except Exception:
            raise self._internal_error("Error al agregar subseries")

        return {"message": "Subseries agregadas con éxito a la serie", "serieId": codigo}

    async def delete_serie(self, codigo: str) -> Dict[str, Any]:
        serie = self._get_or_404(codigo)
        try:
            self.repository.delete_serie(serie)
        except Exception:
            raise self._internal_error("Error al eliminar la serie")

        return {"message": "Serie y sus subseries eliminadas con éxito", "serieId": codigo}

    async def delete_subserie(self, serie_codigo: str, subserie_codigo: str) -> Dict[str, Any]:
        self._get_or_404(serie_codigo)

        subserie: Optional[Subserie] = self.repository.get_subserie(serie_codigo, subserie_codigo)
        if not subserie:
            raise HTTPException(404, detail="Subserie no encontrada")

        try:
            self.repository.delete_subserie(subserie)
        except Exception:
            raise self._internal_error("Error al eliminar la subserie")

        return {
            "message": "Subserie eliminada con éxito",
            "serieId": serie_codigo,
            "subserieId": subserie_codigo
        }
