# archivo/modules/secciones/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Any, Dict
import logging

from .repository import SeccionesRepository
from .schemas import SeccionCreateRequest, SeccionUpdateRequest
from archivo.core.exceptions import INTERNAL_ERROR_MESSAGE
from archivo.shared.database.models import Seccion
from archivo.shared.schemas.common import is_blank, empty_list

logger = logging.getLogger(__name__)

class SeccionesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SeccionesRepository(db)

    @staticmethod
    def _to_dict(registro: Seccion) -> Dict[str, Any]:
        data = {
            "id": registro.codigo,
            "seccion": registro.seccion,
            "funcion": registro.funcion,
        }
        if registro.actualizado_el is not None:
            data["actualizadoEl"] = registro.actualizado_el.isoformat()
        return data

    def _get_or_404(self, codigo: str) -> Seccion:
        registro = self.repository.get_by_codigo(codigo)
        if not registro:
            raise HTTPException(404, detail="Registro no encontrado")
        return registro

    def _internal_error(self, context: str):
        logger.exception(context)
        self.db.rollback()
        return HTTPException(500, detail=INTERNAL_ERROR_MESSAGE)

    async def create_seccion(self, data: SeccionCreateRequest) -> Dict[str, Any]:
        """
        Registrar una sección del cuadro general.

        Si el código ya existe se sobrescriben ``seccion`` y ``funcion``:
        la operación es un upsert, no una creación estricta.
        """
        if is_blank(data.codigo) or is_blank(data.seccion) or is_blank(data.funcion):
            raise HTTPException(
                400,
                detail="'código' 'sección' y 'función' es obligatorio y debe ser una cadena no vacía."
            )
        try:
            registro = self.repository.upsert(data.codigo, data.seccion, data.funcion)
        except Exception:
            raise self._internal_error("Error al crear el registro de sección")

        return {"message": "Registro creado con éxito", "id": registro.codigo}

    async def list_secciones(self):
        registros = self.repository.get_all()
        if not registros:
            return empty_list("No hay registros encontrados")
        return [self._to_dict(registro) for registro in registros]

    async def get_seccion(self, codigo: str) -> Dict[str, Any]:
        return self._to_dict(self._get_or_404(codigo))

    async def update_seccion(self, codigo: str, data: SeccionUpdateRequest) -> Dict[str, Any]:
        """Cambiar el nombre de la sección; ``funcion`` no se modifica"""
        if is_blank(data.seccion):
            raise HTTPException(400, detail="Debe proporcionar el campo 'seccion' como cadena no vacía")

        registro = self._get_or_404(codigo)
        try:
            registro = self.repository.update_nombre(registro, data.seccion.strip())
        except Exception:
            raise self._internal_error("Error al actualizar el registro de sección")

        return {
            "message": "Registro actualizado con éxito",
            "data": self._to_dict(registro)
        }

    async def delete_seccion(self, codigo: str) -> Dict[str, Any]:
        registro = self._get_or_404(codigo)
        try:
            self.repository.delete(registro)
        except Exception:
            raise self._internal_error("Error al eliminar el registro de sección")

        return {"message": "Registro eliminado con éxito", "id": codigo}
