# archivo/modules/dependencias/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Any, Dict
import logging

from .repository import DependenciasRepository
from .schemas import DependenciaRequest
from archivo.core.exceptions import INTERNAL_ERROR_MESSAGE
from archivo.shared.database.models import Dependencia
from archivo.shared.schemas.common import is_blank, empty_list

logger = logging.getLogger(__name__)

class DependenciasService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = DependenciasRepository(db)

    def _get_or_404(self, dependencia_id: str) -> Dependencia:
        dependencia = self.repository.get_by_id(dependencia_id)
        if not dependencia:
            raise HTTPException(404, detail="Dependencia no encontrada")
        return dependencia

    def _internal_error(self, context: str):
        logger.exception(context)
        self.db.rollback()
        return HTTPException(500, detail=INTERNAL_ERROR_MESSAGE)

    async def create_dependencia(self, data: DependenciaRequest) -> Dict[str, Any]:
        if is_blank(data.nombre):
            raise HTTPException(400, detail="El nombre es obligatorio.")
        try:
            dependencia = self.repository.create(data.nombre)
        except Exception:
            raise self._internal_error("Error al registrar la dependencia")

        return {"message": "Dependencia registrada con éxito", "id": dependencia.id}

    async def list_dependencias(self):
        dependencias = self.repository.get_all()
        if not dependencias:
            return empty_list("No hay dependencias registradas")
        return [
            {"id": dependencia.id, "nombre": dependencia.nombre or "Sin nombre"}
            for dependencia in dependencias
        ]

    async def get_dependencia(self, dependencia_id: str) -> Dict[str, Any]:
        dependencia = self._get_or_404(dependencia_id)
        return {"id": dependencia.id, "nombre": dependencia.nombre}

    async def update_dependencia(self, dependencia_id: str, data: DependenciaRequest) -> Dict[str, Any]:
        if is_blank(data.nombre):
            raise HTTPException(400, detail="Debes proporcionar un nombre válido para la dependencia.")

        dependencia = self._get_or_404(dependencia_id)
        try:
            self.repository.update_nombre(dependencia, data.nombre)
        except Exception:
            raise self._internal_error("Error al actualizar la dependencia")

        return {
            "message": "Dependencia actualizada con éxito",
            "id": dependencia_id,
            "nuevoNombre": data.nombre
        }

    async def delete_dependencia(self, dependencia_id: str) -> Dict[str, Any]:
        dependencia = self._get_or_404(dependencia_id)
        try:
            self.repository.delete(dependencia)
        except Exception:
            raise self._internal_error("Error al eliminar la dependencia")

        return {"message": "Dependencia eliminada con éxito", "id": dependencia_id}
