# archivo/modules/dependencias/schemas.py
from pydantic import BaseModel
from typing import Optional

from archivo.shared.schemas.common import CamelModel, MessageIdResponse


class DependenciaRequest(CamelModel):
    nombre: Optional[str] = None


class DependenciaResponse(BaseModel):
    id: str
    nombre: Optional[str] = None


class DependenciaActualizadaResponse(MessageIdResponse):
    nuevoNombre: Optional[str] = None
