# archivo/modules/secciones/schemas.py
from typing import Any, Dict, Optional

from archivo.shared.schemas.common import CamelModel, MessageResponse


class SeccionCreateRequest(CamelModel):
    codigo: Optional[str] = None
    seccion: Optional[str] = None
    funcion: Optional[str] = None


class SeccionUpdateRequest(CamelModel):
    seccion: Optional[str] = None


class SeccionActualizadaResponse(MessageResponse):
    data: Dict[str, Any]
