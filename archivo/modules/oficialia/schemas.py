# archivo/modules/oficialia/schemas.py
from typing import List, Optional

from archivo.shared.schemas.common import CamelModel
from archivo.modules.inventario.schemas import DatosGenerales, Registro


class OficialiaCreateRequest(CamelModel):
    numeroExpediente: Optional[str] = None
    asunto: Optional[str] = None
    areaDeRegistro: Optional[str] = None
    listaDeDependencias: Optional[List[str]] = None
    datosGenerales: Optional[DatosGenerales] = None
    registro: Optional[Registro] = None
