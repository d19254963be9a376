# archivo/modules/secciones/repository.py
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
import logging

from archivo.shared.database.models import Seccion

logger = logging.getLogger(__name__)

class SeccionesRepository:
    def __init__(self, db: Session):
        self.db = db

    def upsert(self, codigo: str, seccion: str, funcion: str) -> Seccion:
        """Crear o sobrescribir la sección con ese código"""
        registro = self.db.get(Seccion, codigo)
        if registro is None:
            registro = Seccion(codigo=codigo)
            self.db.add(registro)

        registro.seccion = seccion
        registro.funcion = funcion
        registro.actualizado_el = None

        self.db.commit()
        self.db.refresh(registro)
        logger.info(f"Sección {codigo} guardada")
        return registro

    def get_all(self) -> List[Seccion]:
        return self.db.query(Seccion).order_by(Seccion.codigo).all()

    def get_by_codigo(self, codigo: str) -> Optional[Seccion]:
        return self.db.get(Seccion, codigo)

    def update_nombre(self, registro: Seccion, seccion: str) -> Seccion:
        registro.seccion = seccion
        registro.actualizado_el = datetime.now()
        self.db.commit()
        self.db.refresh(registro)
        logger.info(f"Sección {registro.codigo} actualizada")
        return registro

    def delete(self, registro: Seccion):
        codigo = registro.codigo
        self.db.delete(registro)
        self.db.commit()
        logger.info(f"Sección {codigo} eliminada")
