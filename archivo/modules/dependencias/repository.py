# archivo/modules/dependencias/repository.py
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from archivo.shared.database.models import Dependencia

logger = logging.getLogger(__name__)

class DependenciasRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, nombre: str) -> Dependencia:
        dependencia = Dependencia(nombre=nombre)
        self.db.add(dependencia)
        self.db.commit()
        self.db.refresh(dependencia)
        logger.info(f"Dependencia creada con ID: {dependencia.id}")
        return dependencia

    def get_all(self) -> List[Dependencia]:
        return self.db.query(Dependencia).order_by(Dependencia.created_at, Dependencia.id).all()

    def get_by_id(self, dependencia_id: str) -> Optional[Dependencia]:
        return self.db.get(Dependencia, dependencia_id)

    def update_nombre(self, dependencia: Dependencia, nombre: str) -> Dependencia:
        dependencia.nombre = nombre
        self.db.commit()
        logger.info(f"Dependencia {dependencia.id} actualizada")
        return dependencia

    def delete(self, dependencia: Dependencia):
        dependencia_id = dependencia.id
        self.db.delete(dependencia)
        self.db.commit()
        logger.info(f"Dependencia {dependencia_id} eliminada")
