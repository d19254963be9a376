# archivo/modules/inventario/repository.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
import logging

from archivo.shared.database.models import Expediente, ExpedienteArea

logger = logging.getLogger(__name__)

class InventarioRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_expediente(
        self,
        numero_expediente: str,
        asunto: str,
        lista_de_dependencias: List[str],
        anio_registro: int,
        status_actual: str,
        area_de_registro: str,
        areas_involucradas: List[str],
        datos_generales: Dict[str, Any],
        movimiento_inicial: Dict[str, Any],
        subserie: Optional[Dict[str, Any]] = None
    ) -> Expediente:
        """Crear el expediente con su primer movimiento y el índice de áreas"""
        areas = list(dict.fromkeys(areas_involucradas))
        expediente = Expediente(
            numero_expediente=numero_expediente,
            asunto=asunto,
            lista_de_dependencias=lista_de_dependencias,
            anio_registro=anio_registro,
            status_actual=status_actual,
            area_de_registro=area_de_registro,
            areas_involucradas=areas,
            datos_generales=datos_generales,
            subserie=subserie,
            historial_movimientos=[movimiento_inicial],
            areas=[ExpedienteArea(area=area) for area in areas]
        )

        self.db.add(expediente)
        self.db.commit()
        self.db.refresh(expediente)

        logger.info(f"Expediente creado con ID: {expediente.id} ({status_actual})")
        return expediente

    def get_all(self) -> List[Expediente]:
        return self.db.query(Expediente).order_by(Expediente.created_at, Expediente.id).all()

    def get_by_id(self, expediente_id: str) -> Optional[Expediente]:
        return self.db.get(Expediente, expediente_id)

    def append_movimiento(
        self,
        expediente_id: str,
        movimiento: Dict[str, Any],
        areas: List[str],
        status: str
    ) -> Optional[Expediente]:
        """
        Agregar un movimiento al historial en una sola transacción.

        El historial se une como conjunto: un movimiento idéntico a uno ya
        registrado no se duplica. Las áreas se unen a ``areasInvolucradas``
        y ``statusActual`` toma el tipo del movimiento.

        Returns:
            El expediente actualizado, o None si no existe.
        """
        try:
            expediente = self.db.query(Expediente).filter(
                Expediente.id == expediente_id
            ).with_for_update().first()

            if not expediente:
                self.db.rollback()
                return None

            historial = list(expediente.historial_movimientos or [])
            if movimiento in historial:
                logger.info(f"Movimiento repetido en expediente {expediente_id}; el historial no cambia")
            else:
                historial.append(movimiento)
            expediente.historial_movimientos = historial

            involucradas = list(expediente.areas_involucradas or [])
            for area in areas:
                if area not in involucradas:
                    involucradas.append(area)
                    expediente.areas.append(ExpedienteArea(area=area))
            expediente.areas_involucradas = involucradas

            expediente.status_actual = status

            self.db.commit()
            self.db.refresh(expediente)

            logger.info(f"Movimiento '{status}' agregado al expediente {expediente_id}")
            return expediente

        except Exception:
            self.db.rollback()
            raise

    def replace_fields(self, expediente: Expediente, fields: Dict[str, Any]) -> Expediente:
        """Sobrescribir columnas editables; el historial no se toca"""
        for column, value in fields.items():
            setattr(expediente, column, value)
        self.db.commit()
        logger.info(f"Expediente {expediente.id} actualizado")
        return expediente

    def get_by_anio_and_area_registro(self, anio: int, area: str) -> List[Expediente]:
        return self.db.query(Expediente).filter(
            Expediente.anio_registro == anio,
            Expediente.area_de_registro == area
        ).order_by(Expediente.created_at, Expediente.id).all()

    def get_by_anio_and_area_involucrada(self, anio: int, area: str) -> List[Expediente]:
        return self.db.query(Expediente).join(
            ExpedienteArea, ExpedienteArea.inventario_id == Expediente.id
        ).filter(
            Expediente.anio_registro == anio,
            ExpedienteArea.area == area
        ).order_by(Expediente.created_at, Expediente.id).all()

    def delete(self, expediente: Expediente):
        expediente_id = expediente.id
        self.db.delete(expediente)
        self.db.commit()
        logger.info(f"Expediente {expediente_id} eliminado")
