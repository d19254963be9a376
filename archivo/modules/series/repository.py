# archivo/modules/series/repository.py
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
import logging

from archivo.shared.database.models import Serie, Subserie
from .schemas import SubserieItem, CADIDO_FIELDS

logger = logging.getLogger(__name__)

class SeriesRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Serie).options(selectinload(Serie.subseries))

    def get_all(self) -> List[Serie]:
        return self._query().order_by(Serie.codigo).all()

    def get_by_seccion(self, codigo_seccion: str) -> List[Serie]:
        return self._query().filter(
            Serie.codigo_seccion == codigo_seccion
        ).order_by(Serie.codigo).all()

    def get_by_codigo(self, codigo: str) -> Optional[Serie]:
        return self._query().filter(Serie.codigo == codigo).first()

    def get_subserie(self, serie_codigo: str, codigo: str) -> Optional[Subserie]:
        return self.db.query(Subserie).filter(
            Subserie.serie_codigo == serie_codigo,
            Subserie.codigo == codigo
        ).first()

    def _upsert_subserie(self, serie: Serie, item: SubserieItem) -> Subserie:
        """Guardar la subserie por su código; la existente se sobrescribe en su lugar"""
        subserie = next((s for s in serie.subseries if s.codigo == item.codigo), None)
        if subserie is None:
            subserie = Subserie(codigo=item.codigo)
            serie.subseries.append(subserie)

        subserie.nombre = item.nombre
        cadido = item.cadido_values()
        for column in CADIDO_FIELDS.values():
            setattr(subserie, column, cadido.get(column))
        return subserie

    def upsert_serie(
        self,
        codigo: str,
        nombre: str,
        codigo_seccion: Optional[str],
        subseries: List[SubserieItem]
    ) -> Serie:
        """
        Crear o sobrescribir la serie y guardar sus subseries.

        La serie existente conserva las subseries que no vienen en la
        petición, igual que al escribir documentos hijos uno por uno.
        """
        serie = self.get_by_codigo(codigo)
        if serie is None:
            serie = Serie(codigo=codigo)
            self.db.add(serie)

        serie.nombre = nombre
        serie.codigo_seccion = codigo_seccion
        for item in subseries:
            self._upsert_subserie(serie, item)

        self.db.commit()
        logger.info(f"Serie {codigo} guardada con {len(subseries)} subseries")
        return serie

    def update_serie(
        self,
        serie: Serie,
        nombre: str,
        codigo_seccion: str,
        subseries: Optional[List[SubserieItem]] = None
    ) -> Serie:
        """Actualizar nombre y sección; si llegan subseries se reemplaza el conjunto completo"""
        serie.nombre = nombre
        serie.codigo_seccion = codigo_seccion

        if subseries is not None:
            serie.subseries.clear()
            # Las eliminadas deben salir antes de reinsertar códigos repetidos
            self.db.flush()
            for item in subseries:
                self._upsert_subserie(serie, item)

        self.db.commit()
        logger.info(f"Serie {serie.codigo} actualizada")
        return serie

    def add_subseries(self, serie: Serie, subseries: List[SubserieItem]) -> Serie:
        for item in subseries:
            self._upsert_subserie(serie, item)
        self.db.commit()
        logger.info(f"{len(subseries)} subseries agregadas a la serie {serie.codigo}")
        return serie

    def delete_serie(self, serie: Serie):
        """Eliminar la serie y todas sus subseries en una sola transacción"""
        codigo, total = serie.codigo, len(serie.subseries)
        self.db.delete(serie)
        self.db.commit()
        logger.info(f"Serie {codigo} eliminada junto con {total} subseries")

    def delete_subserie(self, subserie: Subserie):
        codigo, serie_codigo = subserie.codigo, subserie.serie_codigo
        self.db.delete(subserie)
        self.db.commit()
        logger.info(f"Subserie {codigo} eliminada de la serie {serie_codigo}")
