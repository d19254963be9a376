# archivo/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Text, JSON,
    ForeignKey, UniqueConstraint, func
)
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.dialects.postgresql import JSONB
import secrets
import string

Base = declarative_base()

# JSONB en PostgreSQL, JSON genérico en SQLite
JSONDocument = JSON().with_variant(JSONB(), "postgresql")

_ID_ALPHABET = string.ascii_letters + string.digits


def generate_document_id() -> str:
    """ID aleatorio de 20 caracteres, como los que genera un almacén de documentos"""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(20))


# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega created_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())


# =====================================================
# CUADRO GENERAL DE CLASIFICACIÓN
# =====================================================

class Seccion(Base, TimestampMixin):
    """Sección (unidad administrativa) identificada por su código"""
    __tablename__ = "secciones"

    codigo = Column(String(100), primary_key=True)
    seccion = Column(String(255), nullable=False)
    funcion = Column(Text, nullable=False)
    actualizado_el = Column(DateTime, nullable=True)


class Serie(Base, TimestampMixin):
    """Serie documental; es dueña de sus subseries"""
    __tablename__ = "series"

    codigo = Column(String(100), primary_key=True)
    nombre = Column(String(255), nullable=False)
    codigo_seccion = Column(String(100), nullable=True, index=True)

    subseries = relationship(
        "Subserie",
        back_populates="serie",
        order_by="Subserie.id",
        cascade="all, delete-orphan",
    )


class Subserie(Base):
    """Subserie documental; el id sustituto conserva el orden de inserción"""
    __tablename__ = "subseries"
    __table_args__ = (
        UniqueConstraint("serie_codigo", "codigo", name="uq_subserie_por_serie"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    serie_codigo = Column(String(100), ForeignKey("series.codigo", ondelete="CASCADE"), nullable=False, index=True)
    codigo = Column(String(100), nullable=False)
    nombre = Column(String(255), nullable=False)

    # Catálogo de disposición documental (CADIDO), opcional
    anios_tramite = Column(JSONDocument, nullable=True)
    datos_personales = Column(JSONDocument, nullable=True)
    valores_documentales = Column(JSONDocument, nullable=True)
    anios_concentracion = Column(JSONDocument, nullable=True)
    tecnica_seleccion = Column(JSONDocument, nullable=True)
    observaciones = Column(Text, nullable=True)

    serie = relationship("Serie", back_populates="subseries")


# =====================================================
# DEPENDENCIAS
# =====================================================

class Dependencia(Base, TimestampMixin):
    """Dependencia solicitante"""
    __tablename__ = "dependencias"

    id = Column(String(20), primary_key=True, default=generate_document_id)
    nombre = Column(String(255), nullable=False)


# =====================================================
# INVENTARIO (EXPEDIENTES)
# =====================================================

class Expediente(Base, TimestampMixin):
    """Expediente del inventario con su historial de movimientos embebido"""
    __tablename__ = "inventario"

    id = Column(String(20), primary_key=True, default=generate_document_id)
    numero_expediente = Column(String(255), nullable=False)
    asunto = Column(Text, nullable=False)
    lista_de_dependencias = Column(JSONDocument, nullable=False, default=list)
    anio_registro = Column(Integer, nullable=False, index=True)
    status_actual = Column(String(50), nullable=False)
    area_de_registro = Column(String(100), nullable=False, index=True)
    areas_involucradas = Column(JSONDocument, nullable=False, default=list)
    datos_generales = Column(JSONDocument, nullable=False, default=dict)
    # Ausente en expedientes que ingresan por oficialía
    subserie = Column(JSONDocument, nullable=True)
    historial_movimientos = Column(JSONDocument, nullable=False, default=list)

    areas = relationship(
        "ExpedienteArea",
        back_populates="expediente",
        cascade="all, delete-orphan",
    )


class ExpedienteArea(Base):
    """Índice de areasInvolucradas para consultas de turnados"""
    __tablename__ = "inventario_areas"

    inventario_id = Column(String(20), ForeignKey("inventario.id", ondelete="CASCADE"), primary_key=True)
    area = Column(String(100), primary_key=True, index=True)

    expediente = relationship("Expediente", back_populates="areas")
