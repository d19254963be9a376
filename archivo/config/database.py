# archivo/config/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .settings import settings

logger = logging.getLogger(__name__)

# Configuración del engine
engine_kwargs = {
    "pool_pre_ping": True,
    "echo": settings.debug
}

if settings.is_sqlite:
    # SQLite comparte la conexión entre hilos del servidor
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs["pool_recycle"] = 300

# Engine único para todo el proceso
engine = create_engine(
    settings.database_url_with_ssl,
    **engine_kwargs
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Crear las tablas del archivo si no existen"""
    from archivo.shared.database.models import Base

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Tablas del archivo verificadas")


# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
