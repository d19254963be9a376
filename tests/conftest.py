# -*- coding: utf-8 -*-
"""
Fixtures compartidas: app FastAPI sobre SQLite en memoria.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from archivo.config.database import get_db, init_db
from archivo.main import create_app
from archivo.shared.database.models import Base


@pytest.fixture
def engine():
    """Engine en memoria compartido por todas las sesiones de la prueba."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def app(session_factory):
    """App con get_db apuntando al engine de pruebas."""
    app = create_app()

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def expediente_payload():
    """Cuerpo válido para POST /inventario."""
    return {
        "numeroExpediente": "EXP-001/2025",
        "asunto": "Solicitud de información pública",
        "listaDeDependencias": ["DEP1", "DEP2"],
        "areaDeRegistro": "AREA1",
        "datosGenerales": {
            "numeroFojas": 25,
            "soporteDocumental": "Papel",
            "condicionesAcceso": "Público",
            "aniosReserva": 0,
            "tradicionDocumental": "Original",
            "inmueble": "Edificio central",
            "ubicacion": "Estante 3",
        },
        "subserie": {
            "codigoSubserie": "SS1",
            "nombreSubserie": "Solicitudes",
            "valorDocumental": "Administrativo",
            "aniosTramite": 2,
            "aniosConcentracion": 5,
        },
        "registro": {
            "fecha": "2025-03-10",
            "hora": "10:30",
            "areaDestino": "AREA2",
            "observaciones": "Ingreso inicial",
            "usuario": "capturista",
        },
    }


@pytest.fixture
def crear_expediente(client, expediente_payload):
    """Registra un expediente y devuelve su id."""
    def _crear(**overrides):
        payload = {**expediente_payload, **overrides}
        response = client.post("/inventario", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _crear
