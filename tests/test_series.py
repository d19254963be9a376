# -*- coding: utf-8 -*-
"""
Tests de series y subseries documentales.

Cubre:
- Alta con subseries y consulta expandida
- Consulta por sección
- Actualización simple y con contrato CADIDO (reemplazo total)
- Alta/sobrescritura de subseries
- Eliminación en cascada y de una subserie
"""

import pytest


SERIE_S1 = {
    "codigo": "S1",
    "nombre": "Serie Uno",
    "codigoSeccion": "SEC1",
    "subseries": [{"codigo": "SS1", "nombre": "Sub Uno"}],
}


@pytest.fixture
def serie_s1(client):
    response = client.post("/series", json=SERIE_S1)
    assert response.status_code == 201
    return response.json()["id"]


def test_crear_y_consultar_serie(client, serie_s1):
    assert serie_s1 == "S1"

    response = client.get("/series/S1")
    assert response.status_code == 200
    assert response.json() == {
        "id": "S1",
        "nombre": "Serie Uno",
        "codigoSeccion": "SEC1",
        "subseries": [{"id": "SS1", "nombre": "Sub Uno"}],
    }


@pytest.mark.parametrize("payload", [
    {"codigo": "S1", "nombre": "Serie", "subseries": []},
    {"codigo": "", "nombre": "Serie", "subseries": [{"codigo": "A", "nombre": "B"}]},
    {"codigo": "S1", "subseries": [{"codigo": "A", "nombre": "B"}]},
    {"codigo": "S1", "nombre": "Serie", "subseries": [{"codigo": "A"}]},
])
def test_crear_serie_invalida(client, payload):
    response = client.post("/series", json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


def test_subserie_incompleta_no_escribe_la_serie(client):
    payload = {
        "codigo": "S9",
        "nombre": "Serie",
        "subseries": [{"codigo": "A", "nombre": "B"}, {"nombre": "sin código"}],
    }
    assert client.post("/series", json=payload).status_code == 400
    assert client.get("/series/S9").status_code == 404


def test_listar_series(client, serie_s1):
    client.post("/series", json={
        "codigo": "S2",
        "nombre": "Serie Dos",
        "codigoSeccion": "SEC2",
        "subseries": [{"codigo": "SS2", "nombre": "Sub Dos"}, {"codigo": "SS3", "nombre": "Sub Tres"}],
    })

    response = client.get("/series")
    assert response.status_code == 200
    series = response.json()
    assert [s["id"] for s in series] == ["S1", "S2"]
    assert [s["id"] for s in series[1]["subseries"]] == ["SS2", "SS3"]


def test_listar_series_vacio(client):
    response = client.get("/series")
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_series_por_seccion(client, serie_s1):
    client.post("/series", json={**SERIE_S1, "codigo": "S2", "codigoSeccion": "OTRA"})

    response = client.get("/series/codigoSeccion/SEC1")
    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == ["S1"]

    response = client.get("/series/codigoSeccion/NADA")
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_consultar_serie_inexistente(client):
    response = client.get("/series/NOPE")
    assert response.status_code == 404
    assert response.json() == {"error": "Serie no encontrada"}


def test_actualizar_serie_sin_subseries_las_conserva(client, serie_s1):
    response = client.put("/series/S1", json={"nombre": "Renombrada", "codigoSeccion": "SEC9"})
    assert response.status_code == 200
    assert response.json()["nuevoNombre"] == "Renombrada"

    data = client.get("/series/S1").json()
    assert data["nombre"] == "Renombrada"
    assert data["codigoSeccion"] == "SEC9"
    assert data["subseries"] == [{"id": "SS1", "nombre": "Sub Uno"}]


def test_actualizar_serie_reemplaza_subseries(client, serie_s1):
    response = client.put("/series/S1", json={
        "nombre": "Serie Uno",
        "codigoSeccion": "SEC1",
        "subseries": [{"codigo": "SS7", "nombre": "Nueva"}, {"codigo": "SS1", "nombre": "Reinsertada"}],
    })
    assert response.status_code == 200

    subseries = client.get("/series/S1").json()["subseries"]
    assert subseries == [{"id": "SS7", "nombre": "Nueva"}, {"id": "SS1", "nombre": "Reinsertada"}]


def test_actualizar_serie_validaciones(client, serie_s1):
    assert client.put("/series/S1", json={"nombre": "X"}).status_code == 400
    assert client.put("/series/NOPE", json={"nombre": "X", "codigoSeccion": "Y"}).status_code == 404


def test_actualizar_serie_cadido(client, serie_s1):
    subserie = {
        "codigo": "SS1",
        "nombre": "Sub Uno",
        "aniosTramite": 2,
        "datosPersonales": True,
        "valoresDocumentales": ["Administrativo", "Legal"],
        "aniosConcentracion": 5,
        "tecnicaSeleccion": "Conservación",
    }
    response = client.put("/series/S1/cadido", json={
        "nombre": "Serie Uno",
        "codigoSeccion": "SEC1",
        "subseries": [subserie],
    })
    assert response.status_code == 200

    guardada = client.get("/series/S1").json()["subseries"][0]
    assert guardada == {**{k: v for k, v in subserie.items() if k != "codigo"}, "id": "SS1"}


def test_actualizar_serie_cadido_exige_campos(client, serie_s1):
    response = client.put("/series/S1/cadido", json={
        "nombre": "Serie Uno",
        "codigoSeccion": "SEC1",
        "subseries": [{"codigo": "SS1", "nombre": "Sub Uno"}],
    })
    assert response.status_code == 400
    assert "aniosTramite" in response.json()["error"]


def test_agregar_subseries(client, serie_s1):
    response = client.put("/series/S1/subseries", json={
        "subseries": [{"codigo": "SS2", "nombre": "Sub Dos"}, {"codigo": "SS1", "nombre": "Sub Uno bis"}],
    })
    assert response.status_code == 200

    subseries = client.get("/series/S1").json()["subseries"]
    assert subseries == [{"id": "SS1", "nombre": "Sub Uno bis"}, {"id": "SS2", "nombre": "Sub Dos"}]


def test_agregar_subseries_validaciones(client, serie_s1):
    assert client.put("/series/NOPE/subseries", json={"subseries": [{"codigo": "A", "nombre": "B"}]}).status_code == 404
    assert client.put("/series/S1/subseries", json={"subseries": []}).status_code == 400
    assert client.put("/series/S1/subseries", json={"subseries": [{"codigo": "A"}]}).status_code == 400


def test_eliminar_serie_en_cascada(client, serie_s1, session_factory):
    from archivo.shared.database.models import Subserie

    response = client.delete("/series/S1")
    assert response.status_code == 200
    assert response.json()["serieId"] == "S1"

    assert client.get("/series/S1").status_code == 404
    with session_factory() as db:
        assert db.query(Subserie).filter(Subserie.serie_codigo == "S1").count() == 0

    assert client.delete("/series/S1").status_code == 404


def test_eliminar_subserie(client, serie_s1):
    client.put("/series/S1/subseries", json={"subseries": [{"codigo": "SS2", "nombre": "Sub Dos"}]})

    response = client.delete("/series/S1/subseries/SS1")
    assert response.status_code == 200
    assert response.json() == {"message": "Subserie eliminada con éxito", "serieId": "S1", "subserieId": "SS1"}
    assert client.get("/series/S1").json()["subseries"] == [{"id": "SS2", "nombre": "Sub Dos"}]


def test_eliminar_subserie_inexistente(client, serie_s1):
    assert client.delete("/series/S1/subseries/NOPE").json() == {"error": "Subserie no encontrada"}
    assert client.delete("/series/NOPE/subseries/SS1").status_code == 404


def test_codigo_health_es_una_serie_comun(client):
    payload = {**SERIE_S1, "codigo": "health"}
    assert client.post("/series", json=payload).status_code == 201

    response = client.get("/series/health")
    assert response.status_code == 200
    assert response.json()["id"] == "health"
    assert response.json()["subseries"] == [{"id": "SS1", "nombre": "Sub Uno"}]
