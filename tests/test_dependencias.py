# -*- coding: utf-8 -*-
"""
Tests del catálogo de dependencias.
"""


def _crear(client, nombre="Secretaría de Finanzas"):
    response = client.post("/dependencias", json={"nombre": nombre})
    assert response.status_code == 201
    return response.json()["id"]


def test_crear_y_consultar(client):
    dependencia_id = _crear(client)
    assert len(dependencia_id) == 20

    response = client.get(f"/dependencias/{dependencia_id}")
    assert response.status_code == 200
    assert response.json() == {"id": dependencia_id, "nombre": "Secretaría de Finanzas"}


def test_crear_sin_nombre(client):
    response = client.post("/dependencias", json={"nombre": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "El nombre es obligatorio."}


def test_nombre_con_tipo_incorrecto(client):
    response = client.post("/dependencias", json={"nombre": ["no", "texto"]})
    assert response.status_code == 400
    assert "error" in response.json()


def test_listar(client):
    assert client.get("/dependencias").json() == {"message": "No hay dependencias registradas", "data": []}

    _crear(client, "Tesorería")
    response = client.get("/dependencias")
    assert response.status_code == 200
    assert [d["nombre"] for d in response.json()] == ["Tesorería"]


def test_actualizar(client):
    dependencia_id = _crear(client)
    response = client.put(f"/dependencias/{dependencia_id}", json={"nombre": "Contraloría"})
    assert response.status_code == 200
    assert response.json()["nuevoNombre"] == "Contraloría"
    assert client.get(f"/dependencias/{dependencia_id}").json()["nombre"] == "Contraloría"

    assert client.put(f"/dependencias/{dependencia_id}", json={}).status_code == 400
    assert client.put("/dependencias/inexistente", json={"nombre": "X"}).status_code == 404


def test_eliminar(client):
    dependencia_id = _crear(client)
    response = client.delete(f"/dependencias/{dependencia_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Dependencia eliminada con éxito", "id": dependencia_id}

    assert client.get(f"/dependencias/{dependencia_id}").status_code == 404
    assert client.delete(f"/dependencias/{dependencia_id}").status_code == 404
