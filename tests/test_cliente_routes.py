"""
PRUEBAS DE API - Rutas /clientes
Objetivo: códigos de estado y cuerpos de respuesta de cada endpoint
"""
import re

import pytest

from app.models.cliente import Cliente as DBCliente

MENSAJE_CREADO = re.compile(r"^Cliente creado exitosamente con ID: (\d{8})$")


def _crear(client, datos):
    response = client.post("/clientes", json=datos)
    assert response.status_code == 201, response.text
    return MENSAJE_CREADO.match(response.text).group(1)


def _pk(db_session, identificacion):
    return db_session.query(DBCliente).filter(DBCliente.identificacion == identificacion).one().id


class TestCrearClienteApi:

    def test_escenario_crear_y_consultar(self, client, db_session, sample_cliente_data):
        """
        Crear a Carlos Fernández y consultarlo por ID y por código.
        """
        response = client.post("/clientes", json=sample_cliente_data)

        assert response.status_code == 201
        assert response.headers["content-type"].startswith("text/plain")
        match = MENSAJE_CREADO.match(response.text)
        assert match is not None
        codigo = match.group(1)

        esperado = {
            "clienteId": codigo,
            "nombre": "Carlos Fernández",
            "identificacion": "10948075",
            "estado": True
        }

        por_id = client.get(f"/clientes/{_pk(db_session, '10948075')}")
        assert por_id.status_code == 200
        assert por_id.json() == esperado

        por_codigo = client.get(f"/clientes/codigo/{codigo}")
        assert por_codigo.status_code == 200
        assert por_codigo.json() == esperado

    def test_identificacion_duplicada(self, client, sample_cliente_data):
        _crear(client, sample_cliente_data)

        response = client.post("/clientes", json=sample_cliente_data)

        assert response.status_code == 400
        assert response.text == "La identificación ya está en uso."

    def test_validacion_por_campo(self, client, sample_cliente_data):
        sample_cliente_data["nombre"] = ""
        sample_cliente_data["edad"] = "veintiocho"

        response = client.post("/clientes", json=sample_cliente_data)

        assert response.status_code == 400
        errores = response.json()
        assert set(errores) == {"nombre", "edad"}

    def test_cuerpo_ausente(self, client):
        response = client.post("/clientes")

        assert response.status_code == 400
        assert isinstance(response.json(), dict)


class TestConsultarClientesApi:

    def test_listar(self, client, sample_cliente_data):
        codigo = _crear(client, sample_cliente_data)

        response = client.get("/clientes")

        assert response.status_code == 200
        assert response.json() == [{
            "clienteId": codigo,
            "nombre": "Carlos Fernández",
            "identificacion": "10948075",
            "estado": True
        }]
        # La contraseña nunca sale en las respuestas
        assert "contrasena" not in response.text

    def test_listar_vacio(self, client):
        response = client.get("/clientes")

        assert response.status_code == 200
        assert response.json() == []

    def test_obtener_inexistente(self, client):
        response = client.get("/clientes/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Cliente no encontrado con el ID: 999"}

    def test_obtener_por_codigo_inexistente(self, client):
        response = client.get("/clientes/codigo/00000000")

        assert response.status_code == 404

    def test_id_no_numerico(self, client):
        response = client.get("/clientes/abc")

        assert response.status_code == 400
        assert "cliente_pk" in response.json()

    @pytest.mark.parametrize("metodo", ["get", "delete"])
    def test_id_fuera_de_rango_entero_64_bits(self, client, metodo):
        """
        Un ID mayor que el INTEGER de 64 bits se rechaza antes de llegar a la BD.
        """
        response = getattr(client, metodo)("/clientes/99999999999999999999")

        assert response.status_code == 400
        assert response.json() == {"cliente_pk": "Debe ser menor o igual a 9223372036854775807."}

    def test_id_fuera_de_rango_al_actualizar(self, client, sample_cliente_data):
        response = client.put("/clientes/99999999999999999999", json=sample_cliente_data)

        assert response.status_code == 400
        assert "cliente_pk" in response.json()

    def test_id_cero(self, client):
        response = client.get("/clientes/0")

        assert response.status_code == 400
        assert response.json() == {"cliente_pk": "Debe ser mayor o igual a 1."}


class TestActualizarClienteApi:

    def test_actualizacion_exitosa(self, client, db_session, sample_cliente_data):
        codigo = _crear(client, sample_cliente_data)
        cliente_pk = _pk(db_session, "10948075")
        sample_cliente_data.update(nombre="Carlos A. Fernández", estado=False)

        response = client.put(f"/clientes/{cliente_pk}", json=sample_cliente_data)

        assert response.status_code == 200
        assert response.text == f"Cliente actualizado exitosamente con ID: {codigo}"
        assert client.get(f"/clientes/{cliente_pk}").json()["estado"] is False

    def test_actualizar_inexistente(self, client, sample_cliente_data):
        response = client.put("/clientes/999", json=sample_cliente_data)

        assert response.status_code == 404
        assert response.text == "Cliente no encontrado con el ID: 999"

    def test_actualizar_a_identificacion_ajena(self, client, db_session, sample_cliente_data):
        _crear(client, sample_cliente_data)
        otro = dict(sample_cliente_data, nombre="Luis Pérez", identificacion="20000002")
        _crear(client, otro)

        otro["identificacion"] = "10948075"
        response = client.put(f"/clientes/{_pk(db_session, '20000002')}", json=otro)

        assert response.status_code == 400
        assert response.text == "La identificación ya está en uso."

    def test_actualizar_cuerpo_invalido(self, client, db_session, sample_cliente_data):
        _crear(client, sample_cliente_data)
        sample_cliente_data["estado"] = "si"

        response = client.put(f"/clientes/{_pk(db_session, '10948075')}", json=sample_cliente_data)

        assert response.status_code == 400
        assert response.json() == {"estado": "Debe ser verdadero o falso."}


class TestEliminarClienteApi:

    def test_eliminar_existente(self, client, db_session, sample_cliente_data):
        _crear(client, sample_cliente_data)
        cliente_pk = _pk(db_session, "10948075")

        response = client.delete(f"/clientes/{cliente_pk}")

        assert response.status_code == 204
        assert client.get(f"/clientes/{cliente_pk}").status_code == 404

    def test_eliminar_inexistente(self, client):
        response = client.delete("/clientes/999")

        assert response.status_code == 404
        assert response.text == "Cliente no encontrado con el ID: 999"
