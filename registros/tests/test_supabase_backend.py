from datetime import datetime, timezone as dt_timezone
from unittest.mock import MagicMock

import requests
from django.test import SimpleTestCase

from registros.servicios.almacen import StoreError
from registros.servicios.supabase_backend import SupabaseBackend
from registros.tipos import FilaRegistro


def respuesta(status=200, data=None, texto=""):
    r = MagicMock()
    r.status_code = status
    r.ok = 200 <= status < 300
    r.text = texto
    if isinstance(data, Exception):
        r.json.side_effect = data
    else:
        r.json.return_value = data
    return r


class SupabaseBackendTests(SimpleTestCase):

    def setUp(self):
        self.session = MagicMock()
        self.backend = SupabaseBackend(
            url="https://proyecto.supabase.co/",
            api_key="anon-key",
            tabla="registrations",
            timeout=5,
            session=self.session,
        )
        self.datos = {
            "cedula": "12345678",
            "nombre_apellido": "Ana Gómez",
            "centro_electoral": "Liceo Andrés Bello",
            "telefono": "04121234567",
            "redes_sociales": "",
            "hora_asistencia": "09:15",
        }

    def test_insertar_envia_los_seis_campos(self):
        self.session.post.return_value = respuesta(201)

        self.backend.insertar(self.datos)

        self.session.post.assert_called_once()
        args, kwargs = self.session.post.call_args
        self.assertEqual(args[0], "https://proyecto.supabase.co/rest/v1/registrations")
        self.assertEqual(kwargs["json"], {**self.datos, "redes_sociales": None})
        self.assertEqual(kwargs["headers"]["apikey"], "anon-key")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer anon-key")
        self.assertEqual(kwargs["headers"]["Prefer"], "return=minimal")
        self.assertEqual(kwargs["timeout"], 5)

    def test_insertar_respuesta_con_error(self):
        self.session.post.return_value = respuesta(
            400, {"code": "23502", "message": "null value in column \"cedula\""}
        )

        with self.assertRaises(StoreError) as ctx:
            self.backend.insertar(self.datos)

        self.assertIn("null value", ctx.exception.mensaje)
        self.assertEqual(ctx.exception.status, 400)

    def test_insertar_error_de_red(self):
        self.session.post.side_effect = requests.ConnectionError("sin red")

        with self.assertRaises(StoreError):
            self.backend.insertar(self.datos)

    def test_listar_todos_ordenado_por_created_at_desc(self):
        self.session.get.return_value = respuesta(200, [
            {"id": "b", "cedula": "2", "nombre_apellido": "B", "centro_electoral": "X",
             "telefono": "04120000002", "redes_sociales": None, "hora_asistencia": "10:00",
             "created_at": "2024-05-02T10:00:00+00:00"},
            {"id": "a", "cedula": "1", "nombre_apellido": "A", "centro_electoral": "X",
             "telefono": "04120000001", "redes_sociales": "@a", "hora_asistencia": "09:00",
             "created_at": "2024-05-01T10:00:00+00:00"},
        ])

        registros = self.backend.listar_todos()

        _, kwargs = self.session.get.call_args
        self.assertEqual(kwargs["params"], {"select": "*", "order": "created_at.desc"})
        self.assertEqual([r.id for r in registros], ["b", "a"])
        self.assertIsInstance(registros[0], FilaRegistro)
        self.assertEqual(
            registros[0].created_at,
            datetime(2024, 5, 2, 10, 0, tzinfo=dt_timezone.utc),
        )
        self.assertIsNone(registros[0].redes_sociales)
        self.assertEqual(registros[1].redes_sociales, "@a")

    def test_listar_todos_sin_filas(self):
        for data in ([], None):
            with self.subTest(data=data):
                self.session.get.return_value = respuesta(200, data)
                self.assertEqual(self.backend.listar_todos(), [])

    def test_listar_todos_con_error(self):
        self.session.get.return_value = respuesta(401, {"message": "Invalid API key"})

        with self.assertRaises(StoreError) as ctx:
            self.backend.listar_todos()

        self.assertEqual(ctx.exception.mensaje, "Invalid API key")

    def test_listar_todos_respuesta_no_json(self):
        self.session.get.return_value = respuesta(200, ValueError("no json"))

        with self.assertRaises(StoreError):
            self.backend.listar_todos()

    def test_error_sin_cuerpo_json_usa_texto(self):
        self.session.get.return_value = respuesta(503, ValueError("no json"), texto="Service Unavailable")

        with self.assertRaises(StoreError) as ctx:
            self.backend.listar_todos()

        self.assertEqual(ctx.exception.mensaje, "Service Unavailable")

    def test_sin_url_configurada(self):
        backend = SupabaseBackend(url="", api_key="", session=self.session)

        with self.assertRaises(StoreError):
            backend.insertar(self.datos)
        with self.assertRaises(StoreError):
            backend.listar_todos()
        self.session.post.assert_not_called()
        self.session.get.assert_not_called()
