import json
from unittest.mock import MagicMock, patch

from django.test import TestCase, override_settings
from django.urls import reverse

from panel.sesion import CLAVE_SESION
from registros.models import Registro
from registros.servicios.almacen import StoreError


@override_settings(REGISTROS_BACKEND="registros.servicios.orm_backend.ORMBackend")
class RegistrosApiTests(TestCase):

    def setUp(self):
        self.url = reverse("registros_api")
        self.valid_data = {
            "cedula": "12345678",
            "nombre_apellido": "Luisa Fernández",
            "centro_electoral": "Colegio San José",
            "telefono": "(0241) 555-0101",
            "hora_asistencia": "11:00",
        }

    def _post(self, data):
        return self.client.post(self.url, json.dumps(data), content_type="application/json")

    def test_post_valido_crea_registro(self):
        response = self._post(self.valid_data)

        self.assertEqual(response.status_code, 201)
        self.assertEqual(Registro.objects.count(), 1)
        registro = Registro.objects.get()
        self.assertEqual(registro.nombre_apellido, "Luisa Fernández")
        self.assertIsNone(registro.redes_sociales)

    def test_post_conserva_redes_sociales_sin_recortar(self):
        response = self._post({**self.valid_data, "redes_sociales": "  "})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(Registro.objects.get().redes_sociales, "  ")

    def test_post_invalido_devuelve_errores_por_campo(self):
        response = self._post({**self.valid_data, "cedula": "12", "hora_asistencia": ""})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["cedula"], ["Formato de cédula inválido"])
        self.assertEqual(response.json()["hora_asistencia"], ["Hora de asistencia es requerida"])
        self.assertEqual(Registro.objects.count(), 0)

    def test_post_fallo_del_almacen(self):
        cliente = MagicMock()
        cliente.insertar.side_effect = StoreError("upstream down")

        with patch("registros_api.views.obtener_cliente", return_value=cliente):
            response = self._post(self.valid_data)

        self.assertEqual(response.status_code, 502)

    def test_get_requiere_sesion_del_panel(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 403)

    def test_get_con_sesion(self):
        self._post(self.valid_data)
        self._post({**self.valid_data, "cedula": "87654321", "centro_electoral": "Liceo Caracas"})
        session = self.client.session
        session[CLAVE_SESION] = "true"
        session.save()

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["estadisticas"], {"total": 2, "hoy": 2, "centros": 2})
        self.assertEqual(len(data["registros"]), 2)
        self.assertEqual(data["registros"][0]["cedula"], "87654321")
