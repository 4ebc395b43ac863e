from unittest.mock import patch

from django.contrib.sessions.backends.signed_cookies import SessionStore
from django.test import SimpleTestCase

from panel.sesion import CLAVE_SESION, SesionAdmin, SesionDjango, SesionMemoria


class SesionAdminTests(SimpleTestCase):

    def test_transiciones_devuelven_un_valor_nuevo(self):
        sesion = SesionAdmin()

        abierta = sesion.iniciar()
        cerrada = abierta.cerrar()

        self.assertFalse(sesion.autenticado)
        self.assertTrue(abierta.autenticado)
        self.assertFalse(cerrada.autenticado)
        self.assertIsNot(abierta, sesion)

    def test_sesion_django_guarda_bandera_true(self):
        store = SessionStore()
        puerto = SesionDjango(store)

        puerto.escribir(SesionAdmin(autenticado=True))

        self.assertEqual(store.get(CLAVE_SESION), "true")
        self.assertTrue(puerto.leer().autenticado)

    def test_sesion_django_renueva_la_clave_al_entrar(self):
        store = SessionStore()
        puerto = SesionDjango(store)

        with patch.object(store, "cycle_key") as cycle_key:
            puerto.escribir(puerto.leer().iniciar())
            puerto.escribir(puerto.leer().iniciar())

        cycle_key.assert_called_once_with()

    def test_sesion_django_cerrar_elimina_la_clave(self):
        store = SessionStore()
        store[CLAVE_SESION] = "true"
        puerto = SesionDjango(store)

        puerto.escribir(puerto.leer().cerrar())

        self.assertNotIn(CLAVE_SESION, store)
        self.assertFalse(puerto.leer().autenticado)

    def test_solo_el_valor_true_autentica(self):
        store = SessionStore()
        store[CLAVE_SESION] = "yes"
        self.assertFalse(SesionDjango(store).leer().autenticado)
        self.assertFalse(SesionDjango(SessionStore()).leer().autenticado)

    def test_sesion_memoria(self):
        puerto = SesionMemoria()
        puerto.escribir(puerto.leer().iniciar())
        self.assertTrue(puerto.leer().autenticado)
