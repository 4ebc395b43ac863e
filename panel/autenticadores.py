import hmac

from django.conf import settings
from django.contrib.auth import authenticate
from django.utils.module_loading import import_string


class Autenticador:
    """Decide si una clave da acceso al panel."""

    def verificar(self, clave: str) -> bool:
        raise NotImplementedError


class ClaveFijaAutenticador(Autenticador):
    """
    Compara contra una clave compartida (exacta, sensible a mayusculas).
    Es solo una compuerta de interfaz, no autenticacion real.
    """

    def __init__(self, secreto: str | None = None):
        self.secreto = secreto if secreto is not None else settings.PANEL_ADMIN_PASSWORD

    def verificar(self, clave: str) -> bool:
        if not clave or not self.secreto:
            return False
        return hmac.compare_digest(clave.encode("utf-8"), self.secreto.encode("utf-8"))


class UsuarioDjangoAutenticador(Autenticador):
    """Delega en django.contrib.auth: usuario fijo + su contraseña, debe ser staff."""

    def __init__(self, username: str | None = None):
        self.username = username or settings.PANEL_ADMIN_USERNAME

    def verificar(self, clave: str) -> bool:
        if not clave:
            return False
        user = authenticate(username=self.username, password=clave)
        return bool(user and user.is_active and user.is_staff)


def obtener_autenticador() -> Autenticador:
    return import_string(settings.PANEL_AUTENTICADOR)()
