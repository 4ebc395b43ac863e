import logging
from typing import Callable

from .autenticadores import Autenticador
from .sesion import PuertoSesion, SesionAdmin

logger = logging.getLogger(__name__)


class CompuertaAdmin:
    """Pide la clave del panel; si es correcta deja la bandera de sesion puesta."""

    def __init__(
        self,
        autenticador: Autenticador,
        puerto: PuertoSesion,
        notificar: Callable[[str, str, str], None],
        al_ingresar: Callable[[SesionAdmin], None] | None = None,
    ):
        self.autenticador = autenticador
        self.puerto = puerto
        self.notificar = notificar
        self.al_ingresar = al_ingresar

    def intentar(self, clave: str) -> bool:
        if not self.autenticador.verificar(clave):
            logger.warning("[Panel] Intento de acceso con clave incorrecta")
            self.notificar(
                "error",
                "Contraseña incorrecta",
                "La contraseña ingresada no es válida.",
            )
            return False

        sesion = self.puerto.leer().iniciar()
        self.puerto.escribir(sesion)
        logger.info("[Panel] Acceso concedido")

        if self.al_ingresar:
            self.al_ingresar(sesion)

        self.notificar("success", "Acceso concedido", "Bienvenido al panel administrativo.")
        return True
