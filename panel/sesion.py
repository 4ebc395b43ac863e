from dataclasses import dataclass, replace

CLAVE_SESION = "adminAuthenticated"
VALOR_AUTENTICADO = "true"


@dataclass(frozen=True)
class SesionAdmin:
    autenticado: bool = False

    def iniciar(self) -> "SesionAdmin":
        return replace(self, autenticado=True)

    def cerrar(self) -> "SesionAdmin":
        return replace(self, autenticado=False)


class PuertoSesion:
    """Lectura/escritura de la bandera de sesion del panel."""

    def leer(self) -> SesionAdmin:
        raise NotImplementedError

    def escribir(self, sesion: SesionAdmin) -> None:
        raise NotImplementedError


class SesionDjango(PuertoSesion):
    """Guarda la bandera en request.session: "true" o ausente."""

    def __init__(self, session):
        self.session = session

    def leer(self) -> SesionAdmin:
        return SesionAdmin(autenticado=self.session.get(CLAVE_SESION) == VALOR_AUTENTICADO)

    def escribir(self, sesion: SesionAdmin) -> None:
        if sesion.autenticado:
            if not self.leer().autenticado:
                # nueva clave de sesion al entrar al panel
                self.session.cycle_key()
            self.session[CLAVE_SESION] = VALOR_AUTENTICADO
        else:
            self.session.pop(CLAVE_SESION, None)


class SesionMemoria(PuertoSesion):
    def __init__(self, sesion: SesionAdmin | None = None):
        self.sesion = sesion or SesionAdmin()

    def leer(self) -> SesionAdmin:
        return self.sesion

    def escribir(self, sesion: SesionAdmin) -> None:
        self.sesion = sesion
