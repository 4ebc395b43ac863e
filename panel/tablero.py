import logging
from dataclasses import dataclass, field
from typing import Callable

from registros.servicios.almacen import BackendRegistros, StoreError
from registros.tipos import FilaRegistro
from .estadisticas import calcular_estadisticas
from .sesion import PuertoSesion

logger = logging.getLogger(__name__)


@dataclass
class VistaTablero:
    autenticado: bool
    registros: list[FilaRegistro] = field(default_factory=list)
    estadisticas: dict = field(default_factory=dict)


class Tablero:
    def __init__(
        self,
        cliente: BackendRegistros,
        puerto: PuertoSesion,
        notificar: Callable[[str, str, str], None],
    ):
        self.cliente = cliente
        self.puerto = puerto
        self.notificar = notificar

    def montar(self) -> VistaTablero:
        """
        Sin bandera de sesion -> solo la compuerta (no se consulta el almacen).
        Con bandera -> todos los registros (mas nuevos primero) y sus estadisticas.
        """
        if not self.puerto.leer().autenticado:
            return VistaTablero(autenticado=False)

        try:
            registros = self.cliente.listar_todos()
        except StoreError as e:
            logger.exception(f"[Panel] Error cargando registros: {e}")
            self.notificar("error", "Error", "No se pudieron cargar los registros.")
            registros = []

        return VistaTablero(
            autenticado=True,
            registros=registros,
            estadisticas=calcular_estadisticas(registros),
        )

    def cerrar_sesion(self):
        self.puerto.escribir(self.puerto.leer().cerrar())
        logger.info("[Panel] Sesion cerrada")
        self.notificar("success", "Sesión cerrada", "Has salido del panel administrativo.")
