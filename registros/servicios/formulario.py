import logging
from typing import Callable, Mapping

from registros.validadores import CAMPOS, validar_registro
from .almacen import BackendRegistros, StoreError

logger = logging.getLogger(__name__)

EDITANDO = "editando"
ENVIANDO = "enviando"

Notificador = Callable[[str, str, str], None]


class FormularioRegistro:
    """
    Estado del formulario de registro.

    EDITANDO -> ENVIANDO -> EDITANDO. Cada intento de envio produce
    exactamente una notificacion y, si es valido, una sola insercion.
    """

    def __init__(self, cliente: BackendRegistros, notificar: Notificador):
        self.cliente = cliente
        self.notificar = notificar
        self.estado = EDITANDO
        self.valores = {campo: "" for campo in CAMPOS}
        self.errores = {}

    @property
    def enviando(self) -> bool:
        return self.estado == ENVIANDO

    def actualizar_campo(self, campo: str, valor: str):
        if campo not in self.valores:
            raise KeyError(campo)
        self.valores[campo] = valor
        # solo se limpia el error del campo editado
        self.errores.pop(campo, None)

    def cargar(self, datos: Mapping):
        for campo in CAMPOS:
            if campo in datos:
                self.actualizar_campo(campo, datos.get(campo) or "")

    def limpiar(self):
        self.valores = {campo: "" for campo in CAMPOS}
        self.errores = {}

    def enviar(self) -> bool:
        if self.enviando:
            return False

        errores = validar_registro(self.valores)
        if errores:
            self.errores = errores
            self.notificar(
                "error",
                "Error en el formulario",
                "Por favor, corrige los errores antes de continuar.",
            )
            return False

        self.errores = {}
        self.estado = ENVIANDO
        try:
            self.cliente.insertar(self.valores)
        except StoreError as e:
            logger.exception(f"[Registros] Error guardando registro: {e}")
            self.notificar(
                "error",
                "Error al guardar",
                "Ocurrió un error al guardar los datos. Inténtalo de nuevo.",
            )
            return False
        finally:
            self.estado = EDITANDO

        self.notificar(
            "success",
            "Registro exitoso",
            "Los datos han sido registrados correctamente en la base de datos.",
        )
        self.limpiar()
        return True
