from typing import Mapping

from django.conf import settings
from django.utils.module_loading import import_string

from registros.tipos import FilaRegistro
from registros.validadores import CAMPOS


class StoreError(Exception):
    """Fallo de transporte o del almacen al insertar/consultar registros."""

    def __init__(self, mensaje: str, status: int | None = None):
        super().__init__(mensaje)
        self.mensaje = mensaje
        self.status = status


def normalizar_payload(datos: Mapping) -> dict:
    """Cuerpo de insercion: los seis campos, redes_sociales vacio -> None."""
    payload = {campo: datos.get(campo) or "" for campo in CAMPOS}
    payload["redes_sociales"] = payload["redes_sociales"] or None
    return payload


class BackendRegistros:
    """
    Contrato del almacen de registros.

    insertar(): una fila nueva; el almacen asigna id y created_at.
    listar_todos(): todas las filas, mas nuevas primero.
    Ambos lanzan StoreError ante cualquier fallo; no hay reintentos.
    """

    def insertar(self, datos: Mapping) -> None:
        raise NotImplementedError

    def listar_todos(self) -> list[FilaRegistro]:
        raise NotImplementedError


def obtener_cliente() -> BackendRegistros:
    backend_cls = import_string(settings.REGISTROS_BACKEND)
    return backend_cls()
