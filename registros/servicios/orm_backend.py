from typing import Mapping

from django.db import DatabaseError

from registros.models import Registro
from registros.tipos import FilaRegistro
from .almacen import BackendRegistros, StoreError, normalizar_payload


class ORMBackend(BackendRegistros):
    """Misma interfaz que SupabaseBackend, sobre la tabla local `registrations`."""

    def insertar(self, datos: Mapping) -> None:
        try:
            Registro.objects.create(**normalizar_payload(datos))
        except DatabaseError as e:
            raise StoreError(str(e)) from e

    def listar_todos(self) -> list[FilaRegistro]:
        try:
            filas = list(Registro.objects.order_by("-created_at").values())
        except DatabaseError as e:
            raise StoreError(str(e)) from e
        return [FilaRegistro.desde_fila(fila) for fila in filas]
