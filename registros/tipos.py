from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from django.utils import timezone
from django.utils.dateparse import parse_datetime


def _fecha(valor) -> datetime | None:
    if valor is None or isinstance(valor, datetime):
        return valor
    return parse_datetime(str(valor))


@dataclass(frozen=True)
class FilaRegistro:
    """Un registro ya guardado en el almacen (incluye id y created_at)."""

    id: str
    cedula: str
    nombre_apellido: str
    centro_electoral: str
    telefono: str
    redes_sociales: str | None
    hora_asistencia: str
    created_at: datetime | None

    @classmethod
    def desde_fila(cls, fila: Mapping[str, Any]) -> "FilaRegistro":
        return cls(
            id=str(fila.get("id")),
            cedula=fila.get("cedula") or "",
            nombre_apellido=fila.get("nombre_apellido") or "",
            centro_electoral=fila.get("centro_electoral") or "",
            telefono=fila.get("telefono") or "",
            redes_sociales=fila.get("redes_sociales") or None,
            hora_asistencia=str(fila.get("hora_asistencia") or ""),
            created_at=_fecha(fila.get("created_at")),
        )

    @property
    def created_at_local(self) -> datetime | None:
        if self.created_at is None:
            return None
        if timezone.is_naive(self.created_at):
            return timezone.make_aware(self.created_at)
        return timezone.localtime(self.created_at)

