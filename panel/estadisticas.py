"""
Estadisticas del dashboard calculadas sobre la lista de registros ya cargada.
"""
from collections import Counter
from datetime import date
from typing import Iterable

from django.utils import timezone

from registros.tipos import FilaRegistro


def es_de_hoy(registro: FilaRegistro, hoy: date) -> bool:
    # dia calendario en la zona horaria activa, sin normalizar al servidor del almacen
    creado = registro.created_at_local
    return creado is not None and creado.date() == hoy


def calcular_estadisticas(registros: Iterable[FilaRegistro], hoy: date | None = None) -> dict:
    registros = list(registros)
    hoy = hoy or timezone.localdate()

    return {
        "total": len(registros),
        "hoy": sum(1 for r in registros if es_de_hoy(r, hoy)),
        "centros": len({r.centro_electoral for r in registros}),
    }


def registros_por_centro(registros: Iterable[FilaRegistro]) -> dict[str, int]:
    conteo = Counter(r.centro_electoral for r in registros)
    return dict(conteo.most_common())
