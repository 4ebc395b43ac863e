import re
from typing import Mapping

CAMPOS = (
    "cedula",
    "nombre_apellido",
    "centro_electoral",
    "telefono",
    "redes_sociales",
    "hora_asistencia",
)

CEDULA_RE = re.compile(r"[0-9]{7,11}")
TELEFONO_RE = re.compile(r"\+?[0-9\s\-()]{10,}")
SEPARADORES_CEDULA_RE = re.compile(r"[-\s]")


def _valor(datos: Mapping, campo: str) -> str:
    return datos.get(campo) or ""


def validar_registro(datos: Mapping) -> dict[str, str]:
    """
    Valida un formulario de registro y devuelve {campo: mensaje}.

    Solo aparecen los campos con error; un dict vacio significa valido.
    Cada regla se evalua por separado (no se corta en el primer error).
    """
    errores = {}

    cedula = _valor(datos, "cedula")
    if not cedula.strip():
        errores["cedula"] = "La cédula es requerida"
    elif not CEDULA_RE.fullmatch(SEPARADORES_CEDULA_RE.sub("", cedula)):
        errores["cedula"] = "Formato de cédula inválido"

    if not _valor(datos, "nombre_apellido").strip():
        errores["nombre_apellido"] = "Nombre y apellido son requeridos"

    if not _valor(datos, "centro_electoral").strip():
        errores["centro_electoral"] = "Centro electoral es requerido"

    telefono = _valor(datos, "telefono")
    if not telefono.strip():
        errores["telefono"] = "Teléfono es requerido"
    elif not TELEFONO_RE.fullmatch(telefono):
        errores["telefono"] = "Formato de teléfono inválido"

    # redes_sociales es opcional

    if not _valor(datos, "hora_asistencia"):
        errores["hora_asistencia"] = "Hora de asistencia es requerida"

    return errores


def es_valido(errores: Mapping) -> bool:
    return not errores
