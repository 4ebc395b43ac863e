from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from .mensajes import notificador_mensajes
from .servicios.almacen import obtener_cliente
from .servicios.formulario import FormularioRegistro


# (campo, etiqueta, tipo input, placeholder, icono, requerido)
CAMPOS_FORMULARIO = [
    ("cedula", "Cédula de Identidad", "text", "Ej: 12.345.678", "mdi mdi-card-account-details", True),
    ("nombre_apellido", "Nombre y Apellido", "text", "Ej: Juan Pérez García", "mdi mdi-account", True),
    ("centro_electoral", "Centro Electoral", "text", "Ej: Escuela Nacional Bolivariana", "mdi mdi-map-marker", True),
    ("telefono", "Teléfono", "tel", "Ej: +58 412-123-4567", "mdi mdi-phone", True),
    ("redes_sociales", "Redes Sociales", "text", "Ej: @usuario o enlace de perfil", "mdi mdi-share-variant", False),
    ("hora_asistencia", "Hora de Asistencia", "time", "", "mdi mdi-clock-outline", True),
]


def _campos_contexto(formulario: FormularioRegistro):
    return [
        {
            "nombre": nombre,
            "etiqueta": etiqueta,
            "tipo": tipo,
            "placeholder": placeholder,
            "icono": icono,
            "requerido": requerido,
            "valor": formulario.valores.get(nombre, ""),
            "error": formulario.errores.get(nombre),
        }
        for nombre, etiqueta, tipo, placeholder, icono, requerido in CAMPOS_FORMULARIO
    ]


@require_http_methods(["GET", "POST"])
def registro_view(request):
    formulario = FormularioRegistro(obtener_cliente(), notificar=notificador_mensajes(request))

    if request.method == "POST":
        formulario.cargar(request.POST)
        if formulario.enviar():
            # PRG: el formulario vuelve vacio
            return redirect("registros:formulario")

    return render(
        request,
        "registros/formulario.html",
        {"campos": _campos_contexto(formulario), "errores": formulario.errores},
    )
