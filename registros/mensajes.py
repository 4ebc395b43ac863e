from django.contrib import messages

NIVELES = {
    "success": messages.SUCCESS,
    "error": messages.ERROR,
    "warning": messages.WARNING,
    "info": messages.INFO,
}


def notificador_mensajes(request):
    """Adapta notificar(nivel, titulo, descripcion) a django.contrib.messages (toasts)."""

    def notificar(nivel: str, titulo: str, descripcion: str):
        messages.add_message(
            request,
            NIVELES.get(nivel, messages.INFO),
            descripcion,
            extra_tags=titulo,
        )

    return notificar
