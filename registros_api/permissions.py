from rest_framework.permissions import BasePermission

from panel.sesion import SesionDjango


class EsAdminPanel(BasePermission):
    """Requiere la bandera de sesion del panel administrativo."""

    message = "Solo el panel administrativo"

    def has_permission(self, request, view):
        return SesionDjango(request.session).leer().autenticado
