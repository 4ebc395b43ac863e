from django.contrib import admin
from .models import Registro


@admin.register(Registro)
class RegistroAdmin(admin.ModelAdmin):
    list_display = ("cedula", "nombre_apellido", "centro_electoral", "telefono", "hora_asistencia", "created_at")
    list_filter = ("centro_electoral",)
    search_fields = ("cedula", "nombre_apellido", "centro_electoral")
    ordering = ("-created_at",)
    readonly_fields = (
        "id", "cedula", "nombre_apellido", "centro_electoral",
        "telefono", "redes_sociales", "hora_asistencia", "created_at",
    )

    # los registros son inmutables
    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
