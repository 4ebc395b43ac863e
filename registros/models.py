import uuid

from django.db import models


class Registro(models.Model):
    """
    Tabla `registrations` (misma forma que la tabla del almacen gestionado).
    Solo se inserta; nunca se actualiza ni se borra desde la app.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cedula = models.TextField()
    nombre_apellido = models.TextField()
    centro_electoral = models.TextField()
    telefono = models.TextField()
    redes_sociales = models.TextField(blank=True, null=True)
    hora_asistencia = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "registrations"
        ordering = ["-created_at"]
        verbose_name = "registro"
        verbose_name_plural = "registros"

    def __str__(self):
        return f"{self.cedula} - {self.nombre_apellido} ({self.centro_electoral})"
