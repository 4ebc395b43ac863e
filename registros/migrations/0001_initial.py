import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Registro",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("cedula", models.TextField()),
                ("nombre_apellido", models.TextField()),
                ("centro_electoral", models.TextField()),
                ("telefono", models.TextField()),
                ("redes_sociales", models.TextField(blank=True, null=True)),
                ("hora_asistencia", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                "verbose_name": "registro",
                "verbose_name_plural": "registros",
                "db_table": "registrations",
                "ordering": ["-created_at"],
            },
        ),
    ]
