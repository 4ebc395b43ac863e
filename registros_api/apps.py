from django.apps import AppConfig


class RegistrosApiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "registros_api"
