from django.urls import path

from .views import registro_view

app_name = "registros"

urlpatterns = [
    path("", registro_view, name="formulario"),
]
