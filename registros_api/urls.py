from django.urls import path
from .views import RegistrosView

urlpatterns = [
    path("", RegistrosView.as_view(), name="registros_api"),
]
