"""
URL configuration for the registro electoral project.

    /             formulario de registro (registros.urls)
    /dashboard/   panel administrativo (panel.urls)
    /api/         API de registros (registros_api.urls)
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/registros/", include("registros_api.urls")),
    path("dashboard/", include("panel.urls")),
    path("", include("registros.urls")),
]
