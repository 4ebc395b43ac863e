from django.urls import path

from .views import dashboard_view, logout_view

app_name = "panel"

urlpatterns = [
    path("", dashboard_view, name="dashboard"),
    path("logout/", logout_view, name="logout"),
]
