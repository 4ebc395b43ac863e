from chartkick.django import ColumnChart
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from registros.mensajes import notificador_mensajes
from registros.servicios.almacen import obtener_cliente
from .autenticadores import obtener_autenticador
from .compuerta import CompuertaAdmin
from .estadisticas import registros_por_centro
from .forms import ClaveAdminForm
from .sesion import SesionDjango
from .tablero import Tablero


@require_http_methods(["GET", "POST"])
def dashboard_view(request):
    notificar = notificador_mensajes(request)
    puerto = SesionDjango(request.session)

    if request.method == "POST":
        form = ClaveAdminForm(request.POST)
        if not form.is_valid():
            return render(request, "panel/login.html", {"form": form})

        compuerta = CompuertaAdmin(obtener_autenticador(), puerto, notificar)
        if compuerta.intentar(form.cleaned_data["password"]):
            return redirect("panel:dashboard")
        return render(request, "panel/login.html", {"form": ClaveAdminForm()})

    tablero = Tablero(obtener_cliente(), puerto, notificar)
    vista = tablero.montar()

    if not vista.autenticado:
        return render(request, "panel/login.html", {"form": ClaveAdminForm()})

    chart_centros = ColumnChart(
        registros_por_centro(vista.registros),
        title="Registros por centro",
        download={"filename": "registros_por_centro"},
    )

    context = {
        "registros": vista.registros,
        "chart_centros": chart_centros,
        **vista.estadisticas,
    }
    return render(request, "panel/dashboard.html", context)


@require_POST
def logout_view(request):
    tablero = Tablero(obtener_cliente(), SesionDjango(request.session), notificador_mensajes(request))
    tablero.cerrar_sesion()
    return redirect("panel:dashboard")
