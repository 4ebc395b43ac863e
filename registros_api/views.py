import logging

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from panel.estadisticas import calcular_estadisticas
from registros.servicios.almacen import StoreError, obtener_cliente
from .permissions import EsAdminPanel
from .serializers import FilaRegistroSerializer, RegistroSerializer

logger = logging.getLogger(__name__)


class RegistrosView(APIView):
    """
    POST: cualquiera registra (validacion del lado del servidor)
    GET: solo con sesion del panel, todos los registros mas nuevos primero
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [EsAdminPanel()]
        return [AllowAny()]

    def get(self, request):
        try:
            registros = obtener_cliente().listar_todos()
        except StoreError as e:
            logger.exception(f"[Registros] Error consultando registros: {e}")
            return Response({"detail": "No se pudieron cargar los registros."}, status=502)

        data = {
            "estadisticas": calcular_estadisticas(registros),
            "registros": FilaRegistroSerializer(registros, many=True).data,
        }
        return Response(data, status=200)

    def post(self, request):
        ser = RegistroSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            obtener_cliente().insertar(ser.validated_data)
        except StoreError as e:
            logger.exception(f"[Registros] Error guardando registro: {e}")
            return Response({"detail": "Ocurrió un error al guardar los datos."}, status=502)

        return Response({"detail": "Registro creado"}, status=201)
