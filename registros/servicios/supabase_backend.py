import logging
from typing import Mapping

import requests
from django.conf import settings

from registros.tipos import FilaRegistro
from .almacen import BackendRegistros, StoreError, normalizar_payload

logger = logging.getLogger(__name__)


def _mensaje_error(r: requests.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return r.text or f"HTTP {r.status_code}"

    if isinstance(data, dict):
        for key in ("message", "error_description", "error", "hint", "details"):
            if data.get(key):
                return str(data[key])
    return str(data)


class SupabaseBackend(BackendRegistros):
    """
    Cliente REST (PostgREST) para la tabla de registros en Supabase.
    Cada llamada es un solo viaje de ida y vuelta.
    """

    def __init__(self, url=None, api_key=None, tabla=None, timeout=None, session=None):
        self.url = (url if url is not None else settings.SUPABASE_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.SUPABASE_ANON_KEY
        self.tabla = tabla or settings.SUPABASE_TABLE
        self.timeout = timeout if timeout is not None else settings.SUPABASE_TIMEOUT
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.url}/rest/v1/{self.tabla}"

    def _headers(self, **extra) -> dict:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        headers.update(extra)
        return headers

    def insertar(self, datos: Mapping) -> None:
        if not self.url:
            raise StoreError("SUPABASE_URL no configurado")

        payload = normalizar_payload(datos)
        try:
            r = self.session.post(
                self.endpoint,
                json=payload,
                headers=self._headers(Prefer="return=minimal"),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StoreError(f"Error de conexión con el almacén: {e}") from e

        if not r.ok:
            mensaje = _mensaje_error(r)
            logger.warning(f"[Registros] Insercion rechazada ({r.status_code}): {mensaje}")
            raise StoreError(mensaje, status=r.status_code)

        logger.info(f"[Registros] Registro insertado en {self.tabla}")

    def listar_todos(self) -> list[FilaRegistro]:
        if not self.url:
            raise StoreError("SUPABASE_URL no configurado")

        params = {"select": "*", "order": "created_at.desc"}
        try:
            r = self.session.get(
                self.endpoint,
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StoreError(f"Error de conexión con el almacén: {e}") from e

        if not r.ok:
            mensaje = _mensaje_error(r)
            logger.warning(f"[Registros] Consulta rechazada ({r.status_code}): {mensaje}")
            raise StoreError(mensaje, status=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise StoreError("Respuesta del almacén no es JSON válido") from e

        return [FilaRegistro.desde_fila(fila) for fila in (data or [])]
