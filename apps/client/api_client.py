"""
Cliente HTTP para la API de registros del spa.

Replica las cinco llamadas CRUD del dashboard sobre /api/{collection}.
No reintenta, no cachea y no agrupa peticiones.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from apps.config.settings import settings

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """La API respondió con un status fuera del rango 2xx."""

    def __init__(self, status_code: int, body: Any = None):
        super().__init__(f"API error: {status_code}")
        self.status_code = status_code
        self.body = body


class ResourceClient:
    def __init__(self, api: "SpaApiClient", collection: str):
        self.api = api
        self.collection = collection

    def get_all(self) -> List[Dict[str, Any]]:
        return self.api.request("GET", f"/{self.collection}")

    def get_by_id(self, record_id: str) -> Dict[str, Any]:
        return self.api.request("GET", f"/{self.collection}/{record_id}")

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.request("POST", f"/{self.collection}", json=data)

    def update(self, record_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.request("PUT", f"/{self.collection}/{record_id}", json=data)

    def delete(self, record_id: str) -> Dict[str, Any]:
        return self.api.request("DELETE", f"/{self.collection}/{record_id}")


class SpaApiClient:
    """
    Args:
        base_url: URL base de la API, p. ej. "http://localhost:5000/api".
        http_client: httpx.Client inyectado (tests). Si es None se crea uno propio.
        api_key: valor de la cabecera X-API-Key, si la API la exige.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(timeout=timeout)
        self.headers = {"Content-Type": "application/json"}
        if api_key:
            self.headers["X-API-Key"] = api_key

        self.customers = ResourceClient(self, "customers")
        self.staff = ResourceClient(self, "staff")
        self.services = ResourceClient(self, "services")
        self.appointments = ResourceClient(self, "appointments")

    def request(self, method: str, endpoint: str, json: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        response = self.http.request(method, url, json=json, headers=self.headers)
        if not response.is_success:
            logger.warning(f"API_CLIENT: {method} {url} devolvió {response.status_code}")
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise ApiRequestError(response.status_code, body)
        return response.json()

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
