# catalog_service/services/product_client.py
from typing import Any, Dict
from urllib.parse import quote

import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from catalog_service.utils.settings import CATALOG_SERVICE_URL
from catalog_service.utils.logging import get_logger

logger = get_logger(__name__)


def http_retry():
    # solo fallos de red; un 4xx/5xx no se reintenta
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    )


def _product_path(product_id: str) -> str:
    # la ruta /productos/{id} no admite "/" en el id, ni siquiera codificada
    if not product_id or "/" in product_id:
        raise ValueError(f"ID de producto no direccionable: {product_id!r}")
    return f"/productos/{quote(product_id, safe='')}"


class ProductClient:
    """
    Cliente HTTP del catálogo para otros servicios.
    Devuelve el sobre JSON tal cual; un status no-2xx lanza requests.HTTPError.
    """

    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = (base_url or CATALOG_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info(f"ProductClient {method} {url}")

        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def list_products(self, stock_minimo: int | None = None) -> Dict[str, Any]:
        params = {"stock_minimo": stock_minimo} if stock_minimo is not None else None
        return self._request("GET", "/productos", params=params)

    @http_retry()
    def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/productos", json=product)

    @http_retry()
    def update_product(self, product_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", _product_path(product_id), json=fields)

    @http_retry()
    def delete_product(self, product_id: str) -> Dict[str, Any]:
        return self._request("DELETE", _product_path(product_id))
