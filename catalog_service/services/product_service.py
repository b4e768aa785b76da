# catalog_service/services/product_service.py
import re
import uuid
from typing import Any, Dict, List

from starlette.datastructures import QueryParams

from catalog_service.domain.errors import (
    ProductNotFoundError,
    ProductValidationError,
    SimulatedInternalError,
)
from catalog_service.repos.product_repo import ProductRepo
from catalog_service.utils.logging import get_logger

logger = get_logger(__name__)

CRITICAL_ID = "critical"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_stock_minimo(raw: str | None) -> int | None:
    """
    Entero inicial del parametro (`"12abc"` -> 12).
    Devuelve None si no hay entero o no es positivo: en ese caso no se filtra.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def generate_id() -> str:
    return str(uuid.uuid4())


def _query_echo(query_params: QueryParams) -> Dict[str, str | List[str]]:
    # un valor por clave, o la lista completa si la clave se repite
    echo: Dict[str, str | List[str]] = {}
    for key in query_params.keys():
        valores = query_params.getlist(key)
        echo[key] = valores[0] if len(valores) == 1 else valores
    return echo


class ProductService:
    """
    Casos de uso del catálogo de productos.
    query (list) solo lectura, commands (create, update, delete) modifican el catálogo.
    Los errores se lanzan como CatalogError y los traduce el handler de la API.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    #query
    def list_products(self, query_params: QueryParams) -> Dict[str, Any]:
        # con el parametro repetido manda el primer valor
        valores = query_params.getlist("stock_minimo")
        stock_minimo = parse_stock_minimo(valores[0] if valores else None)

        if stock_minimo is None:
            return {
                "estado": "OK",
                "mensaje": "Lista completa de productos",
                "data": self.repo.list_products(),
            }

        return {
            "estado": "OK",
            "mensaje": f"Lista de productos con stock >= {stock_minimo}",
            "datos_recibidos": _query_echo(query_params),
            "data": self.repo.list_products(stock_minimo=stock_minimo),
        }

    #commands
    def create_product(self, body: Dict[str, Any] | None) -> Dict[str, Any]:
        body = body or {}
        nombre = body.get("nombre")

        if not isinstance(nombre, str) or not nombre.strip():
            logger.warning(f"Producto rechazado, nombre invalido: {nombre!r}")
            raise ProductValidationError("El nombre del producto es obligatorio.")

        # el id lo genera el sistema, aunque venga en el body
        created = self.repo.add_product({**body, "id": generate_id()})

        logger.info(f"Producto {created['id']} creado ({nombre})")

        return {
            "estado": "CREADO",
            "mensaje": "Producto agregado exitosamente.",
            "datos_recibidos": body,
            "recurso": created,
            "codigo": 201,
        }

    def update_product(self, product_id: str, body: Dict[str, Any] | None) -> Dict[str, Any]:
        body = body or {}

        # nombre no se revalida: un update puede dejarlo vacio
        updated = self.repo.update_product(product_id, body)

        if updated is None:
            logger.warning(f"Update de producto inexistente {product_id}")
            raise ProductNotFoundError(product_id, "actualizar")

        logger.info(f"Producto {product_id} actualizado, campos: {sorted(body)}")

        return {
            "estado": "ACTUALIZADO",
            "mensaje": f"Producto con ID {product_id} actualizado correctamente.",
            "datos_recibidos": {"id": product_id, "body": body},
            "recurso": updated,
            "codigo": 200,
        }

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        # fallo simulado, siempre, exista o no el producto
        if product_id == CRITICAL_ID:
            logger.error("Error interno simulado al eliminar producto critical")
            raise SimulatedInternalError("Error interno simulado: No se pudo conectar a la BD.")

        removed = self.repo.delete_product(product_id)

        if removed is None:
            logger.warning(f"Delete de producto inexistente {product_id}")
            raise ProductNotFoundError(product_id, "eliminar")

        logger.info(f"Producto {product_id} eliminado")

        return {
            "estado": "ELIMINADO",
            "mensaje": f"Producto con ID {product_id} eliminado correctamente.",
            "recurso_eliminado": removed,
            "codigo": 200,
        }
