# catalog_service/repos/product_repo.py
import copy
import threading
from typing import Any, Dict, Iterable, List

Product = Dict[str, Any]


def _has_min_stock(product: Product, stock_minimo: int) -> bool:
    stock = product.get("stock")
    #bool es subclase de int, no cuenta como stock
    if isinstance(stock, bool) or not isinstance(stock, (int, float)):
        return False
    return stock >= stock_minimo


class ProductRepo:
    """
    Catálogo en memoria: lista ordenada de productos (orden de inserción).
    Todas las operaciones, incluido buscar-y-modificar, se hacen bajo un único lock,
    porque FastAPI ejecuta los endpoints sync en un pool de hilos.
    Devuelve copias, el estado interno nunca sale del lock.
    """

    def __init__(self, products: Iterable[Product] | None = None):
        self._lock = threading.RLock()
        self._products: List[Product] = []
        for product in products or []:
            self.add_product(product)

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.get("id") == product_id:
                return index
        return -1

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def list_products(self, stock_minimo: int | None = None) -> List[Product]:
        with self._lock:
            products = self._products
            if stock_minimo is not None:
                products = [p for p in products if _has_min_stock(p, stock_minimo)]
            return copy.deepcopy(products)

    def get_product(self, product_id: str) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            return copy.deepcopy(self._products[index])

    def add_product(self, product: Product) -> Product:
        product_id = product.get("id")
        if not product_id:
            raise ValueError("El producto debe tener un id")

        with self._lock:
            if self._index_of(product_id) != -1:
                raise ValueError(f"Ya existe un producto con ID {product_id}")
            stored = copy.deepcopy(product)
            self._products.append(stored)
            return copy.deepcopy(stored)

    def update_product(self, product_id: str, fields: Product) -> Product | None:
        """
        Merge superficial de `fields` sobre el producto: las claves presentes sobrescriben,
        las nuevas se agregan, las ausentes no se tocan. El id almacenado no cambia.
        """
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None

            merged = {**self._products[index], **copy.deepcopy(fields)}
            merged["id"] = self._products[index]["id"]
            self._products[index] = merged
            return copy.deepcopy(merged)

    def delete_product(self, product_id: str) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            return self._products.pop(index)
