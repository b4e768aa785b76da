# catalog_service/domain/errors.py


class CatalogError(Exception):
    """
    Error de dominio del catálogo.
    Cada subclase conoce su código HTTP y el marcador `estado` del sobre de respuesta.
    """

    status_code = 500
    estado = "ERROR"

    def __init__(self, mensaje: str):
        super().__init__(mensaje)
        self.mensaje = mensaje


class ProductValidationError(CatalogError):
    """Falta un campo obligatorio o el cuerpo no es un objeto JSON."""

    status_code = 400


class ProductNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, product_id: str, action: str):
        super().__init__(f"Producto con ID {product_id} no encontrado para {action}.")
        self.product_id = product_id


class SimulatedInternalError(CatalogError):
    """Fallo interno inyectado a propósito (id centinela en DELETE)."""

    status_code = 500
    estado = "ERROR FATAL"


class RouteNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, url: str):
        super().__init__(f"Ruta {url} no encontrada.")
        self.url = url
