# catalog_service/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_service.domain.errors import CatalogError, ProductValidationError, RouteNotFoundError
from catalog_service.domain.schemas import ErrorOut
from catalog_service.utils.logging import get_logger

logger = get_logger(__name__)


def _error_response(exc: CatalogError) -> JSONResponse:
    payload = ErrorOut(estado=exc.estado, mensaje=exc.mensaje, codigo=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=payload.model_dump())


def _original_url(request: Request) -> str:
    # path tal como llego, sin decodificar (%20 sigue siendo %20)
    raw_path = request.scope.get("raw_path")
    if raw_path:
        url = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return _error_response(exc)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 404 y 405 de starlette = ruta sin match (metodo o path)
    if exc.status_code in (404, 405):
        logger.warning(f"Ruta no encontrada: {request.method} {_original_url(request)}")
        return _error_response(RouteNotFoundError(_original_url(request)))

    payload = ErrorOut(estado="ERROR", mensaje=str(exc.detail), codigo=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=payload.model_dump())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Cuerpo invalido en {request.method} {request.url.path}: {exc.errors()}")
    return _error_response(
        ProductValidationError("El cuerpo de la petición debe ser un objeto JSON.")
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
