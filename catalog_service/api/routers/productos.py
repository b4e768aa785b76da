# catalog_service/api/routers/productos.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from catalog_service.api.dependencies import get_service
from catalog_service.domain.schemas import (
    ActualizadoOut,
    CreadoOut,
    EliminadoOut,
    ErrorOut,
    ListaOut,
)
from catalog_service.services.product_service import ProductService

router = APIRouter(prefix="/productos", tags=["productos"])

# cada ruta acepta tambien la barra final (redirect_slashes esta desactivado en la app)


@router.get("", response_model=ListaOut, response_model_exclude_unset=True)
@router.get("/", response_model=ListaOut, response_model_exclude_unset=True, include_in_schema=False)
def list_products(request: Request, svc: ProductService = Depends(get_service)):
    """
    Lista el catálogo. Con `stock_minimo` > 0 filtra por stock >= stock_minimo.
    Un valor mal formado se ignora y se devuelve todo.
    """
    return svc.list_products(request.query_params)


@router.post(
    "",
    response_model=CreadoOut,
    status_code=201,
    responses={400: {"model": ErrorOut}},
)
@router.post("/", response_model=CreadoOut, status_code=201, include_in_schema=False)
def create_product(
    payload: Dict[str, Any] | None = Body(None),
    svc: ProductService = Depends(get_service),
):
    return svc.create_product(payload)


@router.put(
    "/{product_id}",
    response_model=ActualizadoOut,
    responses={404: {"model": ErrorOut}},
)
@router.put("/{product_id}/", response_model=ActualizadoOut, include_in_schema=False)
def update_product(
    product_id: str,
    payload: Dict[str, Any] | None = Body(None),
    svc: ProductService = Depends(get_service),
):
    return svc.update_product(product_id, payload)


@router.delete(
    "/{product_id}",
    response_model=EliminadoOut,
    responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
@router.delete("/{product_id}/", response_model=EliminadoOut, include_in_schema=False)
def delete_product(product_id: str, svc: ProductService = Depends(get_service)):
    return svc.delete_product(product_id)
