# catalog_service/domain/schemas.py
from typing import Any, Dict, List

from pydantic import BaseModel


class RespuestaBase(BaseModel):
    """Sobre común de todas las respuestas."""

    estado: str
    mensaje: str


class ListaOut(RespuestaBase):
    """Listado; `datos_recibidos` solo aparece cuando se aplicó el filtro."""

    datos_recibidos: Dict[str, str | List[str]] | None = None
    data: List[Dict[str, Any]]


class CreadoOut(RespuestaBase):
    datos_recibidos: Dict[str, Any]
    recurso: Dict[str, Any]
    codigo: int


class ActualizadoOut(RespuestaBase):
    datos_recibidos: Dict[str, Any]
    recurso: Dict[str, Any]
    codigo: int


class EliminadoOut(RespuestaBase):
    recurso_eliminado: Dict[str, Any]
    codigo: int


class ErrorOut(RespuestaBase):
    codigo: int
