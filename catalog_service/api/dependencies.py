# catalog_service/api/dependencies.py
from fastapi import Request

from catalog_service.repos.product_repo import ProductRepo
from catalog_service.services.product_service import ProductService


def get_repo(request: Request) -> ProductRepo:
    return request.app.state.repo


def get_service(request: Request) -> ProductService:
    return ProductService(get_repo(request))
