"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from catalog_service.data.seed import SEED_PRODUCTS
from catalog_service.main import create_app
from catalog_service.repos.product_repo import ProductRepo
from catalog_service.services.product_service import ProductService


@pytest.fixture
def repo():
    """Catalog with the three demo products (a1, b2, c3)."""
    return ProductRepo(SEED_PRODUCTS)


@pytest.fixture
def service(repo):
    return ProductService(repo)


@pytest.fixture
def client(repo):
    """Test client over a fresh app bound to the `repo` fixture."""
    return TestClient(create_app(repo))
