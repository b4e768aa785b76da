# catalog_service/data/seed.py
from catalog_service.repos.product_repo import ProductRepo
from catalog_service.utils.logging import get_logger

logger = get_logger(__name__)

SEED_PRODUCTS = [
    {"id": "a1", "nombre": "Laptop Gamer", "precio": 1200, "stock": 5},
    {"id": "b2", "nombre": "Teclado Mecánico", "precio": 80, "stock": 20},
    {"id": "c3", "nombre": "Monitor 4K", "precio": 450, "stock": 12},
]


def seed(repo: ProductRepo) -> ProductRepo:
    # solo si el catalogo esta vacio
    if repo.count():
        return repo
    for product in SEED_PRODUCTS:
        repo.add_product(product)
    logger.info(f"Catalogo inicializado con {len(SEED_PRODUCTS)} productos de ejemplo")
    return repo
