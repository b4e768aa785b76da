# catalog_service/main.py
from fastapi import FastAPI
import uvicorn

from catalog_service.api.errors import register_error_handlers
from catalog_service.api.routers import productos
from catalog_service.data.seed import seed
from catalog_service.repos.product_repo import ProductRepo
from catalog_service.utils.settings import HOST, PORT, SEED_CATALOG
from catalog_service.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(repo: ProductRepo | None = None) -> FastAPI:
    app = FastAPI(
        title="Product Catalog Service",
        version="1.0.0",
        # "/productos/" se sirve igual que "/productos", sin redirect 307
        redirect_slashes=False,
    )

    # el catalogo vive en la app, no en un global del modulo
    if repo is None:
        repo = ProductRepo()
        if SEED_CATALOG:
            seed(repo)
    app.state.repo = repo

    register_error_handlers(app)

    # Include routers
    app.include_router(productos.router)

    return app


app = create_app()

if __name__ == "__main__":
    logger.info(f"Servidor REST activo en http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
