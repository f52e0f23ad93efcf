"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chef_menu.api import auth, guest, health, menu
from chef_menu.core.config import settings
from chef_menu.core.logging import setup_logging
from chef_menu.services.catalog.catalog import MenuCatalog
from chef_menu.services.catalog.seed import load_seed_file

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    catalog = MenuCatalog()
    if settings.menu_seed_file:
        load_seed_file(catalog, settings.menu_seed_file)
    app.state.catalog = catalog
    logger.info(f"[STARTUP] Catalog ready - {len(catalog)} items")
    yield


app = FastAPI(
    title="Chef Menu",
    description="Menu management for chefs and read-only browsing for guests",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, tags=["auth"])
app.include_router(menu.router, tags=["menu"])
app.include_router(guest.router, tags=["guest"])


@app.get("/")
async def root():
    """API information."""
    return {
        "message": f"{settings.restaurant_name} Menu API",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
