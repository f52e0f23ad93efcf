"""FastAPI dependencies."""
from fastapi import Request

from chef_menu.services.catalog.catalog import MenuCatalog


def get_menu_catalog(request: Request) -> MenuCatalog:
    """Get the catalog owned by the running application."""
    return request.app.state.catalog
