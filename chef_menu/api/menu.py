"""Chef menu API endpoints."""
import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from chef_menu.api.auth import require_auth
from chef_menu.core.dependencies import get_menu_catalog
from chef_menu.services.catalog.analytics import menu_summary
from chef_menu.services.catalog.catalog import MenuCatalog
from chef_menu.services.catalog.models import MenuItem, MenuSummary
from chef_menu.services.catalog.validator import MenuValidationError


router = APIRouter(dependencies=[Depends(require_auth)])
logger = logging.getLogger(__name__)


class MenuItemCreate(BaseModel):
    """Form fields for a new dish."""
    dish_name: Optional[str] = None
    description: Optional[str] = None
    course: Optional[str] = None
    price: Optional[Union[str, float]] = None
    image_url: Optional[str] = None


class MenuResponse(BaseModel):
    """Chef dashboard response model."""
    items: List[MenuItem]
    summary: MenuSummary


class RemoveItemResponse(BaseModel):
    """Result of a remove request."""
    success: bool
    removed: bool
    message: str


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.get("/api/menu", response_model=MenuResponse)
async def get_menu(
    request: Request,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    """Get every dish in insertion order with the pricing summary."""
    logger.info(f"[MENU] Request received - Client: {_client_host(request)}")

    try:
        snapshot = catalog.snapshot()
        summary = menu_summary(snapshot)
        logger.debug(f"[MENU] Menu loaded - {summary.total_items} items")
        return MenuResponse(items=list(snapshot), summary=summary)

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu: {str(e)}")


@router.get("/api/menu/stats", response_model=MenuSummary)
async def get_menu_stats(
    request: Request,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    """Get the pricing summary."""
    logger.info(f"[MENU] Stats requested - Client: {_client_host(request)}")

    try:
        return menu_summary(catalog.snapshot())

    except Exception as e:
        logger.error(
            f"[MENU] Error computing menu stats - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu stats: {str(e)}")


@router.post("/api/menu/items", response_model=MenuItem)
async def create_item(
    request: Request,
    payload: MenuItemCreate,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    """Add a dish to the catalog."""
    logger.info(
        f"[MENU] Create item requested - name: {payload.dish_name!r}, "
        f"course: {payload.course!r}, Client: {_client_host(request)}"
    )

    price_text = None if payload.price is None else str(payload.price)
    try:
        return catalog.add(
            dish_name=payload.dish_name,
            description=payload.description,
            course=payload.course,
            price_text=price_text,
            image_url=payload.image_url,
        )
    except MenuValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": e.kind.value, "message": e.message},
        )


@router.delete("/api/menu/items/{item_id}", response_model=RemoveItemResponse)
async def delete_item(
    item_id: str,
    request: Request,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    """Remove a dish. Removing an unknown id is a no-op."""
    logger.info(f"[MENU] Delete item requested - id: {item_id}, Client: {_client_host(request)}")

    removed = catalog.remove(item_id)
    if removed:
        message = f"Menu item {item_id} removed successfully"
    else:
        message = f"No menu item with id {item_id}"
    return RemoveItemResponse(success=True, removed=removed, message=message)
